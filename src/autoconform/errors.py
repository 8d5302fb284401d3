"""
Exceptions raised at the construction edge of autoconform.

The derivation engines themselves never raise for mismatched lengths or
kinds; those degrade to ``False`` / ``Verdict.INCOMPARABLE``.  Only malformed
value wrappers are rejected.
"""

from __future__ import annotations


class AutoConformError(Exception):
    """Base class for autoconform errors."""


class InvalidCharacterError(AutoConformError, ValueError):
    """Raised when a ``Char`` is built from anything but one code point."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Char requires a str of exactly one code point, got {value!r}"
        )
