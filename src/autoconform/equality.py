"""Structural equality over two ordered property lists."""

from __future__ import annotations

from typing import Any, Sequence

from autoconform.comparator import values_equal
from autoconform.otel import emit_length_mismatch


def equals(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    """Return True iff both lists have the same length and every position is equal.

    A length mismatch is an ordinary ``False``, not an error.  Stops at the
    first unequal position.
    """
    if len(lhs) != len(rhs):
        emit_length_mismatch(len(lhs), len(rhs))
        return False
    return all(values_equal(l, r) for l, r in zip(lhs, rhs))
