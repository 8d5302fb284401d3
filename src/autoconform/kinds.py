"""
The closed set of value kinds the comparator knows how to order.

Python only has one ``int``, one ``float`` and one ``str`` type, so the two
kinds it cannot express natively get small wrappers:

- ``Float32`` -- a single-precision float, rounded to binary32 on construction
- ``Char`` -- a single character, distinct from a one-letter ``str``

Kinds are decided by concrete type, never by content or subclassing::

    from autoconform.kinds import Char, Float32, ValueKind, kind_of

    kind_of(3)             # ValueKind.INTEGER
    kind_of(True)          # None (bool is not an integer here)
    kind_of("a")           # ValueKind.STRING
    kind_of(Char("a"))     # ValueKind.CHARACTER
    kind_of(Float32(0.1))  # ValueKind.FLOAT
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from autoconform.errors import InvalidCharacterError


class ValueKind(str, Enum):
    """Concrete primitive kinds supported by ``compare_values``."""

    INTEGER = "integer"
    DOUBLE = "double"
    FLOAT = "float"
    STRING = "string"
    CHARACTER = "character"


def _to_binary32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True, order=True)
class Float32:
    """A single-precision float value.

    The stored ``value`` is the nearest binary32 number, so
    ``Float32(0.1) != 0.1`` but ``Float32(0.1) == Float32(0.1)``.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_binary32(float(self.value)))

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class Char:
    """A single character (one code point)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise InvalidCharacterError(self.value)

    def __str__(self) -> str:
        return self.value


_KINDS_BY_TYPE: dict[type, ValueKind] = {
    int: ValueKind.INTEGER,
    float: ValueKind.DOUBLE,
    Float32: ValueKind.FLOAT,
    str: ValueKind.STRING,
    Char: ValueKind.CHARACTER,
}


def kind_of(value: Any) -> Optional[ValueKind]:
    """Return the kind of *value*, or ``None`` if it is outside the closed set."""
    return _KINDS_BY_TYPE.get(type(value))


def kind_name(value: Any) -> str:
    """Kind name for diagnostics; falls back to the Python type name."""
    kind = kind_of(value)
    if kind is not None:
        return kind.value
    return type(value).__name__


def ordering_key(value: Any) -> Any:
    """Unwrap a closed-set value to the payload that is compared."""
    if isinstance(value, (Float32, Char)):
        return value.value
    return value
