"""
Type-erased pairwise comparison of two opaque values.

``compare_values`` is a fixed dispatch over the closed set of kinds in
``autoconform.kinds``: two values are ordered only when their kinds match
exactly.  Everything else is ``Verdict.INCOMPARABLE``.

``values_equal`` is the equality mode used by the equality engine.  Inside
the closed set it reads the comparator's verdict; outside it, two values are
equal only if they share a concrete type and compare ``==``.

Usage::

    from autoconform.comparator import Verdict, compare_values

    compare_values(1, 2)      # Verdict.LESS_THAN
    compare_values(1, "2")    # Verdict.INCOMPARABLE
    compare_values(1, 1.0)    # Verdict.INCOMPARABLE
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from autoconform.kinds import ValueKind, kind_of, ordering_key

_FLOATING_KINDS = (ValueKind.DOUBLE, ValueKind.FLOAT)


class Verdict(str, Enum):
    """Tri-state comparison result, plus the incomparable case."""

    LESS_THAN = "less_than"
    EQUAL = "equal"
    GREATER_THAN = "greater_than"
    INCOMPARABLE = "incomparable"

    @property
    def is_definite(self) -> bool:
        return self is not Verdict.INCOMPARABLE


def _three_way(lhs: Any, rhs: Any) -> Verdict:
    # Neither smaller nor greater counts as equal, NaN included.
    if lhs < rhs:
        return Verdict.LESS_THAN
    if lhs > rhs:
        return Verdict.GREATER_THAN
    return Verdict.EQUAL


def compare_values(lhs: Any, rhs: Any) -> Verdict:
    """Compare two values of the same supported kind.

    Returns ``Verdict.INCOMPARABLE`` if either value is outside the closed
    set or the two kinds differ.  Never raises.
    """
    lhs_kind = kind_of(lhs)
    if lhs_kind is None or lhs_kind is not kind_of(rhs):
        return Verdict.INCOMPARABLE
    return _three_way(ordering_key(lhs), ordering_key(rhs))


def values_equal(lhs: Any, rhs: Any) -> bool:
    """Value equality for one position of an equatable list."""
    lhs_kind = kind_of(lhs)
    if lhs_kind is not None and kind_of(rhs) is not None:
        if lhs_kind in _FLOATING_KINDS and lhs_kind is kind_of(rhs):
            # NaN equals only NaN, unlike the ordering verdict.
            l, r = ordering_key(lhs), ordering_key(rhs)
            if math.isnan(l) or math.isnan(r):
                return math.isnan(l) and math.isnan(r)
            return l == r
        return compare_values(lhs, rhs) is Verdict.EQUAL
    if type(lhs) is not type(rhs):
        return False
    return lhs is rhs or bool(lhs == rhs)
