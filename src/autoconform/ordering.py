"""
Ordering derived from one primitive, ``is_smaller``.

The scan starts from the assumption that ``lhs`` is smaller and walks the
common prefix of both lists:

- ``GREATER_THAN`` or ``EQUAL`` at a position flips the assumption to False
  and stops the scan.
- ``INCOMPARABLE`` skips the position; the assumption is unchanged.
- ``LESS_THAN`` does not stop the scan; later positions can still flip it.

This is intentionally not a conventional lexicographic compare, and it has
two visible consequences that callers must be aware of:

- ``[1, 5]`` vs ``[1, 3]`` is smaller in neither direction, because the
  first position is ``EQUAL``.
- A list whose positions are all incomparable (or an empty list) is
  smaller than the other list in both directions.

The derived operators follow::

    a < b   := is_smaller(a, b)
    a > b   := is_smaller(b, a)
    a <= b  := equals(a, b) or is_smaller(a, b)
    a >= b  := equals(a, b) or is_smaller(b, a)

``explain_order`` runs the same scan and reports per-position verdicts.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from autoconform.comparator import Verdict, compare_values
from autoconform.equality import equals
from autoconform.kinds import kind_name
from autoconform.otel import emit_incomparable, emit_ordering_decision


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class PositionCheck(BaseModel):
    """Verdict for one scanned position."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(..., ge=0, description="Position in the property list")
    lhs_kind: str = Field(..., description="Kind (or type name) of the left value")
    rhs_kind: str = Field(..., description="Kind (or type name) of the right value")
    verdict: Verdict = Field(..., description="Comparator verdict at this position")

    @property
    def skipped(self) -> bool:
        return self.verdict is Verdict.INCOMPARABLE


class OrderingExplanation(BaseModel):
    """Trace of one ``is_smaller`` scan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    is_smaller: bool = Field(..., description="Result of the scan")
    decided_at: Optional[int] = Field(
        None, description="Position that flipped the assumption (None if never)"
    )
    positions_compared: int = Field(
        0, description="Number of positions visited before the scan ended"
    )
    skipped: int = Field(0, description="Number of incomparable positions")
    checks: list[PositionCheck] = Field(
        default_factory=list, description="Per-position verdicts, in scan order"
    )


# ---------------------------------------------------------------------------
# Scan
# ---------------------------------------------------------------------------


def _scan(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    checks: Optional[list[PositionCheck]] = None,
) -> tuple[bool, Optional[int], int]:
    smaller = True
    decided_at: Optional[int] = None
    skipped = 0

    for index, (l, r) in enumerate(zip(lhs, rhs)):
        verdict = compare_values(l, r)
        if checks is not None or not verdict.is_definite:
            lhs_kind, rhs_kind = kind_name(l), kind_name(r)
        if checks is not None:
            checks.append(
                PositionCheck(
                    index=index,
                    lhs_kind=lhs_kind,
                    rhs_kind=rhs_kind,
                    verdict=verdict,
                )
            )
        if not verdict.is_definite:
            skipped += 1
            emit_incomparable(index, lhs_kind, rhs_kind)
            continue
        if verdict is not Verdict.LESS_THAN:
            smaller = False
            decided_at = index
            break

    emit_ordering_decision(smaller, decided_at, skipped)
    return smaller, decided_at, skipped


def is_smaller(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    """Return True if *lhs* orders before *rhs*."""
    return _scan(lhs, rhs)[0]


def explain_order(lhs: Sequence[Any], rhs: Sequence[Any]) -> OrderingExplanation:
    """Run the ``is_smaller`` scan and return its trace."""
    checks: list[PositionCheck] = []
    smaller, decided_at, skipped = _scan(lhs, rhs, checks)
    return OrderingExplanation(
        is_smaller=smaller,
        decided_at=decided_at,
        positions_compared=len(checks),
        skipped=skipped,
        checks=checks,
    )


# ---------------------------------------------------------------------------
# Derived operators
# ---------------------------------------------------------------------------


def less_than(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    return is_smaller(lhs, rhs)


def greater_than(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    return is_smaller(rhs, lhs)


def less_equal(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    return equals(lhs, rhs) or is_smaller(lhs, rhs)


def greater_equal(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    return equals(lhs, rhs) or is_smaller(rhs, lhs)
