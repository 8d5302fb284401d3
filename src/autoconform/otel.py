"""
OTel span event emission helpers for the derivation engines.

Follows the ``add_span_event()`` pattern: events are only added when the
current span is recording, and only when ``emit_span_events`` is enabled in
the configuration.  Nothing here affects an engine's result.

Usage::

    from autoconform.otel import emit_incomparable

    emit_incomparable(index=2, lhs_kind="integer", rhs_kind="string")
"""

from __future__ import annotations

import logging
from typing import Optional

from opentelemetry import trace as otel_trace

from autoconform.config import get_config

logger = logging.getLogger(__name__)


def add_span_event(
    name: str, attributes: dict[str, str | int | float | bool]
) -> None:
    """Add an event to the current OTel span if it is recording.

    Args:
        name: Event name (e.g. ``"autoconform.ordering.decided"``).
        attributes: Flat dict of span event attributes.
    """
    if not get_config().emit_span_events:
        return
    span = otel_trace.get_current_span()
    if span and span.is_recording():
        span.add_event(name=name, attributes=attributes)


def emit_length_mismatch(lhs_length: int, rhs_length: int) -> None:
    """Event name: ``autoconform.equality.length_mismatch``"""
    logger.debug(
        "Property lists differ in length (%d vs %d); not equal",
        lhs_length,
        rhs_length,
    )
    add_span_event(
        "autoconform.equality.length_mismatch",
        {"lhs.length": lhs_length, "rhs.length": rhs_length},
    )


def emit_incomparable(index: int, lhs_kind: str, rhs_kind: str) -> None:
    """Event name: ``autoconform.ordering.incomparable``

    Emitted for every position the ordering scan skips.
    """
    logger.debug(
        "Position %d incomparable (%s vs %s); skipped", index, lhs_kind, rhs_kind
    )
    add_span_event(
        "autoconform.ordering.incomparable",
        {"position": index, "lhs.kind": lhs_kind, "rhs.kind": rhs_kind},
    )


def emit_ordering_decision(
    is_smaller: bool, decided_at: Optional[int], skipped: int
) -> None:
    """Event name: ``autoconform.ordering.decided``"""
    attrs: dict[str, str | int | float | bool] = {
        "ordering.is_smaller": is_smaller,
        "ordering.skipped": skipped,
    }
    if decided_at is not None:
        attrs["ordering.decided_at"] = decided_at

    logger.debug(
        "Ordering decided: is_smaller=%s at position %s (%d skipped)",
        is_smaller,
        decided_at,
        skipped,
    )
    add_span_event("autoconform.ordering.decided", attrs)
