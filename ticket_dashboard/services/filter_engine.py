from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd

from ..models.filter_spec import ALL, CATEGORICAL_FILTER_FIELDS, FilterSpec
from ..models.ticket import Ticket
from .normalizer import parse_date
from .status import CLOSED, FILTER_CLOSED_STATUSES, FILTER_OPEN_STATUSES, OPEN

"""Filter evaluation.

A ticket passes when its date lies within the inclusive range, every
categorical filter is ``All`` or equal to the ticket value, and the status
filter matches. Output order is input order.
"""

__all__ = [
    "apply_filters",
    "ticket_matches",
    "status_matches",
]

logger = logging.getLogger(__name__)


def status_matches(ticket: Ticket, wanted: str) -> bool:
    """Status filter check.

    ``Open`` and ``Closed`` first test the raw status text against the
    literal filter sets; any other value (and the fallback for those two)
    is an exact comparison with the canonical status.
    """
    if wanted == ALL:
        return True
    raw = ticket.raw_status
    if isinstance(raw, str):
        if wanted == OPEN and raw in FILTER_OPEN_STATUSES:
            return True
        if wanted == CLOSED and raw in FILTER_CLOSED_STATUSES:
            return True
    return ticket.status == wanted


def _in_range(ticket: Ticket, start: pd.Timestamp, end: pd.Timestamp) -> bool:
    ts = parse_date(ticket.date)
    # NaT compares False against everything
    return bool(ts >= start) and bool(ts <= end)


def ticket_matches(
    ticket: Ticket,
    spec: FilterSpec,
    *,
    start: pd.Timestamp | None = None,
    end: pd.Timestamp | None = None,
) -> bool:
    if start is None:
        start = parse_date(spec.start_date)
    if end is None:
        end = parse_date(spec.end_date)
    if not _in_range(ticket, start, end):
        return False
    for attr in CATEGORICAL_FILTER_FIELDS:
        wanted = getattr(spec, attr)
        if wanted != ALL and getattr(ticket, attr) != wanted:
            return False
    return status_matches(ticket, spec.status)


def apply_filters(tickets: Iterable[Ticket], spec: FilterSpec) -> list[Ticket]:
    """Return the tickets passing ``spec``; pure, order preserving."""
    start = parse_date(spec.start_date)
    end = parse_date(spec.end_date)
    tickets = list(tickets)
    result = [t for t in tickets if ticket_matches(t, spec, start=start, end=end)]
    logger.debug("filter kept %d of %d tickets", len(result), len(tickets))
    return result
