from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.aggregates import CategoryCount, TicketMetrics, TimeSeriesPoint
from ..models.ticket import UNKNOWN, Ticket, is_blank
from .field_resolver import resolve
from .normalizer import parse_date
from .status import METRIC_OPEN_STATUSES, METRIC_RESOLVED_STATUSES

"""Chart aggregates derived from a ticket subset."""

__all__ = [
    "ticket_day",
    "time_series",
    "category_counts",
    "compute_metrics",
]

logger = logging.getLogger(__name__)


def ticket_day(ticket: Ticket) -> str | None:
    """Calendar day (YYYY-MM-DD) a ticket is charted under, or None.

    A raw ``Date`` column wins over the canonical date.
    """
    value = ticket.get("Date")
    if is_blank(value):
        value = ticket.date
    ts = parse_date(value)
    if is_blank(ts):
        return None
    return ts.strftime("%Y-%m-%d")


def time_series(tickets: Iterable[Ticket]) -> list[TimeSeriesPoint]:
    """Count tickets per calendar day, ascending by day.

    The day comes from a raw ``Date`` column when present, otherwise from the
    canonical date. Tickets whose date does not parse (including the
    ``Unknown`` sentinel) are left out.
    """
    counts: dict[str, int] = {}
    skipped = 0
    for ticket in tickets:
        day = ticket_day(ticket)
        if day is None:
            skipped += 1
            continue
        counts[day] = counts.get(day, 0) + 1
    if skipped:
        logger.debug("time series skipped %d tickets without a usable date", skipped)
    return [TimeSeriesPoint(date=day, tickets=n) for day, n in sorted(counts.items())]


def category_counts(tickets: Iterable[Ticket], category: str) -> list[CategoryCount]:
    """Count tickets per value of ``category`` in first-seen order.

    >>> from ticket_dashboard.services.normalizer import normalize_rows
    >>> rows = [{"Technology/Platform": "AWS"}, {"Technology": "Azure"}, {}]
    >>> [c.to_dict() for c in category_counts(normalize_rows(rows), "Client")]
    [{'name': 'Unknown', 'value': 3}]
    """
    counts: dict[str, int] = {}
    for ticket in tickets:
        name = str(resolve(ticket, category, default=UNKNOWN))
        counts[name] = counts.get(name, 0) + 1
    return [CategoryCount(name=name, value=n) for name, n in counts.items()]


def compute_metrics(tickets: Iterable[Ticket]) -> TicketMetrics:
    """Total/open/resolved counts using the metrics status vocabulary."""
    total = open_count = resolved_count = 0
    for ticket in tickets:
        total += 1
        status = ticket.raw_status or ticket.status or ""
        status = str(status).lower()
        if status in METRIC_OPEN_STATUSES:
            open_count += 1
        elif status in METRIC_RESOLVED_STATUSES:
            resolved_count += 1
    return TicketMetrics(
        total_tickets=total,
        open_tickets=open_count,
        resolved_tickets=resolved_count,
    )
