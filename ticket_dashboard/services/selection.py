from __future__ import annotations

from collections.abc import Iterable

from ..models.ticket import UNKNOWN, Ticket
from .aggregator import ticket_day
from .field_resolver import FIELD_ALIASES, lookup_aliases, resolve

"""Drill-down selection: the tickets behind one chart slice."""

__all__ = [
    "select_by_category",
]


def _is_date_category(category: str) -> bool:
    return lookup_aliases(category) == FIELD_ALIASES["date"]


def select_by_category(tickets: Iterable[Ticket], category: str, value: str) -> list[Ticket]:
    """Tickets whose resolved ``category`` value equals ``value`` exactly.

    Resolution is the same one ``category_counts`` uses, so selecting a
    chart slice returns exactly the tickets counted in it (missing values
    show up and select as ``Unknown``). Date categories match on the day
    ``time_series`` charts a ticket under.
    """
    if _is_date_category(category):
        return [t for t in tickets if (ticket_day(t) or UNKNOWN) == value]
    return [t for t in tickets if str(resolve(t, category)) == value]
