from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .filter_spec import ALL
from .ticket import Ticket, is_blank

"""Per-field index of distinct observed values, used to populate choice widgets."""

__all__ = [
    "UniqueValueIndex",
    "build_unique_values",
]


@dataclass(frozen=True)
class UniqueValueIndex:
    technology: tuple[str, ...] = (ALL,)
    client: tuple[str, ...] = (ALL,)
    ticket_type: tuple[str, ...] = (ALL,)
    assigned_to: tuple[str, ...] = (ALL,)
    status: tuple[str, ...] = (ALL,)
    ticket_number: tuple[str, ...] = (ALL,)

    def as_dict(self) -> dict[str, list[str]]:
        return {key: list(getattr(self, attr)) for key, attr in _INDEXED_FIELDS.items()}


_INDEXED_FIELDS = {
    "technology": "technology",
    "client": "client",
    "ticketType": "ticket_type",
    "assignedTo": "assigned_to",
    "status": "status",
    "ticketNumber": "ticket_number",
}


def build_unique_values(tickets: Iterable[Ticket]) -> UniqueValueIndex:
    """Collect distinct values per field in first-seen order, after ``"All"``.

    The value comes from the record key (``ticketType``) and, when that is
    blank, from its capitalized form (``TicketType``).
    """
    collected: dict[str, list[str]] = {attr: [ALL] for attr in _INDEXED_FIELDS.values()}
    for ticket in tickets:
        for key, attr in _INDEXED_FIELDS.items():
            value = ticket.get(key)
            if is_blank(value):
                value = ticket.get(key[0].upper() + key[1:])
            if is_blank(value):
                continue
            value = str(value)
            if value not in collected[attr]:
                collected[attr].append(value)
    return UniqueValueIndex(**{attr: tuple(values) for attr, values in collected.items()})
