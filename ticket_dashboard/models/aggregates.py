from __future__ import annotations

from dataclasses import dataclass

"""Chart-ready aggregate shapes.

``to_dict`` emits the key names the chart widgets consume.
"""

__all__ = [
    "TicketMetrics",
    "TimeSeriesPoint",
    "CategoryCount",
]


@dataclass(frozen=True)
class TicketMetrics:
    total_tickets: int = 0
    open_tickets: int = 0
    resolved_tickets: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalTickets": self.total_tickets,
            "openTickets": self.open_tickets,
            "resolvedTickets": self.resolved_tickets,
        }


@dataclass(frozen=True)
class TimeSeriesPoint:
    date: str  # YYYY-MM-DD
    tickets: int

    def to_dict(self) -> dict[str, object]:
        return {"date": self.date, "tickets": self.tickets}


@dataclass(frozen=True)
class CategoryCount:
    name: str
    value: int

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "value": self.value}
