from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .filter_spec import DEFAULT_LOOKBACK_MONTHS, FilterSpec
from .ticket import Ticket
from .unique_values import UniqueValueIndex

"""Dashboard session state.

The whole session lives in one immutable DashboardState. Commands in
``ticket_dashboard.services.dashboard`` take a state and return a new one;
nothing is mutated in place, so presentation code can hold on to any
snapshot safely.
"""

__all__ = [
    "Selection",
    "DashboardState",
]


@dataclass(frozen=True)
class Selection:
    """Drill-down result for one category/value pair."""
    category: str
    value: str
    tickets: tuple[Ticket, ...]


@dataclass(frozen=True)
class DashboardState:
    filters: FilterSpec  # working copy edited by the user
    applied_filters: FilterSpec  # copy that produced ``filtered``
    raw_rows: tuple[Mapping[str, Any], ...] | None = None
    tickets: tuple[Ticket, ...] | None = None
    filtered: tuple[Ticket, ...] | None = None
    unique_values: UniqueValueIndex = field(default_factory=UniqueValueIndex)
    selection: Selection | None = None
    panel_open: bool = False
    source: str | None = None
    lookback_months: int = DEFAULT_LOOKBACK_MONTHS

    @property
    def loaded(self) -> bool:
        return self.tickets is not None

    @property
    def has_pending_filters(self) -> bool:
        return self.filters != self.applied_filters

    @property
    def selected_tickets(self) -> tuple[Ticket, ...] | None:
        return self.selection.tickets if self.selection else None

    @property
    def selected_category(self) -> str | None:
        return self.selection.category if self.selection else None

    @property
    def selected_value(self) -> str | None:
        return self.selection.value if self.selection else None
