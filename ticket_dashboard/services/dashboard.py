from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

import pandas as pd

from ..models.dashboard_state import DashboardState, Selection
from ..models.filter_spec import DEFAULT_LOOKBACK_MONTHS, FilterSpec
from ..models.unique_values import build_unique_values
from . import aggregator, filter_engine, selection
from .normalizer import normalize_rows

"""Dashboard commands.

Each command is a pure transition ``(state, args) -> new state``:

    state = initial_state()
    state = load(state, rows)
    state = update_filters(state, {"technology": "AWS"}, apply_immediately=True)
    state = select_by_category(state, "technology", "AWS")

Staged filter edits (``update_filters`` without ``apply_immediately``) only
change ``state.filters``; ``state.filtered`` changes only when a filter set
is applied, and every apply drops the current selection.
"""

__all__ = [
    "EmptyDatasetError",
    "CHART_CATEGORIES",
    "initial_state",
    "load",
    "update_filters",
    "apply_filters",
    "reset_filters",
    "select_by_category",
    "clear_selection",
    "toggle_panel",
    "chart_data",
]

logger = logging.getLogger(__name__)

# chart key -> category name passed to the aggregator
CHART_CATEGORIES: dict[str, str] = {
    "technology": "Technology",
    "client": "Client",
    "ticketType": "TicketType",
    "status": "Status",
    "assignedTo": "Assigned to",
}


class EmptyDatasetError(Exception):
    """Raised when a load receives no data rows; the previous state stays valid."""


def initial_state(
    now: datetime | pd.Timestamp | None = None,
    lookback_months: int = DEFAULT_LOOKBACK_MONTHS,
) -> DashboardState:
    defaults = FilterSpec.default(now, lookback_months)
    return DashboardState(
        filters=defaults,
        applied_filters=defaults,
        lookback_months=lookback_months,
    )


def load(
    state: DashboardState,
    rows: Iterable[Mapping[str, Any]],
    source: str | None = None,
) -> DashboardState:
    """Replace the dataset with ``rows`` and apply the current filters.

    Raises:
        EmptyDatasetError: ``rows`` is empty. Nothing is replaced.
    """
    rows = tuple(dict(r) for r in rows)
    if not rows:
        raise EmptyDatasetError(f"no data found in {source or 'input'}")
    tickets = tuple(normalize_rows(rows))
    logger.info(f"loaded {len(tickets)} tickets from {source or 'input'}")
    loaded = replace(
        state,
        raw_rows=rows,
        tickets=tickets,
        unique_values=build_unique_values(tickets),
        source=source,
    )
    return apply_filters(loaded, state.filters)


def update_filters(
    state: DashboardState,
    changes: Mapping[str, Any],
    apply_immediately: bool = False,
) -> DashboardState:
    """Edit the working filter copy; apply it too when asked."""
    updated = replace(state, filters=state.filters.merged(changes))
    if apply_immediately:
        return apply_filters(updated, updated.filters)
    return updated


def apply_filters(state: DashboardState, spec: FilterSpec | None = None) -> DashboardState:
    """Filter the loaded tickets with ``spec`` (default: the working copy).

    Without loaded data the state is returned unchanged.
    """
    if state.tickets is None:
        return state
    spec = spec or state.filters
    filtered = tuple(filter_engine.apply_filters(state.tickets, spec))
    return replace(state, applied_filters=spec, filtered=filtered, selection=None)


def reset_filters(
    state: DashboardState,
    now: datetime | pd.Timestamp | None = None,
) -> DashboardState:
    """Restore default filters and show every loaded ticket, unfiltered."""
    defaults = FilterSpec.default(now, state.lookback_months)
    return replace(
        state,
        filters=defaults,
        applied_filters=defaults,
        filtered=state.tickets,
        selection=None,
    )


def select_by_category(state: DashboardState, category: str, value: str) -> DashboardState:
    """Replace the selection with the filtered tickets matching category/value.

    ``category`` may be a ``chart_data`` key (``status``, ``assignedTo`` ...);
    it is matched with the spelling that chart was counted with, so a slice
    selects exactly the tickets behind it.
    """
    if state.filtered is None:
        return state
    field = CHART_CATEGORIES.get(category, category)
    tickets = tuple(selection.select_by_category(state.filtered, field, value))
    logger.debug(f"selected {len(tickets)} tickets for {category}={value}")
    return replace(
        state,
        selection=Selection(category=category, value=value, tickets=tickets),
        panel_open=True,
    )


def clear_selection(state: DashboardState) -> DashboardState:
    return replace(state, selection=None, panel_open=False)


def toggle_panel(state: DashboardState) -> DashboardState:
    return replace(state, panel_open=not state.panel_open)


def chart_data(state: DashboardState) -> dict[str, Any]:
    """Aggregates for the presentation layer, as plain dicts and lists."""
    tickets = state.filtered or ()
    data: dict[str, Any] = {
        "metrics": aggregator.compute_metrics(tickets).to_dict(),
        "timeSeries": [p.to_dict() for p in aggregator.time_series(tickets)],
    }
    for key, category in CHART_CATEGORIES.items():
        data[key] = [c.to_dict() for c in aggregator.category_counts(tickets, category)]
    data["uniqueValues"] = state.unique_values.as_dict()
    return data
