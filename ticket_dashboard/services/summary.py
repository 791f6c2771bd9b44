from __future__ import annotations

from ..models.dashboard_state import DashboardState
from ..models.ticket import is_blank
from .aggregator import compute_metrics
from .normalizer import parse_date

"""SUMMARY line rendering.

Format:
    SUMMARY loaded={n} filtered={n} open={n} resolved={n} invalid_dates={n}

``loaded`` counts every ticket of the current dataset, the remaining fields
describe the filtered subset except ``invalid_dates``, which counts loaded
tickets whose date cannot be parsed (those never pass a date filter).
"""


def count_invalid_dates(state: DashboardState) -> int:
    return sum(1 for t in state.tickets or () if is_blank(parse_date(t.date)))


def render_summary_line(state: DashboardState) -> str:
    """Render the SUMMARY line for ``state``.

    Examples:
        >>> from ticket_dashboard.services.dashboard import initial_state
        >>> render_summary_line(initial_state())
        'SUMMARY loaded=0 filtered=0 open=0 resolved=0 invalid_dates=0'
    """
    loaded = len(state.tickets or ())
    metrics = compute_metrics(state.filtered or ())
    return (
        f"SUMMARY loaded={loaded} "
        f"filtered={metrics.total_tickets} "
        f"open={metrics.open_tickets} "
        f"resolved={metrics.resolved_tickets} "
        f"invalid_dates={count_invalid_dates(state)}"
    )
