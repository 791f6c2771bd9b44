"""Domain models for the ticket analytics dashboard.

Every model is a frozen dataclass; state changes produce new instances.
"""

from .aggregates import CategoryCount, TicketMetrics, TimeSeriesPoint
from .config_models import DashboardConfig
from .dashboard_state import DashboardState, Selection
from .error_record import ErrorRecord
from .filter_spec import ALL, FilterSpec
from .ticket import UNASSIGNED, UNKNOWN, Ticket
from .unique_values import UniqueValueIndex, build_unique_values

__all__ = [
    # Configuration
    "DashboardConfig",
    # Records
    "Ticket",
    "UNKNOWN",
    "UNASSIGNED",
    "ErrorRecord",
    # Filtering and selection
    "ALL",
    "FilterSpec",
    "Selection",
    "UniqueValueIndex",
    "build_unique_values",
    "DashboardState",
    # Aggregates
    "TicketMetrics",
    "TimeSeriesPoint",
    "CategoryCount",
]
