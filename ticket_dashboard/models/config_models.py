from __future__ import annotations

from dataclasses import dataclass

"""Configuration model for the dashboard CLI.

Built by ``ticket_dashboard.config.loader.load_config`` after schema
validation; defaults here mirror the schema defaults.
"""

__all__ = [
    "DashboardConfig",
]


@dataclass(frozen=True)
class DashboardConfig:
    """Validated configuration.

    ``null_sentinels`` are stored upper-cased; cells whose stripped,
    upper-cased text matches one of them are read as null.
    """
    source_file: str
    sheet: str | None = None
    header_row: int = 0
    lookback_months: int = 2
    null_sentinels: frozenset[str] = frozenset()
