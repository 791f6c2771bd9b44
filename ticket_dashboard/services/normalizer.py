from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from ..models.ticket import CANONICAL_KEYS, UNASSIGNED, UNKNOWN, Ticket, is_blank
from .field_resolver import resolve
from .status import normalize_status

"""Record normalization: raw spreadsheet rows -> canonical Ticket records.

Canonical values are resolved first; afterwards any raw column whose header
is literally a canonical key (``status``, ``client`` ...) replaces the
resolved value, so a sheet with a lower-case ``status`` column keeps its own
text instead of the Open/Closed/Unknown bucket.
"""

__all__ = [
    "normalize_rows",
    "normalize_row",
    "parse_date",
]

logger = logging.getLogger(__name__)

_NUMERIC_ATTRS = ("response_time", "satisfaction")
_UNPARSED_ATTRS = ("date",) + _NUMERIC_ATTRS


def parse_date(value: Any) -> pd.Timestamp:
    """Parse a cell value into a naive timestamp; NaT when it is not a date.

    Timezone-aware values are converted to UTC first. Never raises.
    """
    if is_blank(value):
        return pd.NaT
    if isinstance(value, str):
        value = value.strip()
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return pd.NaT
    if not isinstance(ts, pd.Timestamp):
        return pd.NaT
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _number(value: Any) -> float | None:
    number = pd.to_numeric(value, errors="coerce")
    return None if pd.isna(number) else float(number)


def normalize_row(row: Mapping[str, Any], index: int) -> Ticket:
    """Build the Ticket for the ``index``-th row of a load."""
    row_id = row.get("ID")
    values: dict[str, Any] = {
        "id": f"ticket-{index}" if is_blank(row_id) else _text(row_id),
        "ticket_number": _text(resolve(row, "ticketNumber")),
        "date": resolve(row, "date"),
        "technology": _text(resolve(row, "technology")),
        "client": _text(resolve(row, "client")),
        "ticket_type": _text(resolve(row, "ticketType")),
        "assigned_to": _text(resolve(row, "assignedTo", UNASSIGNED)),
        "status": normalize_status(row.get("Status") or UNKNOWN),
        "response_time": None,
        "satisfaction": None,
    }

    # raw column named exactly like a canonical key wins
    for key, attr in CANONICAL_KEYS.items():
        raw_value = row.get(key)
        if is_blank(raw_value):
            continue
        if attr in _NUMERIC_ATTRS:
            values[attr] = _number(raw_value)
        elif attr in _UNPARSED_ATTRS:
            values[attr] = raw_value
        else:
            values[attr] = _text(raw_value)

    return Ticket(**values, raw=dict(row))


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> list[Ticket]:
    """Normalize every raw row, preserving order.

    Missing or oddly named columns never raise; they resolve to the
    ``Unknown``/``Unassigned`` defaults.
    """
    tickets = [normalize_row(row, i) for i, row in enumerate(rows)]
    logger.debug("normalized %d rows", len(tickets))
    return tickets
