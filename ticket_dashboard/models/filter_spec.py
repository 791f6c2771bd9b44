from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace
from datetime import date, datetime
from typing import Any

import pandas as pd

"""Filter specification model.

Categorical fields hold either ``"All"`` or one exact value taken from the
loaded dataset. Date bounds are inclusive.
"""

__all__ = [
    "ALL",
    "FilterSpec",
    "CATEGORICAL_FILTER_FIELDS",
    "DEFAULT_LOOKBACK_MONTHS",
]

ALL = "All"
DEFAULT_LOOKBACK_MONTHS = 2

# Accepted spellings -> attribute name
_FIELD_NAMES: dict[str, str] = {
    "startDate": "start_date",
    "endDate": "end_date",
    "technology": "technology",
    "client": "client",
    "ticketType": "ticket_type",
    "assignedTo": "assigned_to",
    "status": "status",
    "ticketNumber": "ticket_number",
}
_FIELD_NAMES.update({v: v for v in list(_FIELD_NAMES.values())})

# attribute name -> ticket attribute compared for exact equality
CATEGORICAL_FILTER_FIELDS = (
    "technology",
    "client",
    "ticket_type",
    "assigned_to",
    "ticket_number",
)


def _to_timestamp(value: Any) -> pd.Timestamp:
    if isinstance(value, pd.Timestamp):
        ts = value
    elif isinstance(value, (datetime, date, str)):
        ts = pd.Timestamp(value)
    else:
        raise ValueError(f"unsupported date bound: {value!r}")
    if ts is pd.NaT:
        raise ValueError(f"invalid date bound: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


@dataclass(frozen=True)
class FilterSpec:
    start_date: pd.Timestamp
    end_date: pd.Timestamp
    technology: str = ALL
    client: str = ALL
    ticket_type: str = ALL
    assigned_to: str = ALL
    status: str = ALL
    ticket_number: str = ALL

    @classmethod
    def default(
        cls,
        now: datetime | pd.Timestamp | None = None,
        lookback_months: int = DEFAULT_LOOKBACK_MONTHS,
    ) -> FilterSpec:
        """All categories, dates from ``now - lookback_months`` up to ``now``."""
        end = _to_timestamp(now) if now is not None else pd.Timestamp.now()
        start = end - pd.DateOffset(months=lookback_months)
        return cls(start_date=start, end_date=end)

    def merged(self, partial: Mapping[str, Any]) -> FilterSpec:
        """Return a copy with the keys of ``partial`` replaced.

        Keys may be given in camelCase (``ticketType``) or snake_case
        (``ticket_type``).

        Raises:
            ValueError: unknown key or unparsable date bound
        """
        changes: dict[str, Any] = {}
        for key, value in partial.items():
            name = _FIELD_NAMES.get(key)
            if name is None:
                raise ValueError(f"unknown filter field: {key}")
            if name in ("start_date", "end_date"):
                value = _to_timestamp(value)
            else:
                value = ALL if value is None else str(value)
            changes[name] = value
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["start_date"] = self.start_date.isoformat()
        data["end_date"] = self.end_date.isoformat()
        return data
