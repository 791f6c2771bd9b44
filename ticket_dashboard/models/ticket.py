from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

import pandas as pd

"""Canonical ticket model.

A Ticket is built once per load from a raw spreadsheet row and is never
mutated afterwards. Canonical attributes use snake_case in Python; the
record view (``as_record``) exposes them under the camelCase names used by
the dashboard (``ticketNumber``, ``assignedTo`` ...) together with every
original spreadsheet column.
"""

__all__ = [
    "Ticket",
    "UNKNOWN",
    "UNASSIGNED",
    "CANONICAL_KEYS",
    "is_blank",
]

UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"

# record key -> attribute name
CANONICAL_KEYS: dict[str, str] = {
    "id": "id",
    "ticketNumber": "ticket_number",
    "date": "date",
    "technology": "technology",
    "client": "client",
    "ticketType": "ticket_type",
    "assignedTo": "assigned_to",
    "status": "status",
    "responseTime": "response_time",
    "satisfaction": "satisfaction",
}


def is_blank(value: Any) -> bool:
    """True for None, NaN/NaT and empty or whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if pd.api.types.is_scalar(value):
        return bool(pd.isna(value))
    return False


@dataclass(frozen=True)
class Ticket:
    """Normalized support ticket.

    ``date`` keeps the value found in the sheet (string or datetime) or the
    ``"Unknown"`` sentinel; consumers parse it when they need a timestamp.
    ``raw`` holds the original row exactly as read; it is left out of the
    hash so tickets can go into sets and dict keys.
    """
    id: str
    ticket_number: str
    date: Any
    technology: str
    client: str
    ticket_type: str
    assigned_to: str
    status: str
    response_time: float | None = None
    satisfaction: float | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @cached_property
    def _record(self) -> dict[str, Any]:
        record = {key: getattr(self, attr) for key, attr in CANONICAL_KEYS.items()}
        # Colliding raw keys were already folded into the canonical attributes
        record.update((k, v) for k, v in self.raw.items() if k not in record)
        return record

    def as_record(self) -> dict[str, Any]:
        """Return the merged record (canonical keys first, then raw columns)."""
        return dict(self._record)

    def get(self, key: str, default: Any = None) -> Any:
        return self._record.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._record[key]

    def __contains__(self, key: object) -> bool:
        return key in self._record

    @property
    def raw_status(self) -> Any:
        """Status text as it appeared in the sheet, before bucketing."""
        value = self.raw.get("Status")
        if is_blank(value):
            value = self.raw.get("status")
        return None if is_blank(value) else value
