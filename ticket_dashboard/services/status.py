from __future__ import annotations

from typing import Any

from ..models.ticket import UNKNOWN, is_blank

"""Status vocabularies.

Three independent vocabularies are in use and are intentionally kept apart:

* bucketing (``normalize_status``): lower-cased, trimmed match
* the status filter: case-sensitive literal sets on the raw text
* the summary metrics: a broader lower-cased vocabulary on the raw text
"""

__all__ = [
    "OPEN",
    "CLOSED",
    "BUCKET_OPEN_STATUSES",
    "BUCKET_CLOSED_STATUSES",
    "FILTER_OPEN_STATUSES",
    "FILTER_CLOSED_STATUSES",
    "METRIC_OPEN_STATUSES",
    "METRIC_RESOLVED_STATUSES",
    "normalize_status",
]

OPEN = "Open"
CLOSED = "Closed"

BUCKET_OPEN_STATUSES = frozenset({"in progress", "hold", "in review"})
BUCKET_CLOSED_STATUSES = frozenset({"closed", "resolved"})

FILTER_OPEN_STATUSES = frozenset({"In Progress", "Hold", "Review", "Open"})
FILTER_CLOSED_STATUSES = frozenset({"Closed", "Resolved"})

METRIC_OPEN_STATUSES = frozenset(
    {"new", "in progress", "hold", "in review", "awaiting info", "pending"}
)
METRIC_RESOLVED_STATUSES = frozenset({"resolved", "closed", "cancelled"})


def normalize_status(raw_status: Any) -> str:
    """Map free-text status to ``Open``, ``Closed`` or ``Unknown``.

    >>> normalize_status(" In Review ")
    'Open'
    >>> normalize_status("RESOLVED")
    'Closed'
    >>> normalize_status("Pending")
    'Unknown'
    """
    if is_blank(raw_status):
        return UNKNOWN
    s = str(raw_status).strip().lower()
    if s in BUCKET_OPEN_STATUSES:
        return OPEN
    if s in BUCKET_CLOSED_STATUSES:
        return CLOSED
    return UNKNOWN
