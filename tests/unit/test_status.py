from __future__ import annotations

import pytest

from ticket_dashboard.services.status import (
    FILTER_OPEN_STATUSES,
    METRIC_OPEN_STATUSES,
    normalize_status,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("In Review", "Open"),
        ("in progress", "Open"),
        ("  HOLD ", "Open"),
        ("Resolved", "Closed"),
        ("closed", "Closed"),
        ("", "Unknown"),
        ("Foo", "Unknown"),
        ("Pending", "Unknown"),
        ("Open", "Unknown"),
        (None, "Unknown"),
    ],
)
def test_normalize_status(raw, expected):
    assert normalize_status(raw) == expected


def test_vocabularies_stay_distinct():
    # "Review" is only known to the filter, "pending" only to the metrics
    assert "Review" in FILTER_OPEN_STATUSES
    assert normalize_status("Review") == "Unknown"
    assert "pending" in METRIC_OPEN_STATUSES
    assert normalize_status("pending") == "Unknown"
