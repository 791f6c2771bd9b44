from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from ticket_dashboard.models.filter_spec import ALL, FilterSpec


def test_default_window_and_categories():
    spec = FilterSpec.default(now=pd.Timestamp("2024-03-15 12:00"))
    assert spec.end_date == pd.Timestamp("2024-03-15 12:00")
    assert spec.start_date == pd.Timestamp("2024-01-15 12:00")
    assert spec.technology == ALL
    assert spec.status == ALL
    assert spec.ticket_number == ALL


def test_default_custom_lookback():
    spec = FilterSpec.default(now=pd.Timestamp("2024-03-15"), lookback_months=6)
    assert spec.start_date == pd.Timestamp("2023-09-15")


def test_merged_accepts_camel_and_snake_case():
    spec = FilterSpec.default(now=pd.Timestamp("2024-03-15"))
    updated = spec.merged({"ticketType": "Incident", "assigned_to": "Lena", "startDate": date(2024, 1, 1)})
    assert updated.ticket_type == "Incident"
    assert updated.assigned_to == "Lena"
    assert updated.start_date == pd.Timestamp("2024-01-01")
    # original untouched
    assert spec.ticket_type == ALL


def test_merged_none_resets_to_all():
    spec = FilterSpec.default().merged({"client": "Acme"})
    assert spec.merged({"client": None}).client == ALL


def test_merged_tz_aware_bound_becomes_naive_utc():
    spec = FilterSpec.default().merged({"endDate": "2024-01-05T10:00:00+01:00"})
    assert spec.end_date == pd.Timestamp("2024-01-05 09:00")


def test_merged_rejects_unknown_field():
    with pytest.raises(ValueError, match="unknown filter field"):
        FilterSpec.default().merged({"priority": "P1"})


def test_merged_rejects_invalid_date():
    with pytest.raises(ValueError):
        FilterSpec.default().merged({"startDate": "not-a-date"})


def test_filter_spec_is_frozen():
    spec = FilterSpec.default()
    with pytest.raises(AttributeError):
        spec.client = "Acme"


def test_to_dict_serializes_dates():
    spec = FilterSpec.default(now=pd.Timestamp("2024-03-15"))
    data = spec.to_dict()
    assert data["end_date"] == "2024-03-15T00:00:00"
    assert data["client"] == ALL
