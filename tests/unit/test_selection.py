from __future__ import annotations

from ticket_dashboard.services.aggregator import category_counts
from ticket_dashboard.services.normalizer import normalize_rows
from ticket_dashboard.services.selection import select_by_category


def _tickets():
    return normalize_rows([
        {"ID": "1", "Technology/Platform": "AWS", "Assigned to": "Lena", "Ticket Type": "Bug", "Status": "Hold"},
        {"ID": "2", "Technology": "Azure", "AssignedTo": "Marco", "TicketType": "Bug", "Status": "Closed"},
        {"ID": "3", "technology": "AWS", "Status": "In Progress", "Priority": "P1"},
    ])


def test_select_technology_across_header_spellings():
    assert [t.id for t in select_by_category(_tickets(), "technology", "AWS")] == ["1", "3"]
    assert [t.id for t in select_by_category(_tickets(), "Technology", "Azure")] == ["2"]


def test_select_assigned_to_and_ticket_type():
    assert [t.id for t in select_by_category(_tickets(), "assignedto", "Marco")] == ["2"]
    assert [t.id for t in select_by_category(_tickets(), "ticketType", "Bug")] == ["1", "2"]


def test_select_status_bucket_and_raw_text():
    # lower-case "status" is the canonical bucket, "Status" the raw column
    assert [t.id for t in select_by_category(_tickets(), "status", "Open")] == ["1", "3"]
    assert [t.id for t in select_by_category(_tickets(), "Status", "In Progress")] == ["3"]


def test_select_generic_field_and_missing_values():
    assert [t.id for t in select_by_category(_tickets(), "priority", "P1")] == ["3"]
    assert [t.id for t in select_by_category(_tickets(), "priority", "Unknown")] == ["1", "2"]


def test_select_no_match():
    assert select_by_category(_tickets(), "technology", "GCP") == []


def test_selection_agrees_with_category_counts():
    tickets = _tickets()
    for category in ("Technology", "Assigned to", "TicketType", "Status", "Client"):
        for count in category_counts(tickets, category):
            assert len(select_by_category(tickets, category, count.name)) == count.value


def test_select_date_matches_charted_day():
    tickets = normalize_rows([
        {"ID": "1", "Assigned Date": "2024-03-01 09:30"},
        {"ID": "2", "Assigned Date": "2024-02-01", "Date": "2024-03-01"},
        {"ID": "3", "Assigned Date": "not a date"},
    ])
    assert [t.id for t in select_by_category(tickets, "date", "2024-03-01")] == ["1", "2"]
    assert [t.id for t in select_by_category(tickets, "date", "2024-02-01")] == []
    assert [t.id for t in select_by_category(tickets, "date", "Unknown")] == ["3"]


def test_assigned_to_header_order_when_both_spellings_present():
    # "AssignedTo" outranks "Assigned to" for charts and drill-down alike
    tickets = normalize_rows([{"ID": "1", "Assigned to": "Lena", "AssignedTo": "Marco"}])
    assert tickets[0].assigned_to == "Marco"
    assert [c.to_dict() for c in category_counts(tickets, "Assigned to")] == [{"name": "Marco", "value": 1}]
    assert [t.id for t in select_by_category(tickets, "assignedTo", "Marco")] == ["1"]
    assert select_by_category(tickets, "assignedTo", "Lena") == []
