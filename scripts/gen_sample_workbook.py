#!/usr/bin/env python3
"""Sample workbook generator.

Writes a synthetic support-ticket export for trying out the dashboard CLI.
Header spellings can be varied to mimic exports from different tools:
- "platform": Technology/Platform, Assigned to, Ticket Type
- "plain":    Technology, AssignedTo, TicketType
- "camel":    technology, assignedTo, ticketType
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADER_STYLES: dict[str, dict[str, str]] = {
    "platform": {"technology": "Technology/Platform", "assigned": "Assigned to", "type": "Ticket Type"},
    "plain": {"technology": "Technology", "assigned": "AssignedTo", "type": "TicketType"},
    "camel": {"technology": "technology", "assigned": "assignedTo", "type": "ticketType"},
}

TECHNOLOGIES = ["AWS", "Azure", "GCP", "SAP", "Salesforce"]
CLIENTS = ["Acme", "Globex", "Initech", "Umbrella"]
TICKET_TYPES = ["Incident", "Service Request", "Change", "Problem"]
ENGINEERS = ["Priya", "Marco", "Lena", "Tomasz", None]
STATUSES = ["New", "In Progress", "Hold", "In Review", "Awaiting Info", "Pending",
            "Resolved", "Closed", "Cancelled"]


def generate_tickets(rows: int, style: str, days: int = 60, seed: int = 42) -> pd.DataFrame:
    """Build a DataFrame of ``rows`` tickets dated within the last ``days`` days."""
    rng = np.random.default_rng(seed)
    names = HEADER_STYLES[style]

    end = pd.Timestamp.now().normalize()
    offsets = rng.integers(0, days, rows)
    hours = rng.integers(8, 18, rows)
    dates = [end - pd.Timedelta(days=int(d)) + pd.Timedelta(hours=int(h)) for d, h in zip(offsets, hours)]

    return pd.DataFrame({
        "ID": [str(i) for i in range(1, rows + 1)],
        "Ticket Number": [f"INC{100000 + i}" for i in range(1, rows + 1)],
        "Assigned Date": [d.strftime("%Y-%m-%d %H:%M") for d in dates],
        names["technology"]: rng.choice(TECHNOLOGIES, rows).tolist(),
        "Client": rng.choice(CLIENTS, rows).tolist(),
        names["type"]: rng.choice(TICKET_TYPES, rows).tolist(),
        names["assigned"]: [ENGINEERS[i] for i in rng.integers(0, len(ENGINEERS), rows)],
        "Status": rng.choice(STATUSES, rows).tolist(),
    })


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a synthetic ticket export workbook")
    parser.add_argument("output", type=Path, help="Output .xlsx path")
    parser.add_argument("--rows", type=int, default=500, help="Number of tickets (default: 500)")
    parser.add_argument("--style", choices=sorted(HEADER_STYLES), default="platform",
                        help="Header spelling style (default: platform)")
    parser.add_argument("--days", type=int, default=60, help="Spread tickets over this many days")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.days <= 0:
        print("Error: --days must be positive", file=sys.stderr)
        return 1

    df = generate_tickets(args.rows, args.style, args.days, args.seed)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(args.output, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Tickets", index=False)
    print(f"Created {args.output} ({args.rows} tickets, style={args.style})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
