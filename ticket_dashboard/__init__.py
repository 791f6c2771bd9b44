"""Ticket analytics dashboard core.

Normalizes spreadsheet exports of support tickets into canonical records and
derives filtered subsets, chart aggregates and drill-down selections from them.
"""

__version__ = "0.3.0"
