from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from ticket_dashboard.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ticket_dashboard.excel.reader import SheetHeaderError, WorkbookReadError, read_rows
from ticket_dashboard.logging.error_log import ErrorLogBuffer, ErrorRecord
from ticket_dashboard.logging.init import log_summary, setup_logging
from ticket_dashboard.models.ticket import is_blank
from ticket_dashboard.services.aggregator import category_counts, time_series
from ticket_dashboard.services.dashboard import (
    EmptyDatasetError,
    chart_data,
    initial_state,
    load,
    select_by_category,
    update_filters,
)
from ticket_dashboard.services.normalizer import parse_date
from ticket_dashboard.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then the YAML config
- Read the workbook (first sheet unless configured) into raw rows
- Load them into a fresh dashboard state and apply the command-line filters
- Optionally print chart data / a drill-down selection
- Print the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_NO_DATA = 2

CONFIG_ENV_VAR = "TICKET_DASHBOARD_CONFIG"

# CLI option dest -> filter field
_FILTER_OPTIONS = {
    "start": "startDate",
    "end": "endDate",
    "technology": "technology",
    "client": "client",
    "ticket_type": "ticketType",
    "assigned_to": "assignedTo",
    "status": "status",
    "ticket_number": "ticketNumber",
}


def _load_env_file(path: Path) -> None:
    """Load .env without overriding variables already set in the process."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Support ticket analytics from a spreadsheet export")
    p.add_argument("--config", help=f"Config file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})")
    p.add_argument("--file", help="Workbook to load (overrides source_file)")
    p.add_argument("--start", help="Start date, inclusive (ISO format)")
    p.add_argument("--end", help="End date, inclusive (ISO format)")
    p.add_argument("--technology")
    p.add_argument("--client")
    p.add_argument("--ticket-type", dest="ticket_type")
    p.add_argument("--assigned-to", dest="assigned_to")
    p.add_argument("--status", help="All, Open, Closed or an exact status")
    p.add_argument("--ticket-number", dest="ticket_number")
    p.add_argument("--chart", action="append", default=[], metavar="CATEGORY",
                   help="Print ticket counts per value of CATEGORY (repeatable)")
    p.add_argument("--timeseries", action="store_true", help="Print tickets per day")
    p.add_argument("--select", metavar="CATEGORY=VALUE", help="Print the tickets behind one chart slice")
    p.add_argument("--json", action="store_true", help="Print all chart data as JSON")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    return p.parse_args(argv)


def _filter_changes(args: argparse.Namespace) -> dict[str, Any]:
    return {
        field: getattr(args, dest)
        for dest, field in _FILTER_OPTIONS.items()
        if getattr(args, dest) is not None
    }


def _inspect_data(path: Path, cfg) -> int:
    try:
        sheet, rows = read_rows(path, cfg.sheet, cfg.header_row, cfg.null_sentinels)
    except (WorkbookReadError, SheetHeaderError) as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    print(f"FILE: {path.name}")
    columns = list(rows[0].keys()) if rows else []
    print(f"  SHEET: {sheet} rows={len(rows)} cols={columns}")
    for r in rows[:3]:
        print("    sample_row=", r)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an empty list from tests must not fall back to sys.argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if args.debug:
        for h in logger.handlers:
            h.setLevel("DEBUG")
        logger.setLevel("DEBUG")
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    config_path = Path(args.config or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    source = Path(args.file or cfg.source_file)
    if args.inspect_data:
        return _inspect_data(source, cfg)

    error_log = ErrorLogBuffer()
    sheet_label = cfg.sheet or ""
    try:
        sheet_label, rows = read_rows(source, cfg.sheet, cfg.header_row, cfg.null_sentinels)
    except (WorkbookReadError, SheetHeaderError) as e:
        logger.error(f"read: {e}")
        error_log.append(ErrorRecord.create(source.name, sheet_label, -1, "READ_ERROR", str(e)))
        _flush_errors(error_log, logger)
        return EXIT_FATAL

    state = initial_state(lookback_months=cfg.lookback_months)
    try:
        state = load(state, rows, source=source.name)
    except EmptyDatasetError as e:
        logger.warning(str(e))
        error_log.append(ErrorRecord.create(source.name, sheet_label, -1, "NO_DATA", str(e)))
        _flush_errors(error_log, logger)
        return EXIT_NO_DATA

    for i, ticket in enumerate(state.tickets or ()):
        if is_blank(parse_date(ticket.date)):
            error_log.append(
                ErrorRecord.create(source.name, sheet_label, i, "INVALID_DATE", f"unparsable date: {ticket.date!r}")
            )

    try:
        state = update_filters(state, _filter_changes(args), apply_immediately=True)
    except ValueError as e:
        logger.error(f"filters: {e}")
        return EXIT_FATAL
    logger.debug(f"filters={state.applied_filters.to_dict()}")

    for category in args.chart:
        for c in category_counts(state.filtered or (), category):
            logger.info(f"chart {category}: {c.name}={c.value}")

    if args.timeseries:
        for point in time_series(state.filtered or ()):
            logger.info(f"timeseries {point.date}={point.tickets}")

    if args.select:
        category, sep, value = args.select.partition("=")
        if not sep or not category:
            logger.error(f"select: expected CATEGORY=VALUE, got {args.select!r}")
            return EXIT_FATAL
        state = select_by_category(state, category, value)
        selected = state.selected_tickets or ()
        logger.info(f"selection {category}={value} tickets={len(selected)}")
        for t in selected:
            logger.info(
                f"  id={t.id} number={t.ticket_number} date={t.date} status={t.status} "
                f"technology={t.technology} client={t.client} assigned_to={t.assigned_to}"
            )

    if args.json:
        print(json.dumps(chart_data(state), indent=2, ensure_ascii=False))

    _flush_errors(error_log, logger)
    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(state)[len("SUMMARY "):])
    return EXIT_SUCCESS


def _flush_errors(error_log: ErrorLogBuffer, logger) -> None:
    if not len(error_log):
        return
    count = len(error_log)
    path = error_log.flush()
    logger.warning(f"{count} problem(s) written to {path}")

