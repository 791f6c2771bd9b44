from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.ticket import is_blank

"""Spreadsheet reader.

Reads one sheet (the first by default) without header interpretation and
with every cell kept as text, then turns it into raw rows: the header row
supplies the keys, entirely empty rows are skipped, blank cells and null
sentinel strings become None.

CSV exports are accepted too and read the same way.
"""

__all__ = [
    "SUPPORTED_SUFFIXES",
    "SheetHeaderError",
    "WorkbookReadError",
    "read_first_sheet",
    "rows_from_frame",
    "read_rows",
]

SUPPORTED_SUFFIXES = (".xlsx", ".xls", ".csv")


class SheetHeaderError(Exception):
    """Raised when the header row is missing."""


class WorkbookReadError(Exception):
    """Raised when the file cannot be opened or the sheet does not exist."""


def read_first_sheet(path: Path, sheet: str | None = None) -> tuple[str, pd.DataFrame]:
    """Read ``sheet`` (default: first sheet) as an all-text DataFrame.

    Returns:
        (sheet name, raw DataFrame with no header applied)
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise WorkbookReadError(
            f"unsupported file type '{path.suffix}' (expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )
    if not path.exists():
        raise WorkbookReadError(f"file not found: {path}")

    if suffix == ".csv":
        try:
            df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return path.stem, pd.DataFrame()
        except (OSError, ValueError, pd.errors.ParserError) as e:
            raise WorkbookReadError(f"cannot read {path.name}: {e}") from e
        return path.stem, df

    try:
        xls = pd.ExcelFile(path)
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        raise WorkbookReadError(f"cannot read {path.name}: {e}") from e
    with xls:
        names = [str(n) for n in xls.sheet_names]
        if not names:
            raise WorkbookReadError(f"{path.name} has no sheets")
        name = sheet if sheet is not None else names[0]
        if name not in names:
            raise WorkbookReadError(f"sheet '{name}' not found in {path.name} (sheets: {names})")
        df = xls.parse(name, header=None, dtype=str, keep_default_na=False)
    return name, df


def rows_from_frame(
    df: pd.DataFrame,
    header_row: int = 0,
    null_sentinels: set[str] | frozenset[str] | None = None,
) -> list[dict[str, Any]]:
    """Turn a raw sheet into header-keyed rows.

    Columns with a blank header are dropped. When a header repeats, the
    right-most column wins.
    """
    if df.shape[0] <= header_row:
        raise SheetHeaderError(f"sheet has no header row at line {header_row + 1}")
    header = [None if is_blank(c) else str(c).strip() for c in df.iloc[header_row].tolist()]

    rows: list[dict[str, Any]] = []
    for _, raw in df.iloc[header_row + 1:].iterrows():
        values = raw.tolist()
        if all(is_blank(v) for v in values):
            continue
        row: dict[str, Any] = {}
        for col, val in zip(header, values, strict=False):
            if col is None:
                continue
            if is_blank(val):
                row[col] = None
            elif isinstance(val, str) and null_sentinels and val.strip().upper() in null_sentinels:
                row[col] = None
            else:
                row[col] = val
        rows.append(row)
    return rows


def read_rows(
    path: Path,
    sheet: str | None = None,
    header_row: int = 0,
    null_sentinels: set[str] | frozenset[str] | None = None,
) -> tuple[str, list[dict[str, Any]]]:
    """Read a workbook and return (sheet name, raw rows)."""
    name, df = read_first_sheet(path, sheet)
    if df.empty:
        return name, []
    return name, rows_from_frame(df, header_row=header_row, null_sentinels=null_sentinels)
