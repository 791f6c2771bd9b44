# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd
import pytest

from ticket_dashboard.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_file: ./data/tickets.xlsx
header_row: 0
lookback_months: 2
null_sentinels: ["N/A", "null"]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "dashboard.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_rows() -> list[dict[str, Any]]:
    return [
        {"ID": "1", "Technology/Platform": "AWS", "Status": "Closed", "Assigned Date": "2024-01-01"},
        {"ID": "2", "Technology": "Azure", "Status": "Open", "Assigned Date": "2024-01-02"},
    ]


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    """Write rows (dicts) to data/<name> with a single header row."""
    def _make(rows: list[dict[str, Any]], name: str = "tickets.xlsx", sheet: str = "Tickets") -> Path:
        path = temp_workdir / "data" / name
        df = pd.DataFrame(rows)
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=sheet, index=False)
        return path
    return _make
