from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import DashboardConfig

"""Config loader.

Responsibilities:
- Load the YAML config (default config/dashboard.yml)
- Validate it against the bundled JSON schema
- Apply defaults (header_row=0, lookback_months=2)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("dashboard_schema.json")
DEFAULT_CONFIG_PATH = Path("config/dashboard.yml")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or the data fails
            validation (missing keys, wrong types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> DashboardConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    sentinels = data.get("null_sentinels") or []
    return DashboardConfig(
        source_file=data["source_file"],
        sheet=data.get("sheet"),
        header_row=data.get("header_row", 0),
        lookback_months=data.get("lookback_months", 2),
        null_sentinels=frozenset(s.strip().upper() for s in sentinels),
    )
