from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ALL_VIEWS, ExportConfig
from ..transform.constants import FINAL_HEADERS

"""Config loader.

Responsibilities:
- Load the YAML config (default ``config/export.yml``)
- Validate it against ``export_schema.json`` (shipped beside this module)
- Apply defaults for optional keys
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/export.yml")
SCHEMA_PATH = Path(__file__).parent / "export_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or the data violates it
            (missing required keys, wrong types, unknown keys)
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


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ExportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return ExportConfig(
        source=data["source"],
        output_directory=data["output_directory"],
        categories=data.get("categories"),
        translate=bool(data.get("translate", False)),
        views=tuple(data.get("views", ALL_VIEWS)),
        headers=tuple(data.get("headers", FINAL_HEADERS)),
        copied_display_seconds=float(data.get("copied_display_seconds", 2.0)),
    )
