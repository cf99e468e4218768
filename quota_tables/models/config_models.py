from __future__ import annotations

from dataclasses import dataclass, field

from ..transform.constants import FINAL_HEADERS

"""Config dataclass for the quota table exporter.

Built by ``quota_tables.config.loader.load_config`` after the YAML file has
been validated against ``config/export_schema.json``.
"""

VIEW_CATEGORIZED = "categorized"
VIEW_UNIFIED = "unified"
VIEW_UNIFIED_BY_ID = "unified_by_id"
ALL_VIEWS: tuple[str, ...] = (VIEW_CATEGORIZED, VIEW_UNIFIED, VIEW_UNIFIED_BY_ID)


@dataclass(frozen=True)
class ExportConfig:
    """Root configuration object for one export run."""
    source: str  # pre-parsed rows (.json / .xlsx / .csv)
    output_directory: str  # workbooks are written here
    categories: str | None = None  # optional pre-built category map (.json)
    translate: bool = False  # pt-BR output when True
    views: tuple[str, ...] = ALL_VIEWS
    headers: tuple[str, ...] = field(default=FINAL_HEADERS)
    copied_display_seconds: float = 2.0
