"""Domain models for the quota table exporter."""

from .config_models import ALL_VIEWS, ExportConfig
from .export_result import ExportResult, FileStat
from .reject_record import RejectRecord
from .table import DisplayTable

__all__ = [
    # Configuration models
    "ALL_VIEWS",
    "ExportConfig",
    # Result models
    "DisplayTable",
    "ExportResult",
    "FileStat",
    "RejectRecord",
]
