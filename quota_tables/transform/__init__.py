"""Pure, synchronous row transforms: validity, masking, translation, projection."""

from .categories import display_categories, group_by_request_type
from .constants import FINAL_HEADERS, IDENTIFIER_COLUMN, NOT_APPLICABLE, RDQUOTA_COLUMN
from .dictionary import Dictionary, DictionaryError, Translator, load_dictionary
from .masking import is_zonal, mask
from .normalize import normalize
from .projection import display_headers, project, project_rows, with_identifier_column
from .validity import filter_valid, is_valid, rejection_reason
from .visibility import VisibilityPolicy, resolve_visible

__all__ = [
    "FINAL_HEADERS",
    "IDENTIFIER_COLUMN",
    "NOT_APPLICABLE",
    "RDQUOTA_COLUMN",
    "Dictionary",
    "DictionaryError",
    "Translator",
    "VisibilityPolicy",
    "display_categories",
    "display_headers",
    "filter_valid",
    "group_by_request_type",
    "is_valid",
    "is_zonal",
    "load_dictionary",
    "mask",
    "normalize",
    "project",
    "project_rows",
    "rejection_reason",
    "resolve_visible",
    "with_identifier_column",
]
