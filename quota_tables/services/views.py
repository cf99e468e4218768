from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..export.workbook import export_filename
from ..models.table import DisplayTable
from ..transform.categories import display_categories
from ..transform.constants import FINAL_HEADERS, RDQUOTA_COLUMN
from ..transform.dictionary import Dictionary, Translator
from ..transform.projection import display_headers, project_rows, with_identifier_column
from ..transform.validity import filter_valid
from ..transform.visibility import VisibilityPolicy, resolve_visible

"""Table builders for the three views.

- category tables: one per visible category, rows of that bucket only
- unified table: every valid row
- unified-by-id view: the category tables and the unified table again, each
  with an ``RDQuota`` copy of the identifier as first column, so a request
  can be traced across tables

Every builder starts from the immutable upstream rows, applies the validity
filter and the visibility policy, then projects. Nothing is cached.
"""

__all__ = [
    "TablePipeline",
    "ViewSummary",
]

Row = Mapping[str, Any]

UNIFIED_KEY = "unified"
UNIFIED_BY_ID_KEY = "unified_by_id"
CATEGORY_KEY_PREFIX = "category:"
CATEGORY_BY_ID_KEY_PREFIX = "category_by_id:"

_CATEGORY_FILE_LABEL = {False: "Quota_Data", True: "Dados_Cota"}
_CATEGORY_BY_ID_FILE_LABEL = {False: "Quota_Data_by_RDQuota", True: "Dados_Cota_por_RDQuota"}
_UNIFIED_FILE_SUBJECT = {False: "Unified_Table", True: "Tabela_Unificada"}
_UNIFIED_BY_ID_FILE_SUBJECT = {False: "Unified_Table_by_RDQuota", True: "Tabela_Unificada_por_RDQuota"}


@dataclass(frozen=True)
class ViewSummary:
    """Counters shown above the tables."""
    total_rows: int
    categories: int
    columns: int


class TablePipeline:
    """Builds display tables for one translation state.

    The dictionary's header translations are checked once here, so projecting
    rows can never produce two columns with the same key.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        headers: Sequence[str] = FINAL_HEADERS,
        *,
        translate: bool = False,
        visibility: VisibilityPolicy = resolve_visible,
    ) -> None:
        dictionary.check_headers([RDQUOTA_COLUMN, *headers])
        self.headers = list(headers)
        self.translator = Translator(dictionary, translate)
        self.visibility = visibility

    @property
    def locale(self) -> str:
        return self.translator.locale

    def build_table(
        self,
        key: str,
        title: str,
        rows: Sequence[Row],
        headers: Sequence[str],
        filename: str,
        *,
        blank_unknown: bool = False,
    ) -> DisplayTable:
        valid = filter_valid(rows)
        visible = self.visibility(headers, valid)
        return DisplayTable(
            key=key,
            title=title,
            headers=display_headers(visible, self.translator),
            rows=project_rows(valid, visible, self.translator, blank_unknown=blank_unknown),
            filename=filename,
            locale=self.locale,
        )

    def category_tables(
        self,
        category_map: Mapping[str, Sequence[Row]],
        *,
        with_identifier: bool = False,
    ) -> list[DisplayTable]:
        """One table per category, Unknown excluded, sorted by name.

        With *with_identifier* every table gets the ``RDQuota`` column first
        and its own key and filename, so both variants can be exported side by
        side.
        """
        if with_identifier:
            headers = [RDQUOTA_COLUMN, *self.headers]
            key_prefix, file_label = CATEGORY_BY_ID_KEY_PREFIX, _CATEGORY_BY_ID_FILE_LABEL
        else:
            headers = self.headers
            key_prefix, file_label = CATEGORY_KEY_PREFIX, _CATEGORY_FILE_LABEL
        tables: list[DisplayTable] = []
        for name, rows in display_categories(category_map):
            if with_identifier:
                rows = [with_identifier_column(r) for r in rows]
            tables.append(
                self.build_table(
                    key=f"{key_prefix}{name}",
                    title=name,
                    rows=rows,
                    headers=headers,
                    filename=export_filename(name, file_label[self.translator.enabled], locale=self.locale),
                )
            )
        return tables

    def unified_table(self, rows: Sequence[Row]) -> DisplayTable:
        return self.build_table(
            key=UNIFIED_KEY,
            title=self.translator.label("Unified Table"),
            rows=rows,
            headers=self.headers,
            filename=export_filename(_UNIFIED_FILE_SUBJECT[self.translator.enabled], locale=self.locale),
            blank_unknown=True,
        )

    def unified_by_id_table(self, rows: Sequence[Row]) -> DisplayTable:
        return self.build_table(
            key=UNIFIED_BY_ID_KEY,
            title=self.translator.label("Unified Table (with IDs)"),
            rows=[with_identifier_column(r) for r in rows],
            headers=[RDQUOTA_COLUMN, *self.headers],
            filename=export_filename(_UNIFIED_BY_ID_FILE_SUBJECT[self.translator.enabled], locale=self.locale),
            blank_unknown=True,
        )

    def summary(self, rows: Sequence[Row], category_map: Mapping[str, Sequence[Row]]) -> ViewSummary:
        valid = filter_valid(rows)
        return ViewSummary(
            total_rows=len(valid),
            categories=len(display_categories(category_map)),
            columns=len(self.visibility(self.headers, valid)),
        )

    def counters_text(self, summary: ViewSummary) -> str:
        """``Total Rows: 3 | Categories: 3 | Columns: 7`` in the active language."""
        label = self.translator.label
        return (
            f"{label('Total Rows')}: {summary.total_rows} | "
            f"{label('Categories')}: {summary.categories} | "
            f"{label('Columns')}: {summary.columns}"
        )

    def section_title(self, *, with_identifier: bool = False) -> str:
        return self.translator.label("RDQuotas Categorized" if with_identifier else "Categorized Results")
