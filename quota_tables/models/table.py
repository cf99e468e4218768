from __future__ import annotations

from dataclasses import dataclass, field

from ..transform.projection import DisplayRow

__all__ = [
    "DisplayTable",
]


@dataclass(frozen=True)
class DisplayTable:
    """One rendered table: what the screen shows and every export serializes.

    ``headers`` are display names (translated when the table was built with
    translation on); each row is keyed by them plus ``Original ID``.
    """
    key: str  # stable id: "unified", "unified_by_id" or "category:<name>"
    title: str
    headers: list[str]
    rows: list[DisplayRow] = field(default_factory=list)
    filename: str = ""
    locale: str = "en-US"

    def __len__(self) -> int:
        return len(self.rows)
