from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .constants import IDENTIFIER_COLUMN

"""en-US -> pt-BR dictionary and the translation toggle.

The vocabulary lives in ``quota_tables/data/dictionary.json`` so it can be
reviewed and extended without touching code. It is split into sections:

- ``headers``: column names
- ``request_types`` / ``statuses`` / ``values``: cell vocabularies, merged
  into one value lookup
- ``labels``: titles and counters shown around the tables

Header and value lookups never share a vocabulary, so a cell that happens to
contain a column name is left alone. Every lookup is soft: a miss returns the
input unchanged.
"""

__all__ = [
    "DICTIONARY_PATH",
    "DictionaryError",
    "Dictionary",
    "Translator",
    "load_dictionary",
    "LOCALE_EN",
    "LOCALE_PT",
]

_package_root = Path(__file__).parent.parent
DICTIONARY_PATH = _package_root / "data" / "dictionary.json"

LOCALE_EN = "en-US"
LOCALE_PT = "pt-BR"

_VALUE_SECTIONS = ("request_types", "statuses", "values")
_SECTIONS = ("headers", *_VALUE_SECTIONS, "labels")


class DictionaryError(Exception):
    pass


def _check_section(name: str, raw: Any) -> dict[str, str]:
    if not isinstance(raw, Mapping):
        raise DictionaryError(f"section '{name}' must be an object, got {type(raw).__name__}")
    section: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise DictionaryError(f"section '{name}' entries must be strings: {key!r} -> {value!r}")
        section[key] = value
    return section


def _check_bijective(name: str, section: Mapping[str, str]) -> None:
    seen: dict[str, str] = {}
    for key, value in section.items():
        if value in seen:
            raise DictionaryError(
                f"section '{name}' maps both {seen[value]!r} and {key!r} to {value!r}"
            )
        seen[value] = key


@dataclass(frozen=True)
class Dictionary:
    """Read-only translation vocabulary.

    Construct through ``from_mapping`` (or ``load_dictionary``) so the
    bijection checks run, which keeps every section reversible.
    """
    headers: Mapping[str, str]
    values: Mapping[str, str]
    labels: Mapping[str, str]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Dictionary:
        """Build a Dictionary from the parsed JSON asset.

        Raises:
            DictionaryError: unknown/missing sections, non-string entries, or
                two keys of one vocabulary translating to the same string
        """
        if not isinstance(data, Mapping):
            raise DictionaryError("dictionary root must be an object")
        unknown = set(data) - set(_SECTIONS)
        if unknown:
            raise DictionaryError(f"unknown dictionary sections: {sorted(unknown)}")

        headers = _check_section("headers", data.get("headers", {}))
        labels = _check_section("labels", data.get("labels", {}))
        values: dict[str, str] = {}
        for name in _VALUE_SECTIONS:
            for key, value in _check_section(name, data.get(name, {})).items():
                if key in values and values[key] != value:
                    raise DictionaryError(f"value {key!r} translated twice ({values[key]!r}, {value!r})")
                values[key] = value

        _check_bijective("headers", headers)
        _check_bijective("values", values)
        _check_bijective("labels", labels)
        return cls(
            headers=MappingProxyType(headers),
            values=MappingProxyType(values),
            labels=MappingProxyType(labels),
        )

    def translate_header(self, header: str) -> str:
        return self.headers.get(header, header)

    def translate_value(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return self.values.get(value, value)

    def translate_label(self, label: str) -> str:
        return self.labels.get(label, label)

    def check_headers(self, headers: Iterable[str], identifier: str = IDENTIFIER_COLUMN) -> None:
        """Ensure translated *headers* stay distinct from each other and the identifier.

        The identifier is seeded into every display row separately, so it may
        not appear among *headers* either as-is or as a translation.
        Called once when a pipeline is built, never per row.

        Raises:
            DictionaryError: on the first collision found
        """
        seen: dict[str, str] = {}
        for header in headers:
            translated = self.translate_header(header)
            if identifier in (header, translated):
                raise DictionaryError(
                    f"header {header!r} collides with the identifier column {identifier!r}"
                )
            owner = seen.get(translated)
            if owner is not None and owner != header:
                raise DictionaryError(
                    f"headers {owner!r} and {header!r} both translate to {translated!r}"
                )
            seen[translated] = header


@lru_cache(maxsize=8)
def load_dictionary(path: Path = DICTIONARY_PATH) -> Dictionary:
    """Load and validate the dictionary asset (cached per path)."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise DictionaryError(f"dictionary not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DictionaryError(f"invalid dictionary json: {e}") from e
    return Dictionary.from_mapping(data)


@dataclass(frozen=True)
class Translator:
    """Translation toggle passed explicitly through the pipeline."""
    dictionary: Dictionary
    enabled: bool = False

    def header(self, header: str) -> str:
        return self.dictionary.translate_header(header) if self.enabled else header

    def value(self, value: Any) -> Any:
        return self.dictionary.translate_value(value) if self.enabled else value

    def label(self, label: str) -> str:
        return self.dictionary.translate_label(label) if self.enabled else label

    @property
    def locale(self) -> str:
        return LOCALE_PT if self.enabled else LOCALE_EN
