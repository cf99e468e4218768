from __future__ import annotations

import json

import pytest

from quota_tables.transform.constants import FINAL_HEADERS, RDQUOTA_COLUMN
from quota_tables.transform.dictionary import (
    Dictionary,
    DictionaryError,
    Translator,
    load_dictionary,
)


def test_asset_covers_headers_and_values(dictionary):
    assert dictionary.translate_header("Cores") == "Núcleos"
    assert dictionary.translate_header("Request Type") == "Tipo de Requisição"
    assert dictionary.translate_value("Zonal Enablement") == "Habilitação Zonal"
    assert dictionary.translate_value("Approved") == "Aprovado"
    assert dictionary.translate_label("Unified Table") == "Tabela Unificada"


def test_lookups_are_soft(dictionary):
    assert dictionary.translate_header("Not A Header") == "Not A Header"
    assert dictionary.translate_value("eastus") == "eastus"
    assert dictionary.translate_value(None) is None


def test_value_lookup_ignores_header_vocabulary(dictionary):
    # "Zone" is a column name; as a cell value it stays untouched
    assert dictionary.translate_value("Zone") == "Zone"


def test_every_covered_key_translates_back(dictionary):
    for section in (dictionary.headers, dictionary.values, dictionary.labels):
        back = {translated: key for key, translated in section.items()}
        assert len(back) == len(section)
        for key, translated in section.items():
            assert back[translated] == key


def test_asset_headers_do_not_collide(dictionary):
    dictionary.check_headers([RDQUOTA_COLUMN, *FINAL_HEADERS])


def test_non_bijective_section_is_rejected():
    with pytest.raises(DictionaryError, match="maps both"):
        Dictionary.from_mapping({"statuses": {"Pending": "Pendente", "Backlogged": "Pendente"}})


def test_conflicting_value_sections_are_rejected():
    with pytest.raises(DictionaryError, match="translated twice"):
        Dictionary.from_mapping({"statuses": {"Pending": "Pendente"}, "values": {"Pending": "Em espera"}})


def test_unknown_section_is_rejected():
    with pytest.raises(DictionaryError, match="unknown dictionary sections"):
        Dictionary.from_mapping({"colours": {}})


def test_check_headers_detects_collision_with_untranslated_header():
    d = Dictionary.from_mapping({"headers": {"Zone": "Zona"}})
    with pytest.raises(DictionaryError, match="both translate to 'Zona'"):
        d.check_headers(["Zone", "Zona"])


def test_check_headers_detects_collision_with_identifier():
    d = Dictionary.from_mapping({"headers": {"Ticket": "Original ID"}})
    with pytest.raises(DictionaryError):
        d.check_headers(["Ticket"])


def test_check_headers_rejects_identifier_as_header(dictionary):
    with pytest.raises(DictionaryError, match="collides with the identifier column"):
        dictionary.check_headers(["Original ID", "Region"])


def test_load_dictionary_reports_bad_json(tmp_path):
    bad = tmp_path / "dictionary.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(DictionaryError, match="invalid dictionary json"):
        load_dictionary(bad)


def test_load_dictionary_from_custom_path(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"headers": {"Region": "Regiao"}}), encoding="utf-8")
    assert load_dictionary(path).translate_header("Region") == "Regiao"


def test_translator_is_inactive_when_disabled(dictionary):
    off = Translator(dictionary, enabled=False)
    on = Translator(dictionary, enabled=True)
    assert off.header("Cores") == "Cores"
    assert off.value("Approved") == "Approved"
    assert off.locale == "en-US"
    assert on.header("Cores") == "Núcleos"
    assert on.value("Approved") == "Aprovado"
    assert on.locale == "pt-BR"
