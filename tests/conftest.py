# Shared pytest fixtures
from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from quota_tables.logging.init import reset_logging
from quota_tables.transform.dictionary import load_dictionary

SAMPLE_ROWS = [
    {
        "Original ID": "1",
        "Subscription ID": "sub1",
        "Request Type": "Zonal Enablement",
        "VM Type": "Standard_D2s",
        "Region": "eastus",
        "Zone": "1",
        "Cores": "8",
        "Status": "Approved",
    },
    {
        "Original ID": "2",
        "Subscription ID": "sub2",
        "Request Type": "Quota Increase",
        "VM Type": "Standard_E4s",
        "Region": "westus",
        "Zone": "2",
        "Cores": "16",
        "Status": "Pending",
    },
    {
        # valid through VM Type + Region, no subscription
        "Original ID": "3",
        "Subscription ID": "",
        "Request Type": "Region Enablement",
        "VM Type": "Standard_D2s",
        "Region": "brazilsouth",
        "Cores": "4",
        "Status": "Fulfilled",
    },
    {
        "Original ID": "4",
        "Subscription ID": "sub4",
        "Request Type": "Unknown",
        "VM Type": "Standard_D2s",
        "Region": "eastus",
    },
    {
        "Original ID": "5",
        "Subscription ID": "",
        "Request Type": "Quota Increase",
        "VM Type": "N/A",
        "Region": "eastus",
    },
]


@pytest.fixture(autouse=True)
def _fresh_logging():
    # handlers bind sys.stdout at setup time; capsys swaps it per test
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_rows() -> list[dict]:
    return [dict(r) for r in SAMPLE_ROWS]


@pytest.fixture()
def dictionary():
    return load_dictionary()


@pytest.fixture()
def write_rows(temp_workdir: Path, sample_rows: list[dict]) -> Path:
    path = temp_workdir / "data" / "rows.json"
    path.write_text(json.dumps(sample_rows, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source: ./data/rows.json
output_directory: ./exports
translate: false
views: [categorized, unified, unified_by_id]
copied_display_seconds: 2
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str, write_rows: Path) -> Path:
    cfg = temp_workdir / "config" / "export.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
