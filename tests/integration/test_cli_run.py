from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from openpyxl import load_workbook

import quota_tables.services.orchestrator as orchestrator
from quota_tables.clipboard.backends import MIME_TEXT, MemoryClipboard
from quota_tables.cli import main as cli_main


def _exports(workdir: Path) -> list[str]:
    return sorted(p.name for p in (workdir / "exports").iterdir())


def test_full_run_writes_every_view(temp_workdir: Path, write_config: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out

    assert code == 0
    assert _exports(temp_workdir) == [
        "Quota_Increase_Quota_Data_by_RDQuota_en-US.xlsx",
        "Quota_Increase_Quota_Data_en-US.xlsx",
        "Region_Enablement_Quota_Data_by_RDQuota_en-US.xlsx",
        "Region_Enablement_Quota_Data_en-US.xlsx",
        "Unified_Table_by_RDQuota_en-US.xlsx",
        "Unified_Table_en-US.xlsx",
        "Zonal_Enablement_Quota_Data_by_RDQuota_en-US.xlsx",
        "Zonal_Enablement_Quota_Data_en-US.xlsx",
    ]
    assert "INFO Loaded 5 rows from: ./data/rows.json" in out
    assert "SUMMARY rows=5 valid=3 rejected=2 categories=3 columns=7 files=8/8" in out

    logs = list((temp_workdir / "logs").glob("rejected-*.log"))
    assert len(logs) == 1
    assert len(logs[0].read_text(encoding="utf-8").splitlines()) == 2

    ws = load_workbook(temp_workdir / "exports" / "Unified_Table_en-US.xlsx").active
    assert ws["B1"].value == "Request Type"
    assert ws.max_row == 4

    by_id = load_workbook(temp_workdir / "exports" / "Zonal_Enablement_Quota_Data_by_RDQuota_en-US.xlsx").active
    assert [c.value for c in by_id[1]][:2] == ["RDQuota", "Subscription ID"]
    assert by_id["A2"].value == "1"


def test_translate_flag_overrides_config(temp_workdir: Path, write_config: Path, capsys):
    code = cli_main(["--translate"])
    capsys.readouterr()

    assert code == 0
    names = _exports(temp_workdir)
    assert "Tabela_Unificada_pt-BR.xlsx" in names
    assert "Zonal_Enablement_Dados_Cota_pt-BR.xlsx" in names
    assert all(name.endswith("_pt-BR.xlsx") for name in names)

    ws = load_workbook(temp_workdir / "exports" / "Tabela_Unificada_pt-BR.xlsx").active
    assert ws.title == "Tabela Unificada"
    assert ws["B1"].value == "Tipo de Requisição"
    assert ws["B2"].value == "Habilitação Zonal"


def test_only_configured_views_are_written(temp_workdir: Path, write_rows: Path, capsys):
    cfg = temp_workdir / "config" / "export.yml"
    cfg.write_text("source: ./data/rows.json\noutput_directory: ./exports\nviews: [unified]\n", encoding="utf-8")
    assert cli_main([]) == 0
    assert _exports(temp_workdir) == ["Unified_Table_en-US.xlsx"]
    assert "files=1/1" in capsys.readouterr().out


def test_missing_config_is_fatal(temp_workdir: Path, capsys):
    assert cli_main(["--config", "config/absent.yml"]) == 1
    assert "ERROR config: config file not found" in capsys.readouterr().out


def test_missing_source_is_fatal(temp_workdir: Path, capsys):
    cfg = temp_workdir / "config" / "export.yml"
    cfg.write_text("source: ./data/missing.json\noutput_directory: ./exports\n", encoding="utf-8")
    assert cli_main([]) == 1
    assert "ERROR source: source not found" in capsys.readouterr().out
    assert not (temp_workdir / "exports").exists()


def test_partial_failure_exit_code(temp_workdir: Path, write_config: Path, capsys):
    real_write = orchestrator.write_workbook

    def flaky(path, headers, rows, sheet_name="Sheet"):
        if path.name == "Unified_Table_en-US.xlsx":
            raise OSError("permission denied")
        return real_write(path, headers, rows, sheet_name=sheet_name)

    with patch.object(orchestrator, "write_workbook", side_effect=flaky):
        code = cli_main([])

    out = capsys.readouterr().out
    assert code == 2
    assert "ERROR failed to write Unified_Table_en-US.xlsx: permission denied" in out
    assert "files=7/8" in out


def test_copy_unified_table(temp_workdir: Path, write_config: Path, capsys):
    board = MemoryClipboard()
    with patch("quota_tables.cli.__main__.TkClipboard", return_value=board):
        code = cli_main(["--copy", "unified"])

    out = capsys.readouterr().out
    assert code == 0
    assert "INFO copied unified table to clipboard" in out
    assert "WARN structured clipboard write failed, trying fallback" in out
    lines = board.contents[MIME_TEXT].splitlines()
    assert lines[0].split("\t")[0] == "Subscription ID"
    assert len(lines) == 4


def test_inspect_data_exits_before_export(temp_workdir: Path, write_config: Path, capsys):
    assert cli_main(["--inspect-data"]) == 0
    out = capsys.readouterr().out
    assert "ROWS: 5" in out
    assert "CATEGORY: Zonal Enablement rows=1" in out
    assert "CATEGORY: Unknown" not in out
    assert not (temp_workdir / "exports").exists()


def test_unwritable_reject_log_is_reported(temp_workdir: Path, write_config: Path, capsys):
    (temp_workdir / "logs").write_text("not a directory", encoding="utf-8")

    code = cli_main([])
    out = capsys.readouterr().out

    assert code == 0
    assert "ERROR could not write rejected-row log:" in out
    assert "SUMMARY rows=5" in out
