from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

from docket.domain.errors import StorageWriteError

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load(name: str):
    spec = importlib.util.spec_from_file_location(f"_script_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_add_case_then_list_as_json(storage_env, capsys):
    add_case = _load("add_case")
    list_cases = _load("list_cases")

    add_case.main(["--case-id", "crim-09", "--title", "State v. Roe", "--hearing-date", "2024-07-01"])
    assert "Case registered successfully!" in capsys.readouterr().out

    list_cases.main(["--json"])
    rows = json.loads(capsys.readouterr().out)
    assert [r["case_id"] for r in rows] == ["CRIM-09"]
    assert rows[0]["badge"] == "warning"


def test_add_case_rejects_duplicates(storage_env):
    add_case = _load("add_case")
    add_case.main(["--case-id", "X-1"])
    with pytest.raises(Exception, match="already exists"):
        add_case.main(["--case-id", "x-1"])


def test_add_case_with_undecodable_argument_reports_save_error(storage_env, capsys):
    add_case = _load("add_case")
    list_cases = _load("list_cases")
    with pytest.raises(StorageWriteError):
        add_case.main(["--case-id", "A-1", "--title", "bad \udcff"])

    list_cases.main(["--json"])
    assert json.loads(capsys.readouterr().out) == []
