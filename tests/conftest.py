from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the docket package importable when running the tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docket.core import config as core_config  # noqa: E402
from docket.repositories.json_storage import CasePersistence, JsonSlotStorage  # noqa: E402


@pytest.fixture()
def storage_env(tmp_path, monkeypatch):
    """Point the app at a temporary storage file and reset the settings cache."""
    storage_file = tmp_path / "storage.json"
    monkeypatch.setenv("DOCKET_STORAGE_PATH", str(storage_file))
    monkeypatch.delenv("DOCKET_STORAGE_KEY", raising=False)
    monkeypatch.delenv("DOCKET_ROLLBACK_ON_SAVE_ERROR", raising=False)
    monkeypatch.setenv("APP_ENV", "dev")
    core_config.get_settings.cache_clear()
    yield storage_file
    core_config.get_settings.cache_clear()


@pytest.fixture()
def persistence(tmp_path):
    return CasePersistence(JsonSlotStorage(tmp_path / "storage.json"))
