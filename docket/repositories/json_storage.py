"""
JSON-file persistence adapter.

`JsonSlotStorage` behaves like a browser key-value store: one JSON object
on disk mapping slot names to text values. `CasePersistence` keeps the
whole case list in a single slot, serialized as a JSON array.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional
import json
import logging
import os
import tempfile

from docket.domain.cases import Case
from docket.domain.errors import StorageWriteError

logger = logging.getLogger(__name__)


class JsonSlotStorage:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold a JSON object; ignoring it", self.path)
            return {}
        return data

    def _write_all(self, data: dict) -> None:
        # temp file + rename: either the new content lands or the old file stays
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".storage-", suffix=".tmp", dir=str(self.path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, ValueError) as exc:
            logger.error("Could not write storage file %s: %s", self.path, exc)
            raise StorageWriteError() from exc

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        return value

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


class CasePersistence:
    """Reads and writes the case list from one named slot."""

    def __init__(self, storage: JsonSlotStorage, key: str = "judiciaryCases") -> None:
        self.storage = storage
        self.key = key

    def save(self, records: Iterable[Case]) -> None:
        payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False)
        self.storage.set_item(self.key, payload)

    def load(self) -> List[Case]:
        stored = self.storage.get_item(self.key)
        if stored is None:
            return []
        try:
            parsed = json.loads(stored)
        except ValueError as exc:
            logger.warning("Error parsing stored cases in slot %r: %s", self.key, exc)
            return []
        if not isinstance(parsed, list):
            logger.warning("Stored cases in slot %r are not a list; starting empty", self.key)
            return []
        records: List[Case] = []
        for item in parsed:
            if not isinstance(item, dict):
                logger.warning("Skipping stored case entry that is not an object: %r", item)
                continue
            records.append(Case.from_dict(item))
        return records
