"""
In-memory case store.

Holds the authoritative ordered list of cases for the running process.
Order is insertion order; uniqueness is enforced on the upper-cased id.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from docket.domain.cases import Case, case_key
from docket.domain.errors import CaseNotFoundError, DuplicateCaseError

logger = logging.getLogger(__name__)


class CaseStore:
    def __init__(self, records: Iterable[Case] = ()) -> None:
        self._records: List[Case] = []
        self.replace_all(records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, case_id: object) -> bool:
        return isinstance(case_id, str) and self._index_of(case_id) is not None

    def _index_of(self, case_id: str) -> Optional[int]:
        key = case_key(case_id)
        for idx, record in enumerate(self._records):
            if record.key == key:
                return idx
        return None

    def get(self, case_id: str) -> Optional[Case]:
        idx = self._index_of(case_id)
        return self._records[idx] if idx is not None else None

    def add(self, case: Case) -> None:
        if self._index_of(case.case_id) is not None:
            raise DuplicateCaseError(case.case_id)
        self._records.append(case)

    def remove(self, case_id: str) -> Case:
        idx = self._index_of(case_id)
        if idx is None:
            raise CaseNotFoundError(case_id)
        return self._records.pop(idx)

    def list(self) -> Tuple[Case, ...]:
        return tuple(self._records)

    def filter(self, predicate: Callable[[Case], bool]) -> Tuple[Case, ...]:
        return tuple(record for record in self._records if predicate(record))

    def replace_all(self, records: Iterable[Case]) -> None:
        """Swap the whole collection (hydration). Never raises on duplicates:
        the first occurrence of an id wins and later ones are dropped."""
        seen = set()
        kept: List[Case] = []
        dropped = 0
        for record in records:
            if record.key in seen:
                dropped += 1
                continue
            seen.add(record.key)
            kept.append(record)
        if dropped:
            logger.warning("Dropped %d duplicate case record(s) while loading", dropped)
        self._records = kept

    def snapshot(self) -> Tuple[Case, ...]:
        return tuple(self._records)

    def restore(self, snapshot: Iterable[Case]) -> None:
        self._records = list(snapshot)
