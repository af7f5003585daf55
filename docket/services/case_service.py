"""Case use cases: register, delete, search and the startup load."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from docket.domain.cases import STATUS_FILED, Case, matches_query, normalize_case_id
from docket.domain.errors import CaseValidationError, DuplicateCaseError, StorageWriteError
from docket.repositories.case_store import CaseStore
from docket.repositories.json_storage import CasePersistence
from docket.services.case_display import (
    EMPTY_STORE_MESSAGE,
    NO_MATCHES_MESSAGE,
    RenderedList,
    render_case_list,
)

logger = logging.getLogger(__name__)

NOTICE_SUCCESS = "success"
NOTICE_ERROR = "error"
NOTICE_INFO = "info"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: str = NOTICE_INFO


class CaseController:
    """
    Wires user intents to the store, the write-through and the view.

    Every mutation runs under one lock and is committed only after
    `persistence.save` returns. With `rollback_on_save_error` the store is
    restored to its prior contents when the save fails; otherwise the
    in-memory change is kept and only the error is reported.
    """

    def __init__(
        self,
        store: CaseStore,
        persistence: CasePersistence,
        *,
        rollback_on_save_error: bool = True,
    ) -> None:
        self.store = store
        self.persistence = persistence
        self.rollback_on_save_error = rollback_on_save_error
        self._lock = threading.Lock()

    def startup(self) -> RenderedList:
        with self._lock:
            records = self.persistence.load()
            self.store.replace_all(records)
            logger.info("Loaded %d case(s) from slot %r", len(self.store), self.persistence.key)
            return render_case_list(self.store.list(), EMPTY_STORE_MESSAGE)

    def _commit(self, before) -> None:
        try:
            self.persistence.save(self.store.list())
        except StorageWriteError:
            if self.rollback_on_save_error:
                self.store.restore(before)
                logger.warning("Save failed; in-memory change rolled back")
            else:
                logger.warning("Save failed; memory and storage now differ until the next save")
            raise

    def register_case(
        self,
        case_id: str,
        title: str = "",
        parties: str = "",
        status: str = STATUS_FILED,
        hearing_date: str = "",
    ) -> Notification:
        normalized = normalize_case_id(case_id)
        if not normalized:
            raise CaseValidationError()
        case = Case(
            case_id=normalized,
            title=(title or "").strip(),
            parties=(parties or "").strip(),
            status=status or "",
            hearing_date=(hearing_date or "").strip(),
        )
        with self._lock:
            if normalized in self.store:
                raise DuplicateCaseError(normalized)
            before = self.store.snapshot()
            self.store.add(case)
            self._commit(before)
        logger.info("Registered case %s", normalized)
        return Notification("Case registered successfully!", NOTICE_SUCCESS)

    def delete_case(self, case_id: str, confirmed: bool) -> Notification:
        if not confirmed:
            return Notification(f"Deletion of case {case_id} cancelled.", NOTICE_INFO)
        with self._lock:
            before = self.store.snapshot()
            removed = self.store.remove(case_id)
            self._commit(before)
        logger.info("Deleted case %s", removed.case_id)
        return Notification("Case deleted successfully.", NOTICE_SUCCESS)

    def find(self, case_id: str) -> Optional[Case]:
        with self._lock:
            return self.store.get(case_id)

    def search(self, query: Optional[str]) -> RenderedList:
        with self._lock:
            matched = self.store.filter(lambda case: matches_query(case, query))
            if (query or "").strip():
                return render_case_list(matched, NO_MATCHES_MESSAGE)
            return render_case_list(matched, EMPTY_STORE_MESSAGE)

    def view(self, query: Optional[str] = None) -> RenderedList:
        """Re-render the current store, keeping the active filter if any."""
        return self.search(query)
