"""
Controller tests: register/delete/search plus the write-through contract.
"""
from __future__ import annotations

import pytest

from docket.domain.cases import Case
from docket.domain.errors import (
    CaseNotFoundError,
    CaseValidationError,
    DuplicateCaseError,
    StorageWriteError,
)
from docket.repositories.case_store import CaseStore
from docket.services.case_display import EMPTY_STORE_MESSAGE, NO_MATCHES_MESSAGE
from docket.services.case_service import NOTICE_INFO, NOTICE_SUCCESS, CaseController


class FailingPersistence:
    key = "judiciaryCases"

    def __init__(self, records=()):
        self.records = list(records)
        self.saves = 0

    def load(self):
        return list(self.records)

    def save(self, records):
        self.saves += 1
        raise StorageWriteError()


@pytest.fixture()
def controller(persistence):
    ctrl = CaseController(CaseStore(), persistence)
    ctrl.startup()
    return ctrl


def test_startup_hydrates_from_persistence(persistence):
    persistence.save([Case("A-1"), Case("B-2", hearing_date="2024-01-01")])
    ctrl = CaseController(CaseStore(), persistence)
    listing = ctrl.startup()
    assert [r.case_id for r in listing.rows] == ["B-2", "A-1"]
    assert [c.case_id for c in ctrl.store.list()] == ["A-1", "B-2"]


def test_startup_with_no_data_renders_empty_message(controller):
    listing = controller.view()
    assert listing.is_empty
    assert listing.empty_message == EMPTY_STORE_MESSAGE


def test_register_normalizes_and_persists(controller, persistence):
    notice = controller.register_case("  crim-01 ", " Title ", " A v B ", "Filed", "2024-05-01")
    assert notice.kind == NOTICE_SUCCESS
    assert notice.message == "Case registered successfully!"
    assert persistence.load() == [Case("CRIM-01", "Title", "A v B", "Filed", "2024-05-01")]


def test_register_rejects_blank_id(controller, persistence):
    with pytest.raises(CaseValidationError):
        controller.register_case("   ")
    assert len(controller.store) == 0
    assert persistence.storage.get_item(persistence.key) is None


def test_scenario_duplicate_then_mixed_case_delete(controller, persistence):
    controller.register_case("crim-01", status="Filed", hearing_date="2024-05-01")
    with pytest.raises(DuplicateCaseError) as exc_info:
        controller.register_case("CRIM-01", title="other")
    assert exc_info.value.message == "Error: Case ID CRIM-01 already exists."
    assert len(controller.store) == 1

    notice = controller.delete_case("Crim-01", confirmed=True)
    assert notice.message == "Case deleted successfully."
    assert len(controller.store) == 0
    assert persistence.load() == []


def test_delete_requires_confirmation(controller):
    controller.register_case("A-1")
    notice = controller.delete_case("A-1", confirmed=False)
    assert notice.kind == NOTICE_INFO
    assert "A-1" in notice.message
    assert len(controller.store) == 1


def test_delete_missing_does_not_write(controller, persistence):
    controller.register_case("A-1")
    persistence.storage.set_item(persistence.key, "sentinel")
    with pytest.raises(CaseNotFoundError):
        controller.delete_case("B-1", confirmed=True)
    assert persistence.storage.get_item(persistence.key) == "sentinel"
    assert len(controller.store) == 1


def test_search_matches_id_title_and_parties(controller):
    controller.register_case("CRIM-01", title="State v. Doe", parties="Prosecutor; John Doe")
    controller.register_case("CIV-02", title="Land dispute", parties="Smith; Jones")
    controller.register_case("FAM-03", title="Custody", parties="Roe")

    assert [r.case_id for r in controller.search("crim").rows] == ["CRIM-01"]
    assert [r.case_id for r in controller.search("LAND").rows] == ["CIV-02"]
    assert [r.case_id for r in controller.search("roe").rows] == ["FAM-03"]
    assert len(controller.search("").rows) == 3


def test_search_without_matches_uses_distinct_message(controller):
    controller.register_case("A-1")
    listing = controller.search("zzz")
    assert listing.is_empty
    assert listing.empty_message == NO_MATCHES_MESSAGE


def test_save_failure_rolls_back_by_default():
    persistence = FailingPersistence([Case("A-1")])
    ctrl = CaseController(CaseStore(), persistence)
    ctrl.startup()
    with pytest.raises(StorageWriteError):
        ctrl.register_case("B-2")
    assert [c.case_id for c in ctrl.store.list()] == ["A-1"]
    with pytest.raises(StorageWriteError):
        ctrl.delete_case("A-1", confirmed=True)
    assert [c.case_id for c in ctrl.store.list()] == ["A-1"]


def test_save_failure_without_rollback_keeps_memory_change():
    persistence = FailingPersistence()
    ctrl = CaseController(CaseStore(), persistence, rollback_on_save_error=False)
    ctrl.startup()
    with pytest.raises(StorageWriteError):
        ctrl.register_case("B-2")
    assert [c.case_id for c in ctrl.store.list()] == ["B-2"]
    assert persistence.saves == 1


def test_unencodable_title_rolls_back_and_reports_save_error(controller, persistence):
    with pytest.raises(StorageWriteError) as exc_info:
        controller.register_case("A-1", title="bad \udcff")
    assert exc_info.value.message == "Error: Could not save data."
    assert len(controller.store) == 0
    assert persistence.load() == []

    controller.register_case("A-1", title="fine")
    assert persistence.load() == [Case("A-1", "fine", "", "Filed", "")]
