"""Domain helpers for case records: the Case value, ids and search matching."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

STATUS_FILED = "Filed"
STATUS_IN_PROGRESS = "In Progress"
STATUS_ADJOURNED = "Adjourned"
STATUS_CLOSED = "Closed"

KNOWN_STATUSES = (STATUS_FILED, STATUS_IN_PROGRESS, STATUS_ADJOURNED, STATUS_CLOSED)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def normalize_case_id(value: str | None) -> str:
    """Trim and upper-case a case id; an empty result means invalid."""
    return _text(value).strip().upper()


def case_key(value: str | None) -> str:
    """Comparison key used for case-insensitive id lookups."""
    return _text(value).upper()


@dataclass(frozen=True)
class Case:
    case_id: str
    title: str = ""
    parties: str = ""
    status: str = STATUS_FILED
    hearing_date: str = ""

    @property
    def key(self) -> str:
        return case_key(self.case_id)

    def to_dict(self) -> dict:
        return {
            "caseId": self.case_id,
            "title": self.title,
            "parties": self.parties,
            "status": self.status,
            "hearingDate": self.hearing_date,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Case":
        """Build a Case from its stored form; missing fields read as empty text."""
        return cls(
            case_id=_text(data.get("caseId")),
            title=_text(data.get("title")),
            parties=_text(data.get("parties")),
            status=_text(data.get("status")),
            hearing_date=_text(data.get("hearingDate")),
        )


def matches_query(case: Case, query: str | None) -> bool:
    """Case-insensitive substring match over id, title and parties."""
    term = (query or "").strip().lower()
    if not term:
        return True
    return (
        term in case.case_id.lower()
        or term in case.title.lower()
        or term in case.parties.lower()
    )
