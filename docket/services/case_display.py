"""Helpers that turn case records into table rows for the list page."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple
import urllib.parse as urlparse

from jinja2 import Environment, FileSystemLoader, select_autoescape

from docket.domain.cases import (
    STATUS_ADJOURNED,
    STATUS_CLOSED,
    STATUS_FILED,
    STATUS_IN_PROGRESS,
    Case,
)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

EMPTY_STORE_MESSAGE = "No cases currently registered in the system."
NO_MATCHES_MESSAGE = "No matching cases found."

BADGE_NEUTRAL = "neutral"
STATUS_BADGES = {
    STATUS_FILED: "warning",
    STATUS_IN_PROGRESS: "info",
    STATUS_ADJOURNED: "danger",
    STATUS_CLOSED: "success",
}

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


@dataclass(frozen=True)
class CaseRow:
    case_id: str
    title: str
    parties: str
    status: str
    badge: str
    hearing_date: str
    delete_url: str


@dataclass(frozen=True)
class RenderedList:
    rows: Tuple[CaseRow, ...]
    empty_message: Optional[str]

    @property
    def is_empty(self) -> bool:
        return not self.rows


def status_badge(status: str | None) -> str:
    return STATUS_BADGES.get(status or "", BADGE_NEUTRAL)


def delete_url(case_id: str) -> str:
    return "/cases/delete?" + urlparse.urlencode({"case_id": case_id})


def _display_key(case: Case) -> tuple:
    date = (case.hearing_date or "").strip()
    # undated rows go last; sorted() is stable so their order is kept
    return (0, date) if date else (1, "")


def display_order(records: Iterable[Case]) -> list[Case]:
    return sorted(records, key=_display_key)


def _row(case: Case) -> CaseRow:
    return CaseRow(
        case_id=case.case_id,
        title=case.title,
        parties=case.parties,
        status=case.status,
        badge=status_badge(case.status),
        hearing_date=case.hearing_date,
        delete_url=delete_url(case.case_id),
    )


def render_case_list(records: Iterable[Case], empty_message: str) -> RenderedList:
    """
    Project records into display rows sorted by hearing date.
    Does not touch the store; the caller passes the (filtered) records.
    """
    rows = tuple(_row(case) for case in display_order(records))
    return RenderedList(rows=rows, empty_message=None if rows else empty_message)


def render_rows_html(rendered: RenderedList) -> str:
    """Render only the <tbody> content, used by the live search box."""
    return _env.get_template("_case_rows.html").render(listing=rendered)
