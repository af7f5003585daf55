from __future__ import annotations

import urllib.parse as urlparse

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from docket.core import csrf
from docket.core.config import get_settings
from docket.domain.cases import KNOWN_STATUSES, STATUS_FILED
from docket.domain.errors import CaseError
from docket.services.case_display import render_rows_html
from docket.services.case_service import (
    NOTICE_ERROR,
    NOTICE_INFO,
    NOTICE_SUCCESS,
    CaseController,
    Notification,
)

router = APIRouter(prefix="", tags=["cases"])

NOTICE_KINDS = {NOTICE_SUCCESS, NOTICE_ERROR, NOTICE_INFO}


def _get_controller(request: Request) -> CaseController:
    ctrl = getattr(getattr(request.app, "state", None), "case_controller", None)
    if not ctrl:
        raise RuntimeError("CaseController not configured")
    return ctrl


def _get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _redirect_home(notice: Notification | None = None, q: str = "") -> RedirectResponse:
    params = {}
    if q.strip():
        params["q"] = q
    if notice:
        params["notice"] = notice.message
        params["kind"] = notice.kind
    query = urlparse.urlencode(params)
    return RedirectResponse("/" + (f"?{query}" if query else ""), status_code=303)


def _error_notice(err: CaseError) -> Notification:
    return Notification(err.message, NOTICE_ERROR)


@router.get("/", response_class=HTMLResponse)
def case_list(request: Request, q: str = "", notice: str = "", kind: str = ""):
    ctrl = _get_controller(request)
    templates = _get_templates(request)
    csrf_token = csrf.ensure_csrf_token(request)
    context = {
        "listing": ctrl.view(q),
        "q": q,
        "statuses": KNOWN_STATUSES,
        "default_status": STATUS_FILED,
        "notice": notice,
        "notice_kind": kind if kind in NOTICE_KINDS else NOTICE_INFO,
        "notice_ttl_ms": get_settings().notice_ttl_ms,
        "csrf_token": csrf_token,
    }
    response = templates.TemplateResponse(request, "cases.html", context)
    csrf.set_csrf_cookie(response, csrf_token)
    return response


@router.get("/cases/rows", response_class=HTMLResponse)
def case_rows(request: Request, q: str = ""):
    ctrl = _get_controller(request)
    return HTMLResponse(render_rows_html(ctrl.search(q)))


@router.get("/api/cases")
def case_list_json(request: Request, q: str = ""):
    ctrl = _get_controller(request)
    listing = ctrl.search(q)
    return JSONResponse(
        {
            "cases": [
                {
                    "caseId": row.case_id,
                    "title": row.title,
                    "parties": row.parties,
                    "status": row.status,
                    "hearingDate": row.hearing_date,
                }
                for row in listing.rows
            ],
            "emptyMessage": listing.empty_message,
        }
    )


@router.post("/cases")
def register_case(
    request: Request,
    case_id: str = Form(""),
    title: str = Form(""),
    parties: str = Form(""),
    status: str = Form(STATUS_FILED),
    hearing_date: str = Form(""),
    q: str = Form(""),
    csrf_token: str = Form(""),
):
    try:
        csrf.validate_csrf(request, csrf_token)
    except csrf.CsrfError as exc:
        return _redirect_home(Notification(str(exc), NOTICE_ERROR), q)
    ctrl = _get_controller(request)
    try:
        notice = ctrl.register_case(case_id, title, parties, status, hearing_date)
    except CaseError as exc:
        return _redirect_home(_error_notice(exc), q)
    return _redirect_home(notice, q)


@router.get("/cases/delete", response_class=HTMLResponse)
def confirm_delete(request: Request, case_id: str = "", q: str = ""):
    ctrl = _get_controller(request)
    case = ctrl.find(case_id)
    if case is None:
        return _redirect_home(Notification("Error: Case not found.", NOTICE_ERROR), q)
    templates = _get_templates(request)
    csrf_token = csrf.ensure_csrf_token(request)
    response = templates.TemplateResponse(
        request,
        "confirm_delete.html",
        {"case": case, "q": q, "csrf_token": csrf_token},
    )
    csrf.set_csrf_cookie(response, csrf_token)
    return response


@router.post("/cases/delete")
def delete_case(
    request: Request,
    case_id: str = Form(""),
    confirm: str = Form(""),
    q: str = Form(""),
    csrf_token: str = Form(""),
):
    try:
        csrf.validate_csrf(request, csrf_token)
    except csrf.CsrfError as exc:
        return _redirect_home(Notification(str(exc), NOTICE_ERROR), q)
    ctrl = _get_controller(request)
    try:
        notice = ctrl.delete_case(case_id, confirmed=confirm.strip().lower() == "yes")
    except CaseError as exc:
        return _redirect_home(_error_notice(exc), q)
    return _redirect_home(notice, q)
