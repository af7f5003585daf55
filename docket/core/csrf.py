from __future__ import annotations

import secrets
from urllib import parse as urlparse

from fastapi import Request, Response

from docket.core.config import get_settings

CSRF_COOKIE_NAME = "docket_csrf"
CSRF_HEADER_NAME = "x-csrf-token"


class CsrfError(Exception):
    """Raised when a mutating form arrives without a matching token."""


def _new_token() -> str:
    return secrets.token_urlsafe(32)


def ensure_csrf_token(request: Request) -> str:
    token = request.cookies.get(CSRF_COOKIE_NAME)
    if not token or len(token) < 16:
        token = _new_token()
    return token


def set_csrf_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        CSRF_COOKIE_NAME,
        token,
        max_age=7 * 24 * 60 * 60,
        httponly=True,
        secure=settings.app_env == "prod",
        samesite="strict",
        path="/",
    )


def _validate_origin(request: Request) -> None:
    source = request.headers.get("origin") or request.headers.get("referer") or ""
    if not source:
        return
    try:
        parsed = urlparse.urlparse(source)
    except ValueError:
        raise CsrfError("Invalid request origin.")
    host = (request.headers.get("host") or "").split(":", 1)[0].lower()
    parsed_host = (parsed.hostname or "").lower()
    if parsed_host and host and parsed_host != host:
        raise CsrfError("Invalid request origin.")
    if parsed.scheme and parsed.scheme != request.url.scheme:
        raise CsrfError("Invalid request origin.")


def validate_csrf(request: Request, supplied_token: str | None) -> None:
    cookie_token = request.cookies.get(CSRF_COOKIE_NAME)
    header_token = request.headers.get(CSRF_HEADER_NAME)
    token = (supplied_token or "").strip() or (header_token or "").strip()
    if not cookie_token or not token:
        raise CsrfError("Missing form token, reload the page and try again.")
    if not secrets.compare_digest(cookie_token, token):
        raise CsrfError("Invalid form token, reload the page and try again.")
    _validate_origin(request)
