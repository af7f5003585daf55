import logging
import os

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from docket.core.config import Settings, get_settings
from docket.core.logging import configure_logging
from docket.repositories.case_store import CaseStore
from docket.repositories.json_storage import CasePersistence, JsonSlotStorage
from docket.routers import cases as cases_router
from docket.services.case_service import CaseController

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "web")
TEMPLATES = os.path.join(BASE, "templates")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; style-src 'self'; script-src 'self'; object-src 'none'; base-uri 'none'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "same-origin")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def build_controller(settings: Settings) -> CaseController:
    storage = JsonSlotStorage(settings.storage_path)
    persistence = CasePersistence(storage, key=settings.storage_key)
    return CaseController(
        CaseStore(),
        persistence,
        rollback_on_save_error=settings.rollback_on_save_error,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn (`uvicorn docket.app:create_app --factory`)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Docket Case Tracker")
    app.mount("/static", StaticFiles(directory=WEB), name="static")
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    controller = build_controller(settings)
    controller.startup()
    app.state.case_controller = controller

    @app.get("/favicon.ico")
    def favicon():
        return Response(status_code=204)

    # Silence Chrome devtools probes (avoids noisy 404s in the logs)
    @app.get("/.well-known/appspecific/com.chrome.devtools.json")
    def chrome_devtools_wellknown():
        return PlainTextResponse("", status_code=204)

    app.include_router(cases_router.router)
    logger.info("Docket ready (storage=%s, env=%s)", settings.storage_path, settings.app_env)
    return app
