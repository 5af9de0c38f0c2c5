"""
HTTP surface for the email -> LinkedIn lookup.

POST /api/lookup runs one stateless lookup. When a built frontend is present
it is served from FRONTEND_DIST with an index.html fallback for client routes.
"""
import logging
import os
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from config.settings import Settings, get_settings
from models.lookup_result import LookupRequest, LookupResult
from pipelines.lookup import lookup_email
from services.errors import InputValidationError, LookupFailure
from utils.logging_setup import init_logging

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred. Please try again later."


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    init_logging(settings.log_level)

    app = FastAPI(
        title="Email to LinkedIn Lookup",
        description="Resolve an email address to probable LinkedIn profiles",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(LookupFailure)
    async def _lookup_failure_handler(request: Request, exc: LookupFailure):
        return _failure(exc.status_code, exc.public_message)

    @app.exception_handler(RequestValidationError)
    async def _bad_body_handler(request: Request, exc: RequestValidationError):
        return _failure(400, InputValidationError.public_message)

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "sources": {
                "apollo": settings.apollo_enabled,
                "google": settings.google_enabled,
            },
        }

    @app.post("/api/lookup", response_model=LookupResult)
    async def lookup(body: LookupRequest):
        request_id = uuid.uuid4().hex[:12]
        try:
            # The pipeline does blocking HTTP, keep it off the event loop
            return await run_in_threadpool(
                lookup_email, body.email, body.name, body.country, settings=settings,
            )
        except LookupFailure:
            raise
        except Exception:
            logger.exception("Lookup failed", extra={"request_id": request_id, "status": "error"})
            return _failure(500, INTERNAL_ERROR_MESSAGE)

    _mount_frontend(app, settings.frontend_dist)
    return app


def _mount_frontend(app: FastAPI, frontend_dist: Optional[str]) -> None:
    if not frontend_dist or not os.path.isdir(frontend_dist):
        logger.info("No frontend build found; serving API only")
        return

    root = os.path.abspath(frontend_dist)
    index_path = os.path.join(root, "index.html")
    assets_dir = os.path.join(root, "assets")
    if os.path.isdir(assets_dir):
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def spa(full_path: str):
        candidate = os.path.abspath(os.path.join(root, full_path))
        if full_path and candidate.startswith(root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)
        if os.path.isfile(index_path):
            return FileResponse(index_path)
        return _failure(404, "Not found")
