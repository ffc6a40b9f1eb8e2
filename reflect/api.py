# -*- coding: utf-8 -*-
"""
Reflect mental-wellness API

Mood tracking, journaling, self-assessments, crisis logging, trusted
contacts, a resource library and live breathing/meditation sessions.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, WebSocket
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .assessments.api import router as assessments_router
from .config import settings
from .contacts.api import router as contacts_router
from .crisis.api import router as crisis_router
from .journal.api import router as journal_router
from .mood.api import router as mood_router
from .resources.api import router as resources_router
from .resources.storage import seed_resources
from .sessions.api import router as sessions_router
from .sessions.security import get_session_id_from_request
from .wellness.api import router as wellness_router
from .wellness.realtime import websocket_endpoint

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Reflect",
    description="Mental-wellness companion: mood, journal, assessments, breathing and meditation",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _init_storage() -> None:
    init_app_db(settings.app_db_path)
    if settings.seed_resources:
        seed_resources(settings.app_db_path)


@app.on_event("startup")
def _startup_init_db() -> None:
    _init_storage()


# Ensure the DB exists even when lifespan events are not triggered (e.g. some test clients).
_init_storage()


_SESSION_EXEMPT_PREFIXES = (
    "/api/resources",
    "/api/wellness/exercises",
    "/api/wellness/meditations",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


def _is_session_exempt(request: Request) -> bool:
    path = request.url.path
    if path == "/api/health":
        return True
    if path.rstrip("/") == "/api/sessions" and request.method == "POST":
        return True
    return any(path.startswith(p) for p in _SESSION_EXEMPT_PREFIXES)


@app.middleware("http")
async def _session_gate(request: Request, call_next):
    if request.method != "OPTIONS" and request.url.path.startswith("/api") and not _is_session_exempt(request):
        try:
            get_session_id_from_request(request)
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(sessions_router)
app.include_router(mood_router)
app.include_router(journal_router)
app.include_router(crisis_router)
app.include_router(contacts_router)
app.include_router(assessments_router)
app.include_router(resources_router)
app.include_router(wellness_router)


@app.get("/api/health")
def health_check():
    return {
        "status": "ok",
        "version": app.version,
        "timestamp": datetime.now().isoformat(),
    }


@app.websocket("/api/ws/wellness")
async def wellness_websocket(websocket: WebSocket, session_id: Optional[str] = None):
    """Live breathing/meditation session"""
    await websocket_endpoint(websocket, session_id)


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = os.environ.get("REFLECT_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("REFLECT_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    logger.info("Starting Reflect on %s:%d", host, port)
    uvicorn.run("reflect.api:app", host=host, port=port, reload=False)
