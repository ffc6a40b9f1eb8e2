# -*- coding: utf-8 -*-
"""Crisis events — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..sessions.security import get_current_session_id
from .models import CrisisEvent, CrisisEventCreateRequest, CrisisEventListResponse
from .storage import list_crisis_events, log_crisis_event

router = APIRouter(prefix="/api/crisis", tags=["Crisis"])


@router.post("/events", response_model=CrisisEvent, summary="Log a crisis event")
def create_crisis_event(request: CrisisEventCreateRequest, session_id: str = Depends(get_current_session_id)):
    row = log_crisis_event(
        session_id=session_id,
        severity=request.severity.strip(),
        keywords=[k.strip() for k in request.keywords if k.strip()],
        message=request.message,
        language=request.language,
    )
    return CrisisEvent.model_validate(row)


@router.get("/events", response_model=CrisisEventListResponse, summary="Recent crisis events (newest 20)")
def get_crisis_events(session_id: str = Depends(get_current_session_id)):
    items = [CrisisEvent.model_validate(r) for r in list_crisis_events(session_id=session_id)]
    return CrisisEventListResponse(count=len(items), items=items)
