# -*- coding: utf-8 -*-
"""Sessions — API endpoints (token issue + conversation log)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from .models import ConversationMessageCreateRequest, SessionCreateRequest, SessionResponse
from .security import generate_session_id, get_current_session_id, is_valid_session_id
from .storage import append_message, clear_conversation, create_session, require_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])


@router.post("", response_model=SessionResponse, summary="Create (or re-register) an anonymous session")
def create_anonymous_session(request: SessionCreateRequest):
    session_id = request.session_id
    if session_id is not None:
        session_id = session_id.strip().lower()
        if not is_valid_session_id(session_id):
            raise HTTPException(status_code=400, detail="session_id must be 64 hex characters")
    else:
        session_id = generate_session_id()
        logger.info("Issued new session %s…", session_id[:8])
    row = create_session(session_id=session_id, language=request.language)
    return SessionResponse.model_validate(row)


@router.get("/me", response_model=SessionResponse, summary="Get my session")
def get_my_session(session_id: str = Depends(get_current_session_id)):
    return SessionResponse.model_validate(require_session(session_id=session_id))


@router.post("/me/messages", response_model=SessionResponse, summary="Append a conversation message")
def add_message(request: ConversationMessageCreateRequest, session_id: str = Depends(get_current_session_id)):
    row = append_message(
        session_id=session_id,
        role=request.role,
        content=request.content,
        sentiment=request.sentiment,
    )
    return SessionResponse.model_validate(row)


@router.delete("/me/messages", summary="Clear the conversation history")
def clear_messages(session_id: str = Depends(get_current_session_id)):
    clear_conversation(session_id=session_id)
    return {"ok": True}
