# -*- coding: utf-8 -*-
"""Sessions — Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class SessionCreateRequest(BaseModel):
    # Optional: re-register a token the client already persisted.
    session_id: Optional[str] = Field(default=None, description="64 hex characters")
    language: Optional[str] = Field(default=None, max_length=16)


class ConversationMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1, max_length=10_000)
    timestamp: str
    sentiment: Optional[float] = None


class ConversationMessageCreateRequest(BaseModel):
    role: Literal["user", "assistant"] = "user"
    content: str = Field(..., min_length=1, max_length=10_000)
    sentiment: Optional[float] = Field(default=None, ge=-1.0, le=1.0)


class SessionResponse(BaseModel):
    session_id: str
    conversation_history: List[ConversationMessage]
    language: Optional[str] = None
    created_at: str
    last_active: str
