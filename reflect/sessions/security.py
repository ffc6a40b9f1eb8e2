# -*- coding: utf-8 -*-
"""Sessions — opaque session tokens + FastAPI helpers."""

from __future__ import annotations

import re
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request

SESSION_HEADER_NAME = "x-session-id"

_SESSION_ID_RE = re.compile(r"^[0-9a-f]{64}$")


def generate_session_id() -> str:
    """32 random bytes rendered as lowercase hex."""
    return secrets.token_hex(32)


def is_valid_session_id(value: Optional[str]) -> bool:
    return bool(value) and bool(_SESSION_ID_RE.match(value or ""))


def get_session_id_from_request(request: Request) -> str:
    # If middleware already validated the header, reuse it.
    cached = getattr(request.state, "session_id", None)
    if cached:
        return cached

    raw = (request.headers.get(SESSION_HEADER_NAME) or "").strip().lower()
    if not raw:
        raise HTTPException(status_code=401, detail="Missing session id")
    if not is_valid_session_id(raw):
        raise HTTPException(status_code=401, detail="Invalid session id")
    request.state.session_id = raw
    return raw


def get_current_session_id(session_id: str = Depends(get_session_id_from_request)) -> str:
    return session_id
