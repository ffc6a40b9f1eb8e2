# -*- coding: utf-8 -*-
"""Sessions — DB storage helpers (conversation history is capped)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_session(row: Any) -> Dict[str, Any]:
    data = dict(row)
    data["conversation_history"] = json.loads(data.get("conversation_history") or "[]")
    return data


def create_session(*, session_id: str, language: Optional[str] = None) -> Dict[str, Any]:
    """Create the session record; an existing record is returned unchanged."""
    existing = get_session(session_id=session_id)
    if existing:
        return existing
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT OR IGNORE INTO sessions (session_id, conversation_history, language, created_at, last_active)
            VALUES (?, '[]', ?, ?, ?)
            """,
            (session_id, language, now, now),
        )
    return get_session(session_id=session_id) or {
        "session_id": session_id,
        "conversation_history": [],
        "language": language,
        "created_at": now,
        "last_active": now,
    }


def get_session(*, session_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM sessions WHERE session_id = ?",
            (session_id,),
        ).fetchone()
        return _row_to_session(row) if row else None


def require_session(*, session_id: str) -> Dict[str, Any]:
    row = get_session(session_id=session_id)
    if not row:
        raise HTTPException(status_code=404, detail="Session not found")
    return row


def append_message(
    *,
    session_id: str,
    role: str,
    content: str,
    sentiment: Optional[float] = None,
) -> Dict[str, Any]:
    session = require_session(session_id=session_id)
    now = _utc_now()
    message: Dict[str, Any] = {"role": role, "content": content, "timestamp": now}
    if sentiment is not None:
        message["sentiment"] = sentiment

    history: List[Dict[str, Any]] = list(session["conversation_history"]) + [message]
    limit = max(int(settings.conversation_limit), 1)
    recent = history[-limit:]
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE sessions SET conversation_history = ?, last_active = ? WHERE session_id = ?",
            (json.dumps(recent, ensure_ascii=False), now, session_id),
        )
    session.update({"conversation_history": recent, "last_active": now})
    return session


def clear_conversation(*, session_id: str) -> None:
    # Clearing an unknown session is a no-op.
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE sessions SET conversation_history = '[]', last_active = ? WHERE session_id = ?",
            (_utc_now(), session_id),
        )
