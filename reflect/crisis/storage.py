# -*- coding: utf-8 -*-
"""Crisis events — DB storage helpers."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4

from ..app_db import db_conn, dump_list, load_list
from ..config import settings

logger = logging.getLogger(__name__)

RECENT_EVENTS_LIMIT = 20


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def log_crisis_event(
    *,
    session_id: str,
    severity: str,
    keywords: List[str],
    message: str,
    language: str,
) -> Dict[str, Any]:
    event_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO crisis_events (id, session_id, severity, keywords, message, language, timestamp)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (event_id, session_id, severity, dump_list(keywords), message, language, now),
        )
    logger.warning("Crisis event logged: severity=%s session=%s…", severity, session_id[:8])
    return {
        "id": event_id,
        "session_id": session_id,
        "severity": severity,
        "keywords": list(keywords),
        "message": message,
        "language": language,
        "timestamp": now,
    }


def list_crisis_events(*, session_id: str, limit: int = RECENT_EVENTS_LIMIT) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM crisis_events WHERE session_id = ? ORDER BY timestamp DESC, rowid DESC LIMIT ?",
            (session_id, int(limit)),
        ).fetchall()
    out: List[Dict[str, Any]] = []
    for r in rows:
        data = dict(r)
        data["keywords"] = load_list(data.get("keywords")) or []
        out.append(data)
    return out
