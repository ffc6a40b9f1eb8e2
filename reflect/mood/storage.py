# -*- coding: utf-8 -*-
"""Mood — DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn, dump_list, load_list
from ..config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_entry(row: Any) -> Dict[str, Any]:
    data = dict(row)
    data["triggers"] = load_list(data.get("triggers"))
    data["activities"] = load_list(data.get("activities"))
    return data


def create_mood_entry(
    *,
    session_id: str,
    mood: str,
    intensity: int,
    notes: Optional[str] = None,
    triggers: Optional[List[str]] = None,
    activities: Optional[List[str]] = None,
) -> Dict[str, Any]:
    entry_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO mood_entries (id, session_id, mood, intensity, notes, triggers, activities, timestamp)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (entry_id, session_id, mood, int(intensity), notes, dump_list(triggers), dump_list(activities), now),
        )
    return {
        "id": entry_id,
        "session_id": session_id,
        "mood": mood,
        "intensity": int(intensity),
        "notes": notes,
        "triggers": triggers,
        "activities": activities,
        "timestamp": now,
    }


def list_mood_entries(*, session_id: str, limit: int = 100) -> List[Dict[str, Any]]:
    """Newest first."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM mood_entries WHERE session_id = ? ORDER BY timestamp DESC, rowid DESC LIMIT ?",
            (session_id, int(limit)),
        ).fetchall()
        return [_row_to_entry(r) for r in rows]


def collect_mood_entries(*, session_id: str) -> List[Dict[str, Any]]:
    """All entries of a session in insertion order (input for statistics)."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM mood_entries WHERE session_id = ? ORDER BY timestamp ASC, rowid ASC",
            (session_id,),
        ).fetchall()
        return [_row_to_entry(r) for r in rows]
