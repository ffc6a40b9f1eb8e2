# -*- coding: utf-8 -*-
"""Journal — DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn, dump_list, load_list
from ..config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_entry(row: Any) -> Dict[str, Any]:
    data = dict(row)
    data["tags"] = load_list(data.get("tags"))
    return data


def create_entry(
    *,
    session_id: str,
    title: str,
    content: str,
    mood: Optional[str] = None,
    tags: Optional[List[str]] = None,
    prompt: Optional[str] = None,
) -> Dict[str, Any]:
    entry_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO journal_entries (id, session_id, title, content, mood, tags, prompt, timestamp)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (entry_id, session_id, title, content, mood, dump_list(tags), prompt, now),
        )
    return {
        "id": entry_id,
        "session_id": session_id,
        "title": title,
        "content": content,
        "mood": mood,
        "tags": tags,
        "prompt": prompt,
        "timestamp": now,
    }


def list_entries(*, session_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM journal_entries WHERE session_id = ? ORDER BY timestamp DESC, rowid DESC",
            (session_id,),
        ).fetchall()
        return [_row_to_entry(r) for r in rows]


def get_entry(*, session_id: str, entry_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM journal_entries WHERE id = ? AND session_id = ?",
            (entry_id, session_id),
        ).fetchone()
        return _row_to_entry(row) if row else None


def require_entry(*, session_id: str, entry_id: str) -> Dict[str, Any]:
    row = get_entry(session_id=session_id, entry_id=entry_id)
    if not row:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return row


def update_entry(
    *,
    session_id: str,
    entry_id: str,
    title: str,
    content: str,
    mood: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> Dict[str, Any]:
    require_entry(session_id=session_id, entry_id=entry_id)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE journal_entries SET title = ?, content = ?, mood = ?, tags = ? WHERE id = ? AND session_id = ?",
            (title, content, mood, dump_list(tags), entry_id, session_id),
        )
    return require_entry(session_id=session_id, entry_id=entry_id)


def delete_entry(*, session_id: str, entry_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM journal_entries WHERE id = ? AND session_id = ?",
            (entry_id, session_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Journal entry not found")
