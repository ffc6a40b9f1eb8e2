# -*- coding: utf-8 -*-
"""Trusted contacts — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings


def add_contact(*, session_id: str, name: str, phone: str, relationship: str) -> Dict[str, Any]:
    contact_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO trusted_contacts (id, session_id, name, phone, relationship) VALUES (?, ?, ?, ?, ?)",
            (contact_id, session_id, name, phone, relationship),
        )
    return {"id": contact_id, "session_id": session_id, "name": name, "phone": phone, "relationship": relationship}


def list_contacts(*, session_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM trusted_contacts WHERE session_id = ? ORDER BY rowid ASC",
            (session_id,),
        ).fetchall()
        return [dict(r) for r in rows]


def delete_contact(*, session_id: str, contact_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM trusted_contacts WHERE id = ? AND session_id = ?",
            (contact_id, session_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Contact not found")
