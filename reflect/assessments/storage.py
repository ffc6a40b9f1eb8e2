# -*- coding: utf-8 -*-
"""Assessments — DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn, dump_list, load_list
from ..config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def save_assessment(
    *,
    session_id: str,
    assessment_type: str,
    score: int,
    severity: str,
    answers: List[int],
) -> Dict[str, Any]:
    assessment_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO assessments (id, session_id, type, score, severity, answers, timestamp)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (assessment_id, session_id, assessment_type, int(score), severity, dump_list(answers), now),
        )
    return {
        "id": assessment_id,
        "session_id": session_id,
        "type": assessment_type,
        "score": int(score),
        "severity": severity,
        "answers": list(answers),
        "timestamp": now,
    }


def list_assessments(*, session_id: str, assessment_type: Optional[str] = None) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM assessments WHERE session_id = ?"
    params: list[Any] = [session_id]
    if assessment_type:
        sql += " AND type = ?"
        params.append(assessment_type)
    sql += " ORDER BY timestamp ASC, rowid ASC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, tuple(params)).fetchall()
    out: List[Dict[str, Any]] = []
    for r in rows:
        data = dict(r)
        data["answers"] = load_list(data.get("answers")) or []
        out.append(data)
    return out
