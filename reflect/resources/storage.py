# -*- coding: utf-8 -*-
"""Resource library — DB storage helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn, dump_list, load_list
from ..config import settings
from .seed import SEED_RESOURCES

logger = logging.getLogger(__name__)


def _row_to_resource(row: Any) -> Dict[str, Any]:
    data = dict(row)
    data["tags"] = load_list(data.get("tags")) or []
    return data


def seed_resources(db_path: Optional[Path] = None) -> int:
    """Insert the built-in library into an empty table. Returns rows inserted."""
    path = db_path or settings.app_db_path
    with db_conn(path) as conn:
        existing = conn.execute("SELECT 1 FROM resources LIMIT 1").fetchone()
        if existing:
            logger.info("Resources already seeded")
            return 0
        for item in SEED_RESOURCES:
            conn.execute(
                """
                INSERT INTO resources (id, title, description, category, type, url, content, tags, language, helpful_count, view_count)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 0, 0)
                """,
                (
                    str(uuid4()),
                    item["title"],
                    item["description"],
                    item["category"],
                    item["type"],
                    item.get("url"),
                    item.get("content"),
                    dump_list(item.get("tags") or []),
                    item["language"],
                ),
            )
    logger.info("Resources seeded successfully (%d items)", len(SEED_RESOURCES))
    return len(SEED_RESOURCES)


def list_resources(*, category: Optional[str] = None, language: Optional[str] = None) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM resources"
    clauses: list[str] = []
    params: list[Any] = []
    if category is not None:
        clauses.append("category = ?")
        params.append(category)
    if language:
        clauses.append("language = ?")
        params.append(language)
    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY rowid ASC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, tuple(params)).fetchall()
        return [_row_to_resource(r) for r in rows]


def _increment(resource_id: str, column: str) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            f"UPDATE resources SET {column} = {column} + 1 WHERE id = ?",
            (resource_id,),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Resource not found")
        row = conn.execute("SELECT * FROM resources WHERE id = ?", (resource_id,)).fetchone()
        return _row_to_resource(row)


def increment_view(resource_id: str) -> Dict[str, Any]:
    return _increment(resource_id, "view_count")


def increment_helpful(resource_id: str) -> Dict[str, Any]:
    return _increment(resource_id, "helpful_count")
