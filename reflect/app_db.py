# -*- coding: utf-8 -*-
"""App database — SQLite helpers.

Every table except ``resources`` is scoped by the opaque ``session_id`` token.
List-valued fields are stored as JSON text.
"""

from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS sessions (
                session_id TEXT PRIMARY KEY,
                conversation_history TEXT NOT NULL DEFAULT '[]',
                language TEXT,
                created_at TEXT NOT NULL,
                last_active TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS mood_entries (
                id TEXT PRIMARY KEY,
                session_id TEXT NOT NULL,
                mood TEXT NOT NULL,
                intensity INTEGER NOT NULL,
                notes TEXT,
                triggers TEXT,
                activities TEXT,
                timestamp TEXT NOT NULL
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_mood_entries_session_ts ON mood_entries(session_id, timestamp);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS journal_entries (
                id TEXT PRIMARY KEY,
                session_id TEXT NOT NULL,
                title TEXT NOT NULL,
                content TEXT NOT NULL,
                mood TEXT,
                tags TEXT,
                prompt TEXT,
                timestamp TEXT NOT NULL
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_journal_entries_session_ts ON journal_entries(session_id, timestamp);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS crisis_events (
                id TEXT PRIMARY KEY,
                session_id TEXT NOT NULL,
                severity TEXT NOT NULL,
                keywords TEXT NOT NULL,
                message TEXT NOT NULL,
                language TEXT NOT NULL,
                timestamp TEXT NOT NULL
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_crisis_events_session_ts ON crisis_events(session_id, timestamp);"
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_crisis_events_severity ON crisis_events(severity);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS resources (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                description TEXT NOT NULL,
                category TEXT NOT NULL,
                type TEXT NOT NULL,
                url TEXT,
                content TEXT,
                tags TEXT NOT NULL,
                language TEXT NOT NULL,
                helpful_count INTEGER NOT NULL DEFAULT 0,
                view_count INTEGER NOT NULL DEFAULT 0
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_resources_category ON resources(category);")
        cur.execute("CREATE INDEX IF NOT EXISTS idx_resources_language ON resources(language);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS assessments (
                id TEXT PRIMARY KEY,
                session_id TEXT NOT NULL,
                type TEXT NOT NULL,
                score INTEGER NOT NULL,
                severity TEXT NOT NULL,
                answers TEXT NOT NULL,
                timestamp TEXT NOT NULL
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_assessments_session_ts ON assessments(session_id, timestamp);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS trusted_contacts (
                id TEXT PRIMARY KEY,
                session_id TEXT NOT NULL,
                name TEXT NOT NULL,
                phone TEXT NOT NULL,
                relationship TEXT NOT NULL
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_trusted_contacts_session ON trusted_contacts(session_id);"
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def dump_list(values: Optional[List[Any]]) -> Optional[str]:
    if values is None:
        return None
    return json.dumps(list(values), ensure_ascii=False)


def load_list(raw: Optional[str]) -> Optional[List[Any]]:
    if raw is None:
        return None
    value = json.loads(raw)
    return list(value) if isinstance(value, list) else []
