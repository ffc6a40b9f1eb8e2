# -*- coding: utf-8 -*-
"""Mood — API endpoints (entries + statistics)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..sessions.security import get_current_session_id
from .models import MoodEntry, MoodEntryCreateRequest, MoodEntryListResponse, MoodStatsSummary
from .stats import compute_mood_stats
from .storage import collect_mood_entries, create_mood_entry, list_mood_entries

router = APIRouter(prefix="/api/mood", tags=["Mood"])


@router.post("/entries", response_model=MoodEntry, summary="Log a mood entry")
def log_mood(request: MoodEntryCreateRequest, session_id: str = Depends(get_current_session_id)):
    row = create_mood_entry(
        session_id=session_id,
        mood=request.mood,
        intensity=request.intensity,
        notes=(request.notes or "").strip() or None,
        triggers=request.triggers,
        activities=request.activities,
    )
    return MoodEntry.model_validate(row)


@router.get("/entries", response_model=MoodEntryListResponse, summary="List my mood entries (newest first)")
def list_moods(
    limit: int = Query(default=100, ge=1, le=500),
    session_id: str = Depends(get_current_session_id),
):
    rows = list_mood_entries(session_id=session_id, limit=limit)
    items = [MoodEntry.model_validate(r) for r in rows]
    return MoodEntryListResponse(count=len(items), items=items)


@router.get("/stats", response_model=Optional[MoodStatsSummary], summary="Mood statistics (null when no data)")
def mood_stats(session_id: str = Depends(get_current_session_id)):
    return compute_mood_stats(collect_mood_entries(session_id=session_id))
