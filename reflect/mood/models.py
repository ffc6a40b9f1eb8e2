# -*- coding: utf-8 -*-
"""Mood — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class MoodEntryCreateRequest(BaseModel):
    mood: str = Field(..., min_length=1, max_length=32, description="happy | calm | anxious | sad | angry | stressed | …")
    intensity: int = Field(..., ge=1, le=10)
    notes: Optional[str] = Field(default=None, max_length=5_000)
    triggers: Optional[List[str]] = None
    activities: Optional[List[str]] = None


class MoodEntry(BaseModel):
    id: str
    mood: str
    intensity: int
    notes: Optional[str] = None
    triggers: Optional[List[str]] = None
    activities: Optional[List[str]] = None
    timestamp: str


class MoodEntryListResponse(BaseModel):
    count: int
    items: List[MoodEntry]


class MoodStatsSummary(BaseModel):
    total_entries: int = Field(..., ge=1)
    avg_intensity: float
    most_common_mood: str
    common_triggers: List[str] = Field(default_factory=list)
    helpful_activities: List[str] = Field(default_factory=list)
