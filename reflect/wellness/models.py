# -*- coding: utf-8 -*-
"""Wellness catalog — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class PhaseTiming(BaseModel):
    phase: str = Field(..., description="inhale | hold1 | exhale | hold2")
    duration_ms: int = Field(..., ge=0, description="0 means the phase is skipped")


class ExerciseInfo(BaseModel):
    kind: str
    title: str
    description: str
    phases: List[PhaseTiming]
    cycle_duration_ms: int
    tick_interval_ms: int


class MeditationStepInfo(BaseModel):
    text: str
    duration_ms: int = Field(..., ge=0)


class MeditationInfo(BaseModel):
    kind: str
    title: str
    description: str
    steps: List[MeditationStepInfo]
    total_duration_ms: int
    tick_interval_ms: int


class LiveSessionSummary(BaseModel):
    client_id: str
    session_id: Optional[str] = None
    connected_at: str
    duration_seconds: float
    ticking: bool
    state: dict
