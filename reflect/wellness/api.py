# -*- coding: utf-8 -*-
"""Wellness — API endpoints (exercise catalog + live session lookup)."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..sessions.security import get_current_session_id
from .models import ExerciseInfo, LiveSessionSummary, MeditationInfo, MeditationStepInfo, PhaseTiming
from .realtime import wellness_manager
from .timings import (
    EXERCISE_INFO,
    MEDITATION_INFO,
    ExerciseKind,
    MeditationKind,
    cycle_duration_ms,
    exercise_timings,
    meditation_duration_ms,
    meditation_steps,
    tick_interval_ms,
)

router = APIRouter(prefix="/api/wellness", tags=["Wellness"])


@router.get("/exercises", response_model=List[ExerciseInfo], summary="Breathing exercise catalog")
def list_exercises():
    out: List[ExerciseInfo] = []
    for kind in ExerciseKind:
        title, description = EXERCISE_INFO[kind]
        out.append(
            ExerciseInfo(
                kind=kind.value,
                title=title,
                description=description,
                phases=[PhaseTiming(phase=p.value, duration_ms=d) for p, d in exercise_timings(kind)],
                cycle_duration_ms=cycle_duration_ms(kind),
                tick_interval_ms=tick_interval_ms(kind),
            )
        )
    return out


@router.get("/meditations", response_model=List[MeditationInfo], summary="Guided meditation catalog")
def list_meditations():
    out: List[MeditationInfo] = []
    for kind in MeditationKind:
        title, description = MEDITATION_INFO[kind]
        out.append(
            MeditationInfo(
                kind=kind.value,
                title=title,
                description=description,
                steps=[MeditationStepInfo(text=s.text, duration_ms=s.duration_ms) for s in meditation_steps(kind)],
                total_duration_ms=meditation_duration_ms(kind),
                tick_interval_ms=tick_interval_ms(kind),
            )
        )
    return out


@router.get("/live/{client_id}", response_model=LiveSessionSummary, summary="Inspect a live wellness session")
def get_live_session(client_id: str, session_id: str = Depends(get_current_session_id)):
    summary = wellness_manager.get_summary(client_id)
    if not summary or summary.get("session_id") != session_id:
        raise HTTPException(status_code=404, detail="Live session not found")
    return LiveSessionSummary.model_validate(summary)
