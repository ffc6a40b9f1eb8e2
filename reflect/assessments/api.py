# -*- coding: utf-8 -*-
"""Assessments — API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..sessions.security import get_current_session_id
from .models import Assessment, AssessmentCreateRequest, AssessmentListResponse
from .scoring import AssessmentType, is_scored_type, score_assessment
from .storage import list_assessments, save_assessment

router = APIRouter(prefix="/api/assessments", tags=["Assessments"])


@router.post("", response_model=Assessment, summary="Save a self-assessment")
def create_assessment(request: AssessmentCreateRequest, session_id: str = Depends(get_current_session_id)):
    assessment_type = request.type.strip().lower()
    if is_scored_type(assessment_type):
        try:
            result = score_assessment(AssessmentType(assessment_type), request.answers)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        score, severity = result.score, result.severity
    else:
        if request.score is None or not request.severity:
            raise HTTPException(status_code=400, detail="score and severity are required for this assessment type")
        score, severity = request.score, request.severity

    row = save_assessment(
        session_id=session_id,
        assessment_type=assessment_type,
        score=score,
        severity=severity,
        answers=request.answers,
    )
    return Assessment.model_validate(row)


@router.get("", response_model=AssessmentListResponse, summary="List my assessments")
def get_assessments(
    type: Optional[str] = Query(default=None, description="Filter by assessment type"),
    session_id: str = Depends(get_current_session_id),
):
    rows = list_assessments(session_id=session_id, assessment_type=(type or "").strip().lower() or None)
    items = [Assessment.model_validate(r) for r in rows]
    return AssessmentListResponse(count=len(items), items=items)
