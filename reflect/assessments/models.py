# -*- coding: utf-8 -*-
"""Assessments — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class AssessmentCreateRequest(BaseModel):
    type: str = Field(..., min_length=1, max_length=32, description="phq9 | gad7 | custom type")
    answers: List[int] = Field(default_factory=list)
    # Required only for types that are not scored server-side.
    score: Optional[int] = Field(default=None, ge=0)
    severity: Optional[str] = Field(default=None, max_length=32)


class Assessment(BaseModel):
    id: str
    type: str
    score: int
    severity: str
    answers: List[int]
    timestamp: str


class AssessmentListResponse(BaseModel):
    count: int
    items: List[Assessment]
