# -*- coding: utf-8 -*-
"""Crisis events — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CrisisEventCreateRequest(BaseModel):
    severity: str = Field(..., min_length=1, max_length=32, pattern=r"\S", description="e.g. low | medium | high | critical")
    keywords: List[str] = Field(default_factory=list)
    message: str = Field(..., min_length=1, max_length=10_000)
    language: str = Field(default="en", min_length=2, max_length=16)


class CrisisEvent(BaseModel):
    id: str
    severity: str
    keywords: List[str]
    message: str
    language: str
    timestamp: str


class CrisisEventListResponse(BaseModel):
    count: int
    items: List[CrisisEvent]
