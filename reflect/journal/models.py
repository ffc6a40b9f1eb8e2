# -*- coding: utf-8 -*-
"""Journal — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class JournalEntryCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=50_000)
    mood: Optional[str] = Field(default=None, max_length=32)
    tags: Optional[List[str]] = None
    prompt: Optional[str] = Field(default=None, max_length=500)


class JournalEntryUpdateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=50_000)
    mood: Optional[str] = Field(default=None, max_length=32)
    tags: Optional[List[str]] = None


class JournalEntry(BaseModel):
    id: str
    title: str
    content: str
    mood: Optional[str] = None
    tags: Optional[List[str]] = None
    prompt: Optional[str] = None
    timestamp: str


class JournalEntryListResponse(BaseModel):
    count: int
    items: List[JournalEntry]
