# -*- coding: utf-8 -*-
"""Resource library — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Resource(BaseModel):
    id: str
    title: str
    description: str
    category: str = Field(..., description="helpline | article | video")
    type: str = Field(..., description="phone | article | video")
    url: Optional[str] = None
    content: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    language: str
    helpful_count: int = Field(0, ge=0)
    view_count: int = Field(0, ge=0)


class ResourceListResponse(BaseModel):
    count: int
    items: List[Resource]
