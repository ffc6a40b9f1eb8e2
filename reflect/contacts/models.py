# -*- coding: utf-8 -*-
"""Trusted contacts — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class TrustedContactCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=3, max_length=32, pattern=r"^[0-9+()\-\s]+$")
    relationship: str = Field(..., min_length=1, max_length=64)


class TrustedContact(BaseModel):
    id: str
    name: str
    phone: str
    relationship: str


class TrustedContactListResponse(BaseModel):
    count: int
    items: List[TrustedContact]
