# -*- coding: utf-8 -*-
"""Resource library — API endpoints (public)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from .models import Resource, ResourceListResponse
from .storage import increment_helpful, increment_view, list_resources

router = APIRouter(prefix="/api/resources", tags=["Resources"])


@router.get("", response_model=ResourceListResponse, summary="Browse the resource library")
def get_resources(
    category: Optional[str] = Query(default=None, description="helpline | article | video"),
    language: Optional[str] = Query(default=None),
):
    items = [Resource.model_validate(r) for r in list_resources(category=category, language=language)]
    return ResourceListResponse(count=len(items), items=items)


@router.post("/{resource_id}/view", response_model=Resource, summary="Count a resource view")
def view_resource(resource_id: str):
    return Resource.model_validate(increment_view(resource_id))


@router.post("/{resource_id}/helpful", response_model=Resource, summary="Mark a resource as helpful")
def mark_helpful(resource_id: str):
    return Resource.model_validate(increment_helpful(resource_id))
