# -*- coding: utf-8 -*-
"""Journal — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..sessions.security import get_current_session_id
from .models import JournalEntry, JournalEntryCreateRequest, JournalEntryListResponse, JournalEntryUpdateRequest
from .storage import create_entry, delete_entry, list_entries, update_entry

router = APIRouter(prefix="/api/journal", tags=["Journal"])


@router.post("/entries", response_model=JournalEntry, summary="Write a journal entry")
def create_journal_entry(request: JournalEntryCreateRequest, session_id: str = Depends(get_current_session_id)):
    row = create_entry(
        session_id=session_id,
        title=request.title.strip(),
        content=request.content.strip(),
        mood=request.mood,
        tags=request.tags,
        prompt=request.prompt,
    )
    return JournalEntry.model_validate(row)


@router.get("/entries", response_model=JournalEntryListResponse, summary="List my journal entries (newest first)")
def list_journal_entries(session_id: str = Depends(get_current_session_id)):
    items = [JournalEntry.model_validate(r) for r in list_entries(session_id=session_id)]
    return JournalEntryListResponse(count=len(items), items=items)


@router.put("/entries/{entry_id}", response_model=JournalEntry, summary="Update a journal entry")
def update_journal_entry(
    entry_id: str,
    request: JournalEntryUpdateRequest,
    session_id: str = Depends(get_current_session_id),
):
    row = update_entry(
        session_id=session_id,
        entry_id=entry_id,
        title=request.title.strip(),
        content=request.content.strip(),
        mood=request.mood,
        tags=request.tags,
    )
    return JournalEntry.model_validate(row)


@router.delete("/entries/{entry_id}", summary="Delete a journal entry")
def delete_journal_entry(entry_id: str, session_id: str = Depends(get_current_session_id)):
    delete_entry(session_id=session_id, entry_id=entry_id)
    return {"ok": True}
