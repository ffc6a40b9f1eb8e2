# -*- coding: utf-8 -*-
"""Trusted contacts — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..sessions.security import get_current_session_id
from .models import TrustedContact, TrustedContactCreateRequest, TrustedContactListResponse
from .storage import add_contact, delete_contact, list_contacts

router = APIRouter(prefix="/api/contacts", tags=["Contacts"])


@router.post("", response_model=TrustedContact, summary="Add a trusted contact")
def create_contact(request: TrustedContactCreateRequest, session_id: str = Depends(get_current_session_id)):
    row = add_contact(
        session_id=session_id,
        name=request.name.strip(),
        phone=request.phone.strip(),
        relationship=request.relationship.strip(),
    )
    return TrustedContact.model_validate(row)


@router.get("", response_model=TrustedContactListResponse, summary="List my trusted contacts")
def get_contacts(session_id: str = Depends(get_current_session_id)):
    items = [TrustedContact.model_validate(r) for r in list_contacts(session_id=session_id)]
    return TrustedContactListResponse(count=len(items), items=items)


@router.delete("/{contact_id}", summary="Remove a trusted contact")
def remove_contact(contact_id: str, session_id: str = Depends(get_current_session_id)):
    delete_contact(session_id=session_id, contact_id=contact_id)
    return {"ok": True}
