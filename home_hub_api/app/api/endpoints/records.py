"""
Read‑only listings used by the admin pages.

The router is mounted twice, under ``/api`` and ``/api/admin``, since
older admin pages fetch ``/api/contacts`` while newer ones use
``/api/admin/contacts``.  Both prefixes expose identical endpoints.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from home_hub_api.app.api.deps import get_store, internal_errors
from home_hub_api.app.core.store import RecordStore
from home_hub_api.app.schemas.common import envelope
from home_hub_api.app.services.contact_service import ContactService
from home_hub_api.app.services.newsletter_service import NewsletterService
from home_hub_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/contacts", response_model=Dict[str, Any])
async def list_contacts(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    """Return all contact messages, oldest first."""
    with internal_errors("Failed to fetch contacts"):
        contacts = await ContactService.list_contacts(store)
    return envelope(contacts=contacts)


@router.get("/newsletters", response_model=Dict[str, Any])
async def list_newsletters(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    """Return all newsletter subscriptions, oldest first."""
    with internal_errors("Failed to fetch newsletters"):
        newsletters = await NewsletterService.list_subscriptions(store)
    return envelope(newsletters=newsletters)


@router.get("/users", response_model=Dict[str, Any])
async def list_users(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    """Return all users.  Password digests are never included."""
    with internal_errors("Failed to fetch users"):
        users = await UserService.list_users(store)
    return envelope(users=users)
