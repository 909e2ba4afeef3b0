"""
Admin endpoints: estimates listing, dashboard statistics and deletion
of any record by id.

Deleting an id that does not exist (or is not an integer) answers
404 and leaves the store untouched.  Ids are never reused, so a
deleted record cannot reappear.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from home_hub_api.app.api.deps import get_settings, get_store, internal_errors, parse_record_id
from home_hub_api.app.core.config import Settings
from home_hub_api.app.core.store import RecordStore
from home_hub_api.app.schemas.common import envelope
from home_hub_api.app.services.contact_service import ContactService
from home_hub_api.app.services.estimate_service import EstimateService
from home_hub_api.app.services.newsletter_service import NewsletterService
from home_hub_api.app.services.statistics_service import StatisticsService
from home_hub_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/cost-estimates", response_model=Dict[str, Any])
async def list_cost_estimates(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    with internal_errors("Failed to fetch estimates"):
        estimates = await EstimateService.list_estimates(store)
    return envelope(estimates=estimates)


@router.get("/stats", response_model=Dict[str, Any])
async def get_stats(
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Dashboard totals plus users registered in the last week."""
    with internal_errors("Failed to fetch statistics"):
        stats = await StatisticsService.overview(store, recent_days=settings.recent_users_days)
    return envelope(stats=stats)


@router.delete("/contacts/{contact_id}", response_model=Dict[str, Any])
async def delete_contact(contact_id: str, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    with internal_errors("Failed to delete contact"):
        await ContactService.delete_contact(store, parse_record_id(contact_id, "Contact not found"))
    return envelope("Contact deleted successfully")


@router.delete("/newsletters/{subscription_id}", response_model=Dict[str, Any])
async def delete_newsletter(subscription_id: str, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    with internal_errors("Failed to delete subscriber"):
        await NewsletterService.delete_subscription(
            store, parse_record_id(subscription_id, "Subscriber not found")
        )
    return envelope("Subscriber deleted successfully")


@router.delete("/users/{user_id}", response_model=Dict[str, Any])
async def delete_user(user_id: str, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    with internal_errors("Failed to delete user"):
        await UserService.delete_user(store, parse_record_id(user_id, "User not found"))
    return envelope("User deleted successfully")


@router.delete("/estimates/{estimate_id}", response_model=Dict[str, Any])
async def delete_estimate(estimate_id: str, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    with internal_errors("Failed to delete estimate"):
        await EstimateService.delete_estimate(store, parse_record_id(estimate_id, "Estimate not found"))
    return envelope("Estimate deleted successfully")
