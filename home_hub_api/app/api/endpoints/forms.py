"""
Public form endpoints: contact form, newsletter signup and the cost
estimate calculator.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from home_hub_api.app.api.deps import get_store, internal_errors
from home_hub_api.app.core.store import RecordStore
from home_hub_api.app.schemas.common import envelope
from home_hub_api.app.schemas.contact import ContactCreate
from home_hub_api.app.schemas.estimate import CostEstimateCreate
from home_hub_api.app.schemas.newsletter import NewsletterCreate
from home_hub_api.app.services.contact_service import ContactService
from home_hub_api.app.services.estimate_service import EstimateService
from home_hub_api.app.services.newsletter_service import NewsletterService

router = APIRouter()


@router.post("/contact", response_model=Dict[str, Any])
async def submit_contact(
    contact_in: Optional[ContactCreate] = None,
    store: RecordStore = Depends(get_store),
) -> Dict[str, Any]:
    """Store a contact form message.  The response carries no record."""
    with internal_errors("Failed to send message. Please try again."):
        await ContactService.submit(store, contact_in or ContactCreate())
    return envelope("Thank you for your message! We'll get back to you soon.")


@router.post("/newsletter", response_model=Dict[str, Any])
async def subscribe_newsletter(
    subscription_in: Optional[NewsletterCreate] = None,
    store: RecordStore = Depends(get_store),
) -> Dict[str, Any]:
    """Subscribe an e‑mail address.

    Subscribing an address twice is not an error; the second call
    answers 200 with an "already subscribed" message.
    """
    with internal_errors("Subscription failed. Please try again."):
        _, created = await NewsletterService.subscribe(store, subscription_in or NewsletterCreate())
    if not created:
        return envelope("You're already subscribed to our newsletter! Thank you.")
    return envelope("Thank you for subscribing to our newsletter! You'll receive updates soon.")


@router.post("/cost-estimate", response_model=Dict[str, Any])
async def save_cost_estimate(
    estimate_in: Optional[CostEstimateCreate] = None,
    store: RecordStore = Depends(get_store),
) -> Dict[str, Any]:
    """Save a cost estimate and echo the stored record."""
    with internal_errors("Failed to save estimate. Please try again."):
        estimate = await EstimateService.create_estimate(store, estimate_in or CostEstimateCreate())
    return envelope("Cost estimate saved successfully!", estimate=estimate)
