"""
Service layer for newsletter subscriptions.

Subscribing is idempotent: an address that is already on the list is
reported back as such and no second record is created, so every
e‑mail appears at most once in the collection.
"""

import logging
from typing import List, Tuple

from ..core.errors import NotFoundError, ValidationError
from ..core.store import RecordStore
from ..schemas.newsletter import NewsletterCreate, NewsletterRead

logger = logging.getLogger(__name__)


class NewsletterService:
    """Manage the newsletter mailing list."""

    @classmethod
    async def subscribe(cls, store: RecordStore, data: NewsletterCreate) -> Tuple[NewsletterRead, bool]:
        """Subscribe ``data.email``.

        Returns the subscription and a flag telling whether it was
        created by this call (``False`` for a repeat subscription).
        """
        logger.info("Newsletter subscription: %s", data.email)
        if not data.email:
            raise ValidationError("Email is required")
        if "@" not in data.email:
            raise ValidationError("Please enter a valid email address")

        with store.newsletters.locked() as newsletters:
            existing = newsletters.find_by(lambda n: n["email"] == data.email)
            if existing:
                return NewsletterRead(**existing), False
            record = newsletters.create(email=data.email)
        logger.info("New subscriber %s (id=%s)", record["email"], record["id"])
        return NewsletterRead(**record), True

    @classmethod
    async def list_subscriptions(cls, store: RecordStore) -> List[NewsletterRead]:
        return [NewsletterRead(**row) for row in store.newsletters.list()]

    @classmethod
    async def delete_subscription(cls, store: RecordStore, subscription_id: int) -> None:
        if not store.newsletters.delete_by_id(subscription_id):
            raise NotFoundError("Subscriber not found")
        logger.info("Deleted subscriber %s", subscription_id)
