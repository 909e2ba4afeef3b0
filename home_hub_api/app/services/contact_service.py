"""
Service layer for contact form submissions.
"""

import logging
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import RecordStore
from ..schemas.contact import ContactCreate, ContactRead

logger = logging.getLogger(__name__)

DEFAULT_PHONE = "Not provided"


class ContactService:
    """Store and administer messages sent through the contact form."""

    @classmethod
    async def submit(cls, store: RecordStore, data: ContactCreate) -> ContactRead:
        """Validate and store a contact message.

        ``name``, ``email``, ``subject`` and ``message`` are required;
        an empty phone number is stored as ``"Not provided"``.
        """
        logger.info("Contact form submission: name=%s email=%s subject=%s", data.name, data.email, data.subject)
        if not data.name or not data.email or not data.subject or not data.message:
            raise ValidationError("Name, email, subject and message are required")
        record = store.contacts.create(
            name=data.name,
            email=data.email,
            phone=data.phone or DEFAULT_PHONE,
            subject=data.subject,
            message=data.message,
        )
        logger.info("Stored contact %s", record["id"])
        return ContactRead(**record)

    @classmethod
    async def list_contacts(cls, store: RecordStore) -> List[ContactRead]:
        return [ContactRead(**row) for row in store.contacts.list()]

    @classmethod
    async def delete_contact(cls, store: RecordStore, contact_id: int) -> None:
        if not store.contacts.delete_by_id(contact_id):
            raise NotFoundError("Contact not found")
        logger.info("Deleted contact %s", contact_id)
