"""
Pydantic schemas for newsletter subscriptions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class NewsletterCreate(CamelModel):
    email: Optional[str] = Field(None, examples=["ann@example.com"])


class NewsletterRead(CamelModel):
    id: int
    email: str
    subscribed_at: datetime = Field(..., alias="subscribedAt")
