"""
Pydantic schemas for contact form submissions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class ContactCreate(CamelModel):
    """Contact form payload.  ``phone`` is the only optional field."""

    name: Optional[str] = Field(None, examples=["Ann Smith"])
    email: Optional[str] = Field(None, examples=["ann@example.com"])
    phone: Optional[str] = Field(None, examples=["+1 555 0100"])
    subject: Optional[str] = Field(None, examples=["Installation quote"])
    message: Optional[str] = Field(None, examples=["Do you install on weekends?"])


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    subject: str
    message: str
    created_at: datetime = Field(..., alias="createdAt")
