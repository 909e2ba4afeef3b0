"""
Pydantic models for user data.

Request fields are optional at the schema level so that a missing
field produces the service's own validation message ("All fields are
required") instead of a generic schema error.  The password is never
part of a response model.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: Optional[str] = Field(None, examples=["ann"])
    email: Optional[str] = Field(None, examples=["ann@example.com"])
    password: Optional[str] = Field(None, examples=["secret1"])


class UserLogin(CamelModel):
    """Credentials for ``POST /api/login``."""

    email: Optional[str] = Field(None, examples=["ann@example.com"])
    password: Optional[str] = Field(None, examples=["secret1"])


class UserPublic(CamelModel):
    """Identity triple returned by registration and login."""

    id: int
    username: str
    email: str


class UserRead(UserPublic):
    """User as listed by the admin endpoints."""

    created_at: datetime = Field(..., alias="createdAt")
