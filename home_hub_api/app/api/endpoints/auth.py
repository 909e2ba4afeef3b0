"""
Registration and login endpoints.

Both return the user's public identity ``{id, username, email}``.
No token or session is issued; the site keeps the returned user in
the browser.  Login failures (unknown e‑mail, wrong password) are
answered with HTTP 400 and distinct messages.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from home_hub_api.app.api.deps import get_store, internal_errors
from home_hub_api.app.core.store import RecordStore
from home_hub_api.app.schemas.common import envelope
from home_hub_api.app.schemas.user import UserCreate, UserLogin
from home_hub_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=Dict[str, Any])
async def register_user(
    user_in: Optional[UserCreate] = None,
    store: RecordStore = Depends(get_store),
) -> Dict[str, Any]:
    """Register a new user.

    Requires ``username`` (3+ characters), ``email`` and ``password``
    (6+ characters).  The username and e‑mail must not be in use.
    """
    with internal_errors("Internal server error during registration"):
        user = await UserService.register(store, user_in or UserCreate())
    return envelope("Registration successful! You can now login.", user=user)


@router.post("/login", response_model=Dict[str, Any])
async def login_user(
    credentials: Optional[UserLogin] = None,
    store: RecordStore = Depends(get_store),
) -> Dict[str, Any]:
    """Check e‑mail and password and return the matching user."""
    credentials = credentials or UserLogin()
    with internal_errors("Internal server error during login"):
        user = await UserService.authenticate(store, credentials.email, credentials.password)
    return envelope("Login successful!", user=user)
