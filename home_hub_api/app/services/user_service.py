"""
Business logic for users.

``UserService`` registers users, checks login credentials and backs
the admin user listing.  Usernames and e‑mail addresses are unique
across the users collection; the uniqueness check and the insert run
under the collection lock.

Passwords are stored as salted PBKDF2 digests (see
``core.security``) and are never returned to callers.  Digests are
computed in the thread pool so the event loop keeps serving other
requests meanwhile.
"""

import logging
from typing import List

from starlette.concurrency import run_in_threadpool

from ..core.errors import NotFoundError, ValidationError
from ..core.security import hash_password, verify_password
from ..core.store import RecordStore
from ..schemas.user import UserCreate, UserPublic, UserRead

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class UserService:
    """Registration, authentication and administration of users."""

    @classmethod
    async def register(cls, store: RecordStore, data: UserCreate) -> UserPublic:
        """Create a user and return its public identity.

        Raises ``ValidationError`` when a field is missing, too short,
        or when the username or e‑mail is already taken.
        """
        logger.info("Registration attempt: username=%s email=%s", data.username, data.email)
        if not data.username or not data.email or not data.password:
            raise ValidationError("All fields are required")
        if len(data.username) < MIN_USERNAME_LENGTH:
            raise ValidationError(f"Username must be at least {MIN_USERNAME_LENGTH} characters")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        password_digest = await run_in_threadpool(hash_password, data.password)
        with store.users.locked() as users:
            existing = users.find_by(
                lambda u: u["email"] == data.email or u["username"] == data.username
            )
            if existing:
                logger.warning("Registration rejected, user exists: %s", data.email)
                raise ValidationError("User already exists with this email or username")
            record = users.create(
                username=data.username,
                email=data.email,
                password=password_digest,
            )
        logger.info("User registered: %s (id=%s)", record["username"], record["id"])
        return UserPublic(id=record["id"], username=record["username"], email=record["email"])

    @classmethod
    async def authenticate(cls, store: RecordStore, email: str, password: str) -> UserPublic:
        """Return the identity of the user owning ``email``/``password``.

        Unknown e‑mail and wrong password are both reported as
        ``ValidationError`` (HTTP 400) with distinct messages, which is
        what the site's login page expects.
        """
        logger.info("Login attempt: %s", email)
        if not email or not password:
            raise ValidationError("Email and password are required")
        user = store.users.find_by(lambda u: u["email"] == email)
        if user is None:
            raise ValidationError("User not found. Please check your email.")
        if not await run_in_threadpool(verify_password, password, user["password"]):
            logger.warning("Invalid password for %s", email)
            raise ValidationError("Invalid password. Please try again.")
        logger.info("Login successful: %s", user["username"])
        return UserPublic(id=user["id"], username=user["username"], email=user["email"])

    @classmethod
    async def list_users(cls, store: RecordStore) -> List[UserRead]:
        """Return all users without their password digests."""
        return [
            UserRead(
                id=row["id"],
                username=row["username"],
                email=row["email"],
                created_at=row["created_at"],
            )
            for row in store.users.list()
        ]

    @classmethod
    async def delete_user(cls, store: RecordStore, user_id: int) -> None:
        """Delete a user by ID or raise ``NotFoundError``."""
        if not store.users.delete_by_id(user_id):
            raise NotFoundError("User not found")
        logger.info("Deleted user %s", user_id)
