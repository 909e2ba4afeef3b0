"""
Password digests for user records.

The ``password`` field of a stored user never holds plain text.  It
holds ``<salt hex>$<digest hex>``, the digest being PBKDF2-HMAC-SHA256
of the UTF-8 password under a per-user random salt.  Both helpers are
CPU bound; ``UserService`` runs them in the thread pool.
"""

import hashlib
import hmac
import os
from typing import Tuple

HASH_NAME = "sha256"
ITERATIONS = 100_000
SALT_BYTES = 16
SEPARATOR = "$"


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac(HASH_NAME, password.encode("utf-8"), salt, ITERATIONS)


def _split(stored: str) -> Tuple[bytes, bytes]:
    salt_hex, digest_hex = stored.split(SEPARATOR, 1)
    return bytes.fromhex(salt_hex), bytes.fromhex(digest_hex)


def hash_password(password: str) -> str:
    """Return the stored form of ``password`` under a fresh salt."""
    salt = os.urandom(SALT_BYTES)
    return f"{salt.hex()}{SEPARATOR}{_derive(password, salt).hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Tell whether ``password`` yields the digest kept in ``stored``.

    A stored value that is not in salted form (a record seeded straight
    into the store, say) matches nothing.
    """
    try:
        salt, expected = _split(stored)
    except (AttributeError, ValueError):
        return False
    if not salt or not expected:
        return False
    return hmac.compare_digest(_derive(password, salt), expected)
