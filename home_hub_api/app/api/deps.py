"""
Shared FastAPI dependencies and endpoint helpers.

The record store and the settings are attached to ``app.state`` by
``create_app``; endpoints obtain them through ``Depends(get_store)``
and ``Depends(get_settings)`` rather than importing module globals,
which lets each test build an app around its own store.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request

from ..core.config import Settings
from ..core.errors import InternalError, NotFoundError, ServiceError
from ..core.store import RecordStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@contextmanager
def internal_errors(message: str) -> Iterator[None]:
    """Turn unexpected exceptions into an ``InternalError``.

    ``ServiceError`` subclasses pass through untouched.  Anything else
    is logged with its traceback and replaced by an ``InternalError``
    carrying ``message``, so the cause never reaches the client.
    """
    try:
        yield
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("%s", message)
        raise InternalError(message) from exc


def parse_record_id(raw: str, not_found_message: str) -> int:
    """Parse a record id taken from the URL path.

    Only plain ASCII digit strings are ids; spellings ``int()`` would
    also take (``"0_1"``, ``"+1"``, ``" 1"``) cannot match a record and
    are reported as ``NotFoundError`` like any other unknown id.
    """
    if not (raw.isascii() and raw.isdigit()):
        raise NotFoundError(not_found_message)
    return int(raw)
