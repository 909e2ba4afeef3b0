"""
Response envelope shared by every endpoint.

Successful responses look like ``{"success": true, "message": ...,
<payload key>: ...}``; failures carry ``success: false`` and a
human‑readable ``message`` only.
"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict


class CamelModel(BaseModel):
    """Base model that accepts both field names and camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)


def envelope(message: Optional[str] = None, success: bool = True, **payload: Any) -> Dict[str, Any]:
    """Build a JSON‑ready response envelope.

    Pydantic models inside ``payload`` are dumped by alias so the
    client sees camelCase keys and ISO‑8601 timestamps.
    """
    body: Dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    for key, value in payload.items():
        body[key] = jsonable_encoder(value, by_alias=True)
    return body
