"""
Health check endpoint.

Reports the current time, the configured port, record counts per
entity kind and whether the three HTML pages exist in the static
root.  It never modifies state.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from home_hub_api.app.api.deps import get_settings, get_store, internal_errors
from home_hub_api.app.core.config import Settings
from home_hub_api.app.core.store import RecordStore
from home_hub_api.app.schemas.common import envelope
from home_hub_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    with internal_errors("Health check failed"):
        report = await StatisticsService.health(store, settings.static_root)
    return envelope(
        "Smart Home Hub server is running!",
        port=settings.port,
        **report,
    )
