"""
HTML entry points of the marketing site.

``/`` serves the main page, ``/admin`` the dashboard and
``/admin-users`` the user management page.  Files are read from the
configured static root; other assets (scripts, styles, images) are
served by the static files mount set up in ``main.create_app``.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from home_hub_api.app.api.deps import get_settings
from home_hub_api.app.core.config import Settings
from home_hub_api.app.core.errors import NotFoundError

router = APIRouter()


def _page(settings: Settings, filename: str) -> FileResponse:
    path = settings.static_root / filename
    if not path.is_file():
        raise NotFoundError("Page not found")
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)) -> FileResponse:
    return _page(settings, "cg.html")


@router.get("/admin", include_in_schema=False)
async def admin(settings: Settings = Depends(get_settings)) -> FileResponse:
    return _page(settings, "admin.html")


@router.get("/admin-users", include_in_schema=False)
async def admin_users(settings: Settings = Depends(get_settings)) -> FileResponse:
    return _page(settings, "admin-users.html")
