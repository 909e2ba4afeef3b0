"""
Top‑level router for the JSON API.

Aggregates the endpoint modules under a single router that
``create_app`` mounts at ``/api``.  When new areas are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import admin, auth, forms, health, records

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["users"])
router.include_router(forms.router, tags=["forms"])
# The listings are exposed both at ``/api/<kind>`` and
# ``/api/admin/<kind>``; the same router is included under each prefix.
router.include_router(records.router, tags=["records"])
router.include_router(records.router, prefix="/admin", tags=["admin"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
