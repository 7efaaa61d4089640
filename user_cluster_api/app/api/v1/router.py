"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  The user routes are
exposed under the singular ``/user`` prefix.
"""

from fastapi import APIRouter

from .endpoints import info, users

router = APIRouter()

router.include_router(users.router, prefix="/user", tags=["users"])
router.include_router(info.router, prefix="/info", tags=["info"])
