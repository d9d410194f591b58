"""
Top‑level router for version 1 of the API.

The endpoint modules define their full paths themselves (``/create``,
``/users``, ``/friends/{user_id}``...), matching the published
routes, so they are included without a prefix.  The
application may still mount this router under ``Settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import friends, health, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(friends.router, tags=["friends"])
router.include_router(health.router, tags=["health"])
