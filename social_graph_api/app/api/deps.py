"""
FastAPI dependencies shared by the endpoint modules.

The graph store and the settings are created once in ``create_app``
and kept on ``app.state``; handlers receive them through ``Depends``
so tests can build an application around a fresh store.
"""

from fastapi import Request

from ..core.config import Settings
from ..services.user_graph import UserGraphStore


def get_store(request: Request) -> UserGraphStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
