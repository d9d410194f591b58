"""
Friendship endpoints for API v1.

``POST /make_friends`` links two users in both directions and
``GET /friends/{user_id}`` returns the full records of a user's
friends.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from social_graph_api.app.api.deps import get_settings, get_store
from social_graph_api.app.core.config import Settings
from social_graph_api.app.core.messages import get_message
from social_graph_api.app.schemas.user import FriendshipCreate
from social_graph_api.app.services.user_graph import UnknownUserError, UserGraphStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/make_friends", response_class=PlainTextResponse)
async def make_friends(
    payload: FriendshipCreate,
    store: UserGraphStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> str:
    """Сделать двух пользователей друзьями.

    Повторный вызов для той же пары по умолчанию добавляет записи ещё
    раз (см. ``FriendshipPolicy.allow_duplicate_friends``).
    """
    try:
        source_name, target_name = store.link(payload.source_id, payload.target_id)
    except UnknownUserError as e:
        logger.warning("Link rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=get_message("users_not_found", settings.language),
        )
    return get_message("friends_linked", settings.language, source=source_name, target=target_name)


@router.get("/friends/{user_id}")
async def get_user_friends(
    user_id: str,
    store: UserGraphStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Получить список друзей пользователя."""
    try:
        friends = store.get_friends(user_id)
    except UnknownUserError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=get_message("user_not_found", settings.language),
        )
    try:
        return JSONResponse(content=jsonable_encoder(friends))
    except (TypeError, ValueError):
        logger.exception("Failed to encode friends of user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=get_message("encode_failed", settings.language),
        )
