"""
User endpoints for API v1.

Create, list and delete users and update their age.  Handlers only
translate between HTTP and the graph store: store exceptions become
``HTTPException`` with a localized ``detail`` and successful calls
answer with a short plain‑text confirmation.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from social_graph_api.app.api.deps import get_settings, get_store
from social_graph_api.app.core.config import Settings
from social_graph_api.app.core.messages import get_message
from social_graph_api.app.schemas.user import AgeUpdate, UserCreate, UserDelete
from social_graph_api.app.services.user_graph import (
    EmptyCollectionError,
    UnknownUserError,
    UserGraphStore,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    store: UserGraphStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> str:
    """Создать пользователя.

    Возвращает текст ``User ID: <id>``.  Имя, возраст и список друзей
    сохраняются как есть, без проверок.
    """
    user_id = store.create_user(payload.name, payload.age, payload.friends)
    return get_message("user_created", settings.language, user_id=user_id)


@router.get("/users")
async def list_users(
    store: UserGraphStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Получить всех пользователей в виде словаря ``ID → User``.

    Пустое хранилище по умолчанию отвечает 404.
    """
    try:
        users = store.list_users()
    except EmptyCollectionError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=get_message("users_empty", settings.language),
        )
    try:
        return JSONResponse(content=jsonable_encoder(users))
    except (TypeError, ValueError):
        logger.exception("Failed to encode user list")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=get_message("encode_failed", settings.language),
        )


@router.delete("/user", response_class=PlainTextResponse)
async def delete_user(
    payload: UserDelete,
    store: UserGraphStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> str:
    """Удалить пользователя и убрать его из списков друзей."""
    try:
        name = store.delete_user(payload.target_id)
    except UnknownUserError as e:
        logger.warning("Delete rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=get_message("user_not_found", settings.language),
        )
    return get_message("user_deleted", settings.language, name=name)


@router.put("/user_age/{user_id}", response_class=PlainTextResponse)
async def update_user_age(
    user_id: str,
    payload: AgeUpdate,
    store: UserGraphStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> str:
    """Обновить возраст пользователя."""
    try:
        store.update_age(user_id, payload.new_age)
    except UnknownUserError as e:
        logger.warning("Age update rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=get_message("user_not_found", settings.language),
        )
    return get_message("age_updated", settings.language)
