"""
Liveness endpoint.  Reports the number of stored users.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from social_graph_api.app.api.deps import get_store
from social_graph_api.app.services.user_graph import UserGraphStore

router = APIRouter()


@router.get("/health")
async def health(store: UserGraphStore = Depends(get_store)) -> Dict[str, Any]:
    """Проверка работоспособности: статус и число пользователей."""
    return {"status": "ok", "users": len(store)}
