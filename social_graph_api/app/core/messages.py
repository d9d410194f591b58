"""
Localized user‑facing texts.

The store only raises structured exceptions; the HTTP layer turns them
into response texts using the catalogs below.  Russian is the default
language of the service, English is available via ``APP_LANGUAGE=en``.
"""

from typing import Dict, Optional

from .config import settings

DEFAULT_LANGUAGE = "ru"

MESSAGES: Dict[str, Dict[str, str]] = {
    "ru": {
        "invalid_body": "Некорректное тело запроса",
        "user_created": "User ID: {user_id}",
        "users_empty": "Список пользователей пуст",
        "encode_failed": "Ошибка при формировании ответа",
        "users_not_found": "Один или оба пользователя не найдены",
        "user_not_found": "Пользователь не найден",
        "friends_linked": "{source} и {target} теперь друзья",
        "user_deleted": "{name} удалён",
        "age_updated": "Возраст пользователя успешно обновлён",
    },
    "en": {
        "invalid_body": "Invalid request body",
        "user_created": "User ID: {user_id}",
        "users_empty": "The user list is empty",
        "encode_failed": "Failed to build the response",
        "users_not_found": "One or both users not found",
        "user_not_found": "User not found",
        "friends_linked": "{source} and {target} are now friends",
        "user_deleted": "{name} deleted",
        "age_updated": "User age updated successfully",
    },
}


def get_message(key: str, lang: Optional[str] = None, **params: object) -> str:
    """Return the text for ``key`` in ``lang`` formatted with ``params``.

    ``lang`` defaults to ``settings.language``; an unsupported language
    falls back to Russian.  An unknown ``key`` raises ``KeyError``.
    """
    catalog = MESSAGES.get(lang or settings.language) or MESSAGES[DEFAULT_LANGUAGE]
    template = catalog[key]
    return template.format(**params) if params else template
