"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
keep the historical behaviour of the service (port 8080, routes at
the root, duplicate friendships allowed, empty user list reported as
not found).
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Social Graph API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))

    # Prefix under which the routes are mounted.  The first API version
    # served everything at the root, so the default is empty.  Set e.g.
    # ``API_PREFIX=/api/v1`` to move the routes.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "").rstrip("/"))

    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8080")))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Language of user‑facing response texts (``ru`` or ``en``).
    language: str = field(default_factory=lambda: os.getenv("APP_LANGUAGE", "ru"))

    # Friendship policy switches.  See ``FriendshipPolicy`` in
    # ``services.user_graph`` for the semantics of each flag.
    allow_duplicate_friends: bool = field(default_factory=lambda: _env_bool("ALLOW_DUPLICATE_FRIENDS", "true"))
    cascade_remove_all: bool = field(default_factory=lambda: _env_bool("CASCADE_REMOVE_ALL", "false"))
    empty_list_is_error: bool = field(default_factory=lambda: _env_bool("EMPTY_LIST_IS_ERROR", "true"))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build a fresh instance from the current environment."""
        return cls()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests that need other
# values build their own instance with ``Settings.from_env()``.
settings = Settings()
