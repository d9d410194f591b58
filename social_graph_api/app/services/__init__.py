"""
Service layer abstraction.

The graph store encapsulates all business logic so the HTTP handlers
stay thin: they decode the request, call the store and encode the
result.
"""

from .user_graph import (  # noqa: F401
    EmptyCollectionError,
    FriendshipPolicy,
    UnknownUserError,
    UserGraphError,
    UserGraphStore,
)
