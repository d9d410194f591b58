"""
In‑memory user graph.

``UserGraphStore`` owns the mapping from user ID to ``User``, the ID
counter and a single reader/writer lock guarding both.  Friendship is
a symmetric relation stored on both endpoints: after a successful
``link`` the source lists the target and the target lists the source.

Every public method is atomic.  Read‑only methods take the lock in
shared mode; methods that touch the map or the counter take it in
exclusive mode for their whole read‑modify‑write sequence, so no
reader can observe a half‑linked pair or a partially cascaded delete.
Failures are precondition checks performed before any mutation.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..core.rwlock import ReadWriteLock
from ..schemas.user import User

logger = logging.getLogger(__name__)


class UserGraphError(Exception):
    """Base class for store failures."""


class UnknownUserError(UserGraphError, KeyError):
    """One or more referenced user IDs are absent from the store."""

    def __init__(self, *user_ids: str) -> None:
        self.user_ids: Tuple[str, ...] = user_ids
        super().__init__(f"User(s) not found: {', '.join(user_ids)}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return self.args[0]


class EmptyCollectionError(UserGraphError, LookupError):
    """The store holds no users."""


@dataclass(frozen=True)
class FriendshipPolicy:
    """Behaviour switches for the graph.

    The defaults keep the historical behaviour of the service:

    ``allow_duplicate_friends``
        Linking an already linked pair appends the IDs again.  When
        ``False`` an existing edge is left as is.
    ``cascade_remove_all``
        Deleting a user removes only the first occurrence of its ID from
        each former friend's list.  When ``True`` every occurrence goes.
    ``empty_list_is_error``
        Listing an empty store raises ``EmptyCollectionError``.  When
        ``False`` an empty mapping is returned.
    """

    allow_duplicate_friends: bool = True
    cascade_remove_all: bool = False
    empty_list_is_error: bool = True


class UserGraphStore:
    """Сервис для работы с графом пользователей.

    Construct one instance per process (or per test) and share it with
    the HTTP layer.  Returned users are deep copies; mutating them has
    no effect on the store.
    """

    def __init__(self, policy: FriendshipPolicy = FriendshipPolicy()) -> None:
        self.policy = policy
        self._users: Dict[str, User] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def _generate_id(self) -> str:
        # Caller must hold the write lock.
        user_id = str(self._next_id)
        self._next_id += 1
        return user_id

    def _require(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UnknownUserError(user_id)
        return user

    # ------------------------------------------------------------------
    # Mutations (exclusive lock)
    # ------------------------------------------------------------------
    def create_user(self, name: str, age: int, friends: Iterable[str] = ()) -> str:
        """Store a new user and return its ID.

        Always succeeds.  ``friends`` is stored verbatim without checking
        that the IDs exist and without linking them back.
        """
        with self._lock.write_locked():
            user_id = self._generate_id()
            self._users[user_id] = User(name=name, age=age, friends=list(friends))
        logger.info("Created user %s (%s)", user_id, name)
        return user_id

    def link(self, source_id: str, target_id: str) -> Tuple[str, str]:
        """Make two users friends and return their names.

        Raises ``UnknownUserError`` listing every missing ID; nothing is
        changed in that case.
        """
        with self._lock.write_locked():
            missing = [uid for uid in (source_id, target_id) if uid not in self._users]
            if missing:
                raise UnknownUserError(*missing)
            source = self._users[source_id]
            target = self._users[target_id]
            if self.policy.allow_duplicate_friends or target_id not in source.friends:
                source.friends.append(target_id)
            if self.policy.allow_duplicate_friends or source_id not in target.friends:
                target.friends.append(source_id)
            names = (source.name, target.name)
        logger.info("Linked users %s and %s", source_id, target_id)
        return names

    def delete_user(self, target_id: str) -> str:
        """Remove a user, unlink it from its friends and return its name."""
        with self._lock.write_locked():
            target = self._require(target_id)
            del self._users[target_id]
            for friend_id in target.friends:
                friend = self._users.get(friend_id)
                if friend is None:
                    continue
                if self.policy.cascade_remove_all:
                    friend.friends[:] = [fid for fid in friend.friends if fid != target_id]
                elif target_id in friend.friends:
                    friend.friends.remove(target_id)
        logger.info("Deleted user %s (%s)", target_id, target.name)
        return target.name

    def update_age(self, user_id: str, new_age: int) -> None:
        """Overwrite a user's age.  No bounds are checked."""
        with self._lock.write_locked():
            self._require(user_id).age = new_age
        logger.debug("Updated age of user %s to %s", user_id, new_age)

    # ------------------------------------------------------------------
    # Queries (shared lock)
    # ------------------------------------------------------------------
    def list_users(self) -> Dict[str, User]:
        """Return a snapshot of every user keyed by ID."""
        with self._lock.read_locked():
            if not self._users and self.policy.empty_list_is_error:
                raise EmptyCollectionError("No users exist")
            return {uid: user.model_copy(deep=True) for uid, user in self._users.items()}

    def get_friends(self, user_id: str) -> List[User]:
        """Return the friends of ``user_id`` in list order.

        Friend IDs that no longer resolve are skipped.
        """
        with self._lock.read_locked():
            user = self._require(user_id)
            return [
                self._users[fid].model_copy(deep=True)
                for fid in user.friends
                if fid in self._users
            ]

    def get_user(self, user_id: str) -> User:
        with self._lock.read_locked():
            return self._require(user_id).model_copy(deep=True)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock.read_locked():
            return user_id in self._users
