"""In-memory user store adapter.

Implements UserStorePort with a dictionary owned by the instance.
Records are copied on the way in and on the way out so callers can never
change stored state without going through update().
"""

import dataclasses
import logging
import threading

from roster.core.models import User, UserStatus
from roster.core.ports import UserStorePort

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStorePort):
    """Process-local user store guarded by a single lock."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def get_by_id(self, user_id: str) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            return dataclasses.replace(user)

    def save(self, user: User) -> None:
        with self._lock:
            if user.id in self._users:
                raise ValueError(f"User {user.id} already exists")
            self._users[user.id] = dataclasses.replace(user)
        logger.debug(f"Saved user {user.id}", extra={"user_id": user.id})

    def update(self, user: User) -> None:
        with self._lock:
            if user.id not in self._users:
                raise ValueError(f"User {user.id} not found")
            self._users[user.id] = dataclasses.replace(user)
        logger.debug(f"Updated user {user.id}", extra={"user_id": user.id})

    def get_all(self, status: UserStatus | None = None) -> list[User]:
        with self._lock:
            return [
                dataclasses.replace(user)
                for user in self._users.values()
                if status is None or user.status == status
            ]

    def clear(self) -> int:
        with self._lock:
            removed = len(self._users)
            self._users.clear()
        return removed
