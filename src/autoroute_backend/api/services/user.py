"""User domain logic backed by an in-memory store."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from autoroute_backend.api.errors import ConflictError, NotFoundError


class UserAlreadyExistsError(ConflictError):
    """Raised when attempting to create a duplicate user."""

    def __init__(self, nickname: str) -> None:
        super().__init__(f"User already exists: {nickname}")
        self.nickname = nickname


class UserNotFoundError(NotFoundError):
    """Raised when a user ID does not exist."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


@dataclass(slots=True)
class UserRecord:
    """Stored user entity."""

    nickname: str
    display_name: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


class UserService:
    """Creates and looks up users."""

    def __init__(self) -> None:
        self._users: dict[UUID, UserRecord] = {}
        self._lock = threading.Lock()

    def create_user(self, *, nickname: str, display_name: str) -> UserRecord:
        with self._lock:
            if any(user.nickname == nickname for user in self._users.values()):
                raise UserAlreadyExistsError(nickname)
            user = UserRecord(nickname=nickname, display_name=display_name)
            self._users[user.id] = user
        return user

    def get_user(self, user_id: UUID) -> UserRecord:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[UserRecord]:
        with self._lock:
            return list(self._users.values())

    def reset(self) -> None:
        with self._lock:
            self._users.clear()
