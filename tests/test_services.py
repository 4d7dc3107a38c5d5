from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

import pytest

from autoroute_backend.api.services import UserNotFoundError, UserService


def test_get_user_sees_users_created_concurrently() -> None:
    service = UserService()

    def create_then_read(index: int) -> str:
        user = service.create_user(nickname=f"user_{index}", display_name="User")
        return service.get_user(user.id).nickname

    with ThreadPoolExecutor(max_workers=8) as pool:
        nicknames = list(pool.map(create_then_read, range(50)))

    assert nicknames == [f"user_{index}" for index in range(50)]
    assert len(service.list_users()) == 50


def test_get_unknown_user_raises() -> None:
    service = UserService()

    with pytest.raises(UserNotFoundError):
        service.get_user(uuid4())
