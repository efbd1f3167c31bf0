# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from auth_backend.domain.users.entities import User
from auth_backend.domain.users.exceptions import InvalidTokenError
from auth_backend.domain.users.repositories import UserRepository
from auth_backend.shared.logging import logger


class GetCurrentUserUseCase:
    """Resolve the user behind a verified session token.

    A token that outlives its account is treated like any other invalid token.
    """

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            logger.info(f"auth.session: no user for token user_id={user_id}")
            raise InvalidTokenError(context={"reason": "unknown_user"})
        return user
