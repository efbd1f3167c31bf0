# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from functools import cached_property
from typing import cast

from auth_backend.domain.users.entities import User
from auth_backend.domain.users.exceptions import InvalidCredentialsError
from auth_backend.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from auth_backend.domain.users.validation import normalize_email, validate_signin
from auth_backend.shared.errors.base import RequestValidationError
from auth_backend.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    @cached_property
    def _decoy_hash(self) -> str:
        return self._password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, email: str | None, password: str | None) -> tuple[User, str]:
        errors = validate_signin(email, password)
        if errors:
            raise RequestValidationError(errors)
        password = cast(str, password)

        user = self._users.find_by_email(normalize_email(cast(str, email)))
        if user is None:
            # Spend the same hashing time as a real check so that response
            # latency does not reveal whether the email is registered.
            self._password_hasher.verify(password, self._decoy_hash)
            logger.info("auth.signin: rejected")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("auth.signin: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.signin: ok user_id={user.id}")
        return user, token
