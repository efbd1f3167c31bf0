# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from typing import cast

from auth_backend.domain.users.entities import NewUser, User
from auth_backend.domain.users.exceptions import DuplicateKeyError, UserAlreadyExistsError
from auth_backend.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from auth_backend.domain.users.validation import normalize_email, validate_signup
from auth_backend.shared.errors.base import RequestValidationError
from auth_backend.shared.logging import logger


class RegisterUserUseCase:
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

    def execute(
        self,
        full_name: str | None,
        username: str | None,
        email: str | None,
        password: str | None,
    ) -> tuple[User, str]:
        errors = validate_signup(full_name, username, email, password)
        if errors:
            raise RequestValidationError(errors)
        full_name, username = cast(str, full_name), cast(str, username)
        password = cast(str, password)

        email = normalize_email(cast(str, email))
        if self._users.find_by_email(email) is not None:
            logger.info("auth.signup: rejected, user already exists")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        try:
            persisted = self._users.add(
                NewUser(
                    full_name=full_name.strip(),
                    username=username.strip(),
                    email=email,
                    password_hash=hashed,
                    created_at=datetime.now(UTC),
                )
            )
        except DuplicateKeyError as exc:
            # A concurrent signup won the race between lookup and insert
            logger.info(f"auth.signup: rejected on unique key {exc.key}")
            raise UserAlreadyExistsError() from exc

        token = self._tokens.issue(persisted.id)
        logger.info(f"auth.signup: created user_id={persisted.id}")
        return persisted, token
