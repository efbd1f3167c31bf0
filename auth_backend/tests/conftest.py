from __future__ import annotations

import threading
from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask

from auth_backend.app import create_app
from auth_backend.application.services.password_hashing import BcryptPasswordHasher
from auth_backend.application.services.session_tokens import JwtTokenIssuer, TokenSettings
from auth_backend.container import Container
from auth_backend.domain.users.entities import NewUser, User
from auth_backend.domain.users.exceptions import DuplicateKeyError
from auth_backend.domain.users.repositories import UserRepository
from auth_backend.shared.config import AppConfig, DatabaseConfig, SecurityConfig, TokenConfig

TEST_SECRET = "test-signing-secret-0123456789abcdef"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: NewUser) -> User:
        with self._lock:
            if user.email in self._users:
                raise DuplicateKeyError("email")
            new_user = User(
                id=self._seq,
                full_name=user.full_name,
                username=user.username,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            self._seq += 1
            self._users[new_user.email] = new_user
            return new_user

    @property
    def users(self) -> list[User]:
        return list(self._users.values())


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture(scope="session")
def hasher() -> BcryptPasswordHasher:
    # Lowest bcrypt cost keeps the suite fast; production uses 10
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture()
def token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(TokenSettings(secret=TEST_SECRET))


def make_config(
    *,
    database_url: str = "sqlite://",
    app_env: str = "test",
    secret: str = TEST_SECRET,
) -> AppConfig:
    return AppConfig(
        APP_ENV=app_env,
        database=DatabaseConfig(DATABASE_URL=database_url),
        tokens=TokenConfig(JWT_SECRET=secret),
        security=SecurityConfig(PASSWORD_HASH_ROUNDS=4, ALLOWED_ORIGINS="http://localhost:3000"),
    )


@pytest.fixture()
def container() -> Container:
    return Container(make_config())


@pytest.fixture()
def file_container(tmp_path: Path) -> Iterator[Container]:
    container = Container(make_config(database_url=f"sqlite:///{tmp_path / 'auth.db'}"))
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)
