# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from auth_backend.domain.users.entities import NewUser
from auth_backend.domain.users.entities import User as DomainUser
from auth_backend.domain.users.exceptions import CredentialStoreError, DuplicateKeyError
from auth_backend.domain.users.repositories import UserRepository
from auth_backend.infrastructure.db.models import User
from auth_backend.infrastructure.unit_of_work import unit_of_work_scope


def _aware(value: datetime) -> datetime:
    # SQLite drops the offset on the way back
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        full_name=row.full_name,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_aware(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(select(User).where(User.email == email)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise CredentialStoreError("find_by_email") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(User, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise CredentialStoreError("find_by_id") from exc

    def add(self, user: NewUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    full_name=user.full_name,
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # email carries the only unique constraint on users
            raise DuplicateKeyError("email") from exc
        except SQLAlchemyError as exc:
            raise CredentialStoreError("add") from exc

