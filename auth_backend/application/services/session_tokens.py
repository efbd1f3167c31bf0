# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, self-contained session tokens.

Tokens are HS256 JWTs with the payload ``{"user": {"id": <id>}}`` plus
``iat``/``exp`` claims. Nothing is stored server side: a token is valid
exactly while its signature checks out against the configured secret and
its ``exp`` lies in the future.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from auth_backend.domain.users.exceptions import InvalidTokenError, SigningError
from auth_backend.domain.users.repositories import TokenIssuer
from auth_backend.shared.config import TokenConfig


@dataclass(slots=True, frozen=True)
class TokenSettings:
    secret: str
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(hours=24)

    @classmethod
    def from_config(cls, config: TokenConfig) -> TokenSettings:
        return cls(
            secret=config.secret,
            algorithm=config.algorithm,
            lifetime=timedelta(seconds=config.lifetime_seconds),
        )


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        settings: TokenSettings,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._settings = settings
        self._clock = clock

    def _secret(self) -> str:
        if not self._settings.secret:
            raise SigningError("missing_secret")
        return self._settings.secret

    def issue(self, user_id: int) -> str:
        secret = self._secret()
        issued_at = self._clock()
        payload = {
            "user": {"id": user_id},
            "iat": issued_at,
            "exp": issued_at + self._settings.lifetime,
        }
        try:
            return jwt.encode(payload, secret, algorithm=self._settings.algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            raise SigningError(type(exc).__name__) from exc

    def verify(self, token: str) -> int:
        secret = self._secret()
        if not token:
            raise InvalidTokenError(context={"reason": "missing"})
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(context={"reason": type(exc).__name__}) from exc

        user = payload.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise InvalidTokenError(context={"reason": "malformed_payload"})
        return user_id


__all__ = ["JwtTokenIssuer", "TokenSettings"]
