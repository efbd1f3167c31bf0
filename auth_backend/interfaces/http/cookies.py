# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from flask import Request, Response

from auth_backend.shared.config import AppConfig


@dataclass(slots=True, frozen=True)
class CookieSettings:
    name: str = "token"
    secure: bool = False
    samesite: str | None = "Lax"

    @classmethod
    def from_config(cls, config: AppConfig) -> CookieSettings:
        return cls(
            name=config.security.cookie_name,
            secure=config.is_production(),
            samesite=config.security.cookie_samesite or None,
        )


class SessionCookieManager:
    """Moves session tokens between HTTP responses/requests and a cookie.

    The cookie is ``HttpOnly`` and carries no ``Max-Age``: the token's own
    ``exp`` claim bounds the session, checked whenever the token is verified.
    """

    def __init__(self, settings: CookieSettings) -> None:
        self._settings = settings

    @property
    def name(self) -> str:
        return self._settings.name

    def attach(self, response: Response, token: str) -> None:
        response.set_cookie(
            self._settings.name,
            token,
            path="/",
            httponly=True,
            secure=self._settings.secure,
            samesite=self._settings.samesite,
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            self._settings.name,
            path="/",
            httponly=True,
            secure=self._settings.secure,
            samesite=self._settings.samesite,
        )

    def read(self, request: Request) -> str | None:
        token = request.cookies.get(self._settings.name)
        if token:
            return token
        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            return auth_header[7:].strip() or None
        return None


__all__ = ["CookieSettings", "SessionCookieManager"]
