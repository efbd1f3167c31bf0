# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import cast

from flask import Flask, current_app, g, request

from auth_backend.domain.users.exceptions import InvalidTokenError
from auth_backend.domain.users.repositories import TokenIssuer
from auth_backend.interfaces.http.cookies import SessionCookieManager
from auth_backend.shared.logging import logger

_TOKENS_KEY = "auth_backend.session_tokens"
_COOKIES_KEY = "auth_backend.session_cookies"


def init_session_guard(
    app: Flask, *, tokens: TokenIssuer, cookies: SessionCookieManager
) -> None:
    app.extensions[_TOKENS_KEY] = tokens
    app.extensions[_COOKIES_KEY] = cookies


def session_required(f):
    """Reject the request with 401 unless it carries a valid session token.

    On success the verified user id is available as ``g.user_id``.
    """

    @wraps(f)
    def inner(*a, **kw):
        tokens = cast(TokenIssuer, current_app.extensions[_TOKENS_KEY])
        cookies = cast(SessionCookieManager, current_app.extensions[_COOKIES_KEY])

        token = cookies.read(request)
        if not token:
            logger.warning(f"No session cookie/header on {request.method} {request.path}")
            raise InvalidTokenError(context={"reason": "missing"})

        try:
            g.user_id = tokens.verify(token)
        except InvalidTokenError as exc:
            logger.warning(
                f"Auth failed ({dict(exc.context or {}).get('reason')}) "
                f"on {request.method} {request.path}"
            )
            raise

        logger.debug(f"Auth OK: user={g.user_id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner
