from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from auth_backend.application.use_cases.users.get_current_user import \
    GetCurrentUserUseCase
from auth_backend.application.use_cases.users.login_user import LoginUserUseCase
from auth_backend.application.use_cases.users.logout_user import LogoutUserUseCase
from auth_backend.application.use_cases.users.register_user import \
    RegisterUserUseCase
from auth_backend.auth import init_session_guard
from auth_backend.domain.users.entities import User
from auth_backend.domain.users.exceptions import (InvalidCredentialsError,
                                                  SigningError)
from auth_backend.application.services.session_tokens import JwtTokenIssuer
from auth_backend.interfaces.http.controllers.auth_controller import AuthController
from auth_backend.interfaces.http.cookies import CookieSettings, SessionCookieManager
from auth_backend.shared.middleware.error_handler import configure_error_handling


def _user(user_id: int = 1) -> User:
    return User(
        id=user_id,
        full_name="Ann Lee",
        username="annlee",
        email="ann@example.com",
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _register(
    flask_app: Flask,
    *,
    register_use_case: object | None = None,
    login_use_case: object | None = None,
    current_user_use_case: object | None = None,
    cookies: SessionCookieManager | None = None,
) -> None:
    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, register_use_case or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login_use_case or MagicMock()),
        logout_use_case=LogoutUserUseCase(),
        current_user_use_case=cast(
            GetCurrentUserUseCase, current_user_use_case or MagicMock()
        ),
        cookies=cookies or SessionCookieManager(CookieSettings()),
    )
    flask_app.register_blueprint(controller.as_blueprint())


def test_signup_endpoint_sets_cookie(flask_app: Flask) -> None:
    register_called: dict[str, tuple] = {}

    class StubRegister:
        def execute(self, *args: object) -> tuple[User, str]:
            register_called["args"] = args
            return _user(), "token123"

    _register(flask_app, register_use_case=StubRegister())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signup",
            json={
                "fullName": "Ann Lee",
                "username": "annlee",
                "email": "ann@example.com",
                "password": "secret1",
            },
        )

    assert response.status_code == 200
    assert response.get_json() == {"token": "token123"}
    assert register_called["args"] == ("Ann Lee", "annlee", "ann@example.com", "secret1")
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("token=token123")
    assert "HttpOnly" in cookie
    assert "Secure" not in cookie
    assert "Max-Age" not in cookie and "Expires" not in cookie


def test_signup_passes_missing_fields_as_none(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.return_value = (_user(), "t")
    _register(flask_app, register_use_case=register)

    with flask_app.test_client() as client:
        client.post("/api/auth/signup", data="not json", content_type="text/plain")

    register.execute.assert_called_once_with(None, None, None, None)


def test_signup_non_string_field_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    _register(flask_app, register_use_case=register)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signup", json={"fullName": 12, "email": ["x"]})

    assert response.status_code == 400
    params = [error["param"] for error in response.get_json()["errors"]]
    assert params == ["fullName", "email"]
    register.execute.assert_not_called()


def test_signin_invalid_credentials_returns_400(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _register(flask_app, login_use_case=login)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signin", json={"email": "ann@example.com", "password": "wrong"}
        )

    assert response.status_code == 400
    assert response.get_json() == {"errors": [{"msg": "Invalid Credentials"}]}
    assert "Set-Cookie" not in response.headers


def test_signing_failure_returns_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = SigningError("missing_secret")
    _register(flask_app, login_use_case=login)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signin", json={"email": "ann@example.com", "password": "secret1"}
        )

    assert response.status_code == 500
    assert response.get_json() == {"errors": [{"msg": "Server error"}]}
    assert "missing_secret" not in response.get_data(as_text=True)


def test_unexpected_error_returns_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("connection refused to db-host:5432")
    _register(flask_app, login_use_case=login)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signin", json={"email": "ann@example.com", "password": "secret1"}
        )

    assert response.status_code == 500
    assert response.get_json() == {"errors": [{"msg": "Server error"}]}


def test_signout_clears_cookie(flask_app: Flask) -> None:
    _register(flask_app)

    with flask_app.test_client() as client:
        client.set_cookie("token", "whatever")
        response = client.post("/api/auth/signout")
        assert client.get_cookie("token") is None

    assert response.status_code == 200
    assert response.get_json() == {"msg": "Signed out successfully"}
    assert response.headers["Set-Cookie"].startswith("token=;")


def test_signout_without_session_succeeds(flask_app: Flask) -> None:
    _register(flask_app)

    with flask_app.test_client() as client:
        first = client.post("/api/auth/signout")
        second = client.post("/api/auth/signout")

    assert first.status_code == second.status_code == 200


def test_production_cookie_is_secure(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = (_user(), "token123")
    _register(
        flask_app,
        login_use_case=login,
        cookies=SessionCookieManager(CookieSettings(secure=True)),
    )

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signin", json={"email": "ann@example.com", "password": "secret1"}
        )

    cookie = response.headers["Set-Cookie"]
    assert "Secure" in cookie
    assert "HttpOnly" in cookie


def test_session_endpoint_requires_valid_token(
    flask_app: Flask, token_issuer: JwtTokenIssuer
) -> None:
    users = MagicMock()
    users.find_by_id.side_effect = lambda user_id: _user(user_id) if user_id == 5 else None
    cookies = SessionCookieManager(CookieSettings())
    init_session_guard(flask_app, tokens=token_issuer, cookies=cookies)
    _register(
        flask_app,
        current_user_use_case=GetCurrentUserUseCase(users=users),
        cookies=cookies,
    )

    with flask_app.test_client() as client:
        anonymous = client.get("/api/auth/session")
        forged = client.get("/api/auth/session", headers={"Authorization": "Bearer nope"})
        client.set_cookie("token", token_issuer.issue(6))
        orphaned = client.get("/api/auth/session")
        client.set_cookie("token", token_issuer.issue(5))
        authed = client.get("/api/auth/session")

    assert anonymous.status_code == 401
    assert anonymous.get_json() == {"errors": [{"msg": "Unauthorized"}]}
    assert forged.status_code == 401
    assert orphaned.status_code == 401
    assert authed.status_code == 200
    assert authed.get_json() == {"user": {"id": 5}}
