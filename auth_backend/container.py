"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from auth_backend.application.services.password_hashing import BcryptPasswordHasher
from auth_backend.application.services.session_tokens import JwtTokenIssuer, TokenSettings
from auth_backend.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from auth_backend.application.use_cases.users.login_user import LoginUserUseCase
from auth_backend.application.use_cases.users.logout_user import LogoutUserUseCase
from auth_backend.application.use_cases.users.register_user import RegisterUserUseCase
from auth_backend.infrastructure.db import build_engine, build_session_factory
from auth_backend.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from auth_backend.interfaces.http.controllers.auth_controller import AuthController
from auth_backend.interfaces.http.controllers.misc_controller import MiscController
from auth_backend.interfaces.http.cookies import CookieSettings, SessionCookieManager
from auth_backend.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.security.password_hash_rounds)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(TokenSettings.from_config(self.config.tokens))

    @cached_property
    def session_cookies(self) -> SessionCookieManager:
        return SessionCookieManager(CookieSettings.from_config(self.config))

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase()

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
            cookies=self.session_cookies,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
