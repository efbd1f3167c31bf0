# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from auth_backend.application.use_cases.users.get_current_user import \
    GetCurrentUserUseCase
from auth_backend.application.use_cases.users.login_user import LoginUserUseCase
from auth_backend.application.use_cases.users.logout_user import LogoutUserUseCase
from auth_backend.application.use_cases.users.register_user import \
    RegisterUserUseCase
from auth_backend.auth import session_required
from auth_backend.infrastructure.audit import AuditAction, audit_log
from auth_backend.interfaces.http.cookies import SessionCookieManager
from auth_backend.interfaces.http.dto.auth import (MessageResponseDTO,
                                                   SessionResponseDTO,
                                                   SigninRequestDTO,
                                                   SignupRequestDTO,
                                                   TokenResponseDTO)
from auth_backend.shared.errors.base import AppError
from auth_backend.shared.errors.validation import raise_validation_error
from auth_backend.shared.middleware.request_logger import get_client_ip


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        cookies: SessionCookieManager,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._current_user_use_case = current_user_use_case
        self._cookies = cookies

    def _token_response(self, token: str) -> Response:
        response = jsonify(TokenResponseDTO(token=token).model_dump())
        self._cookies.attach(response, token)
        return response

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user, token = self._register_use_case.execute(
                dto.full_name, dto.username, dto.email, dto.password
            )
        except AppError as exc:
            audit_log(
                AuditAction.SIGNUP_FAILED,
                ip_address=get_client_ip(),
                details={"reason": exc.code},
                success=False,
            )
            raise

        audit_log(AuditAction.SIGNUP, user_id=user.id, ip_address=get_client_ip())
        return self._token_response(token), 200

    def signin(self) -> tuple[Response, int]:
        try:
            dto = SigninRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user, token = self._login_use_case.execute(dto.email, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.SIGNIN_FAILED,
                ip_address=get_client_ip(),
                details={"reason": exc.code},
                success=False,
            )
            raise

        audit_log(AuditAction.SIGNIN_SUCCESS, user_id=user.id, ip_address=get_client_ip())
        return self._token_response(token), 200

    def signout(self) -> tuple[Response, int]:
        message = self._logout_use_case.execute()

        response = jsonify(MessageResponseDTO(msg=message).model_dump())
        self._cookies.clear(response)
        audit_log(AuditAction.SIGNOUT, ip_address=get_client_ip())
        return response, 200

    @session_required
    def session(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(g.user_id)
        payload = SessionResponseDTO(user={"id": user.id}).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/signin", view_func=self.signin, methods=["POST"])
        bp.add_url_rule("/signout", view_func=self.signout, methods=["POST"])
        bp.add_url_rule("/session", view_func=self.session, methods=["GET"])
        return bp
