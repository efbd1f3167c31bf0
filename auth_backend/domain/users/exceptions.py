# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from auth_backend.shared.errors.base import DomainError, InfrastructureError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid Credentials"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class DuplicateKeyError(Exception):
    """Raised by a credential store when a unique constraint rejects a write."""

    def __init__(self, key: str) -> None:
        super().__init__(f"duplicate value for unique key {key!r}")
        self.key = key


class CredentialStoreError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__("credential_store_error", context={"operation": operation})


class SigningError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__("token_signing_error", context={"reason": reason})
