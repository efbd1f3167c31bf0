# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import NewUser, User
from .exceptions import (
    CredentialStoreError,
    DuplicateKeyError,
    InvalidCredentialsError,
    InvalidTokenError,
    SigningError,
    UserAlreadyExistsError,
)

__all__ = [
    "CredentialStoreError",
    "DuplicateKeyError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NewUser",
    "SigningError",
    "User",
    "UserAlreadyExistsError",
]
