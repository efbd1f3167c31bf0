"""Password hashing strategies."""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from auth_backend.domain.users.repositories import PasswordHasher

DEFAULT_ROUNDS = 10


def _encode(password: str) -> bytes:
    # bcrypt reads at most 72 bytes; a fixed 44-byte SHA-256 digest keeps
    # every character of longer passwords significant
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not isinstance(hashed, str) or not hashed:
            return False
        try:
            return bool(bcrypt.checkpw(_encode(password), hashed.encode("ascii")))
        except (TypeError, ValueError):
            # Malformed or foreign digests count as a mismatch
            return False
