# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    full_name: str
    username: str
    email: str
    password_hash: str
    created_at: datetime

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"


@dataclass(slots=True, frozen=True)
class NewUser:
    """A user record that has not been persisted yet."""

    full_name: str
    username: str
    email: str
    password_hash: str
    created_at: datetime
