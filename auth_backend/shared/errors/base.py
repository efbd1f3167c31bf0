# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast

SERVER_ERROR_MESSAGE = "Server error"


@dataclass(slots=True, frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"msg": self.message, "param": self.field, "location": "body"}


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def client_errors(self) -> list[dict[str, Any]]:
        return [{"msg": self.message or self.code}]

    def to_dict(self) -> dict[str, Any]:
        # context is for logs only; it never reaches the client
        return {"errors": self.client_errors()}


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str | None, getattr(self, "message", None))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            context=context,
            message=resolved_message,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(
            code=code,
            status=resolved_status,
            context=context,
            message=SERVER_ERROR_MESSAGE,
        )


class RequestValidationError(AppError):
    def __init__(
        self,
        errors: Sequence[FieldError],
        code: str = "validation_error",
    ) -> None:
        self.errors = tuple(errors)
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context={"fields": [error.field for error in self.errors]},
        )

    def client_errors(self) -> list[dict[str, Any]]:
        return [error.to_dict() for error in self.errors]
