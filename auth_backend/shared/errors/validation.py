# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import FieldError, RequestValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> list[FieldError]:
    errors_list = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        errors_list.append(
            FieldError(field=field_path or "body", message=error.get("msg", "Invalid value"))
        )

    return errors_list


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise RequestValidationError(format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
