# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Field rules for credential payloads.

A rule is a pure function ``(field, value) -> list[FieldError]``. ``validate``
runs every rule of every field and concatenates the results, so a request
with several problems reports all of them at once.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from email_validator import EmailNotValidError, validate_email

from auth_backend.shared.errors.base import FieldError

Rule = Callable[[str, object], list[FieldError]]

# Sizes of the users.full_name and users.username columns
FULL_NAME_MAX_LENGTH = 128
USERNAME_MAX_LENGTH = 64


def required(message: str) -> Rule:
    def rule(field: str, value: object) -> list[FieldError]:
        if isinstance(value, str) and value.strip():
            return []
        return [FieldError(field, message)]

    return rule


def present(message: str) -> Rule:
    def rule(field: str, value: object) -> list[FieldError]:
        if value is None:
            return [FieldError(field, message)]
        return []

    return rule


def min_length(length: int, message: str) -> Rule:
    def rule(field: str, value: object) -> list[FieldError]:
        if isinstance(value, str) and len(value) >= length:
            return []
        return [FieldError(field, message)]

    return rule


def is_email(message: str) -> Rule:
    def rule(field: str, value: object) -> list[FieldError]:
        if not isinstance(value, str):
            return [FieldError(field, message)]
        try:
            validate_email(value.strip(), check_deliverability=False)
        except EmailNotValidError:
            return [FieldError(field, message)]
        return []

    return rule


def max_length(length: int, message: str) -> Rule:
    """Stripped length cap; non-strings are left to the other rules."""

    def rule(field: str, value: object) -> list[FieldError]:
        if isinstance(value, str) and len(value.strip()) > length:
            return [FieldError(field, message)]
        return []

    return rule


def validate(
    values: Mapping[str, object], rules: Mapping[str, Sequence[Rule]]
) -> list[FieldError]:
    errors: list[FieldError] = []
    for field, field_rules in rules.items():
        value = values.get(field)
        for rule in field_rules:
            errors.extend(rule(field, value))
    return errors


def normalize_email(email: str) -> str:
    return email.strip().lower()


SIGNUP_RULES: Mapping[str, Sequence[Rule]] = {
    "fullName": (
        required("Full name is required"),
        max_length(
            FULL_NAME_MAX_LENGTH,
            f"Full name must be at most {FULL_NAME_MAX_LENGTH} characters",
        ),
    ),
    "username": (
        required("Username is required"),
        max_length(
            USERNAME_MAX_LENGTH,
            f"Username must be at most {USERNAME_MAX_LENGTH} characters",
        ),
    ),
    "email": (is_email("Please include a valid email"),),
    "password": (min_length(6, "Please enter a password with 6 or more characters"),),
}

SIGNIN_RULES: Mapping[str, Sequence[Rule]] = {
    "email": (is_email("Please include a valid email"),),
    "password": (present("Password is required"),),
}


def validate_signup(
    full_name: str | None, username: str | None, email: str | None, password: str | None
) -> list[FieldError]:
    return validate(
        {"fullName": full_name, "username": username, "email": email, "password": password},
        SIGNUP_RULES,
    )


def validate_signin(email: str | None, password: str | None) -> list[FieldError]:
    return validate({"email": email, "password": password}, SIGNIN_RULES)


__all__ = [
    "Rule",
    "SIGNIN_RULES",
    "SIGNUP_RULES",
    "FULL_NAME_MAX_LENGTH",
    "USERNAME_MAX_LENGTH",
    "is_email",
    "max_length",
    "min_length",
    "normalize_email",
    "present",
    "required",
    "validate",
    "validate_signin",
    "validate_signup",
]
