from .base import (
    SERVER_ERROR_MESSAGE,
    AppError,
    DomainError,
    FieldError,
    InfrastructureError,
    RequestValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "SERVER_ERROR_MESSAGE",
    "AppError",
    "DomainError",
    "FieldError",
    "InfrastructureError",
    "RequestValidationError",
    "handle_app_error",
    "register_error_handler",
]
