from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Field presence and content rules live in domain.users.validation; the DTOs
# only pin down the wire names and reject non-string values.


class SignupRequestDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True, extra="ignore")

    full_name: str | None = Field(None, alias="fullName")
    username: str | None = None
    email: str | None = None
    password: str | None = None


class SigninRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    password: str | None = None


class TokenResponseDTO(BaseModel):
    token: str


class MessageResponseDTO(BaseModel):
    msg: str


class SessionResponseDTO(BaseModel):
    user: dict[str, int]
