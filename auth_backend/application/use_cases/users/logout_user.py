"""Use-case for ending a cookie session."""

from __future__ import annotations

SIGNED_OUT_MESSAGE = "Signed out successfully"


class LogoutUserUseCase:
    """Tokens are stateless, so signing out only has to drop the cookie.

    The controller clears the cookie; this use case never fails, even when
    the caller had no session to begin with.
    """

    def execute(self) -> str:
        return SIGNED_OUT_MESSAGE
