from .password_hashing import BcryptPasswordHasher
from .session_tokens import JwtTokenIssuer, TokenSettings

__all__ = ["BcryptPasswordHasher", "JwtTokenIssuer", "TokenSettings"]
