"""Security utilities - password hashing and token providers.

Re-exports all security-related classes for convenience.
"""

from src.events_api.core.security.passwords import PasswordHasher
from src.events_api.core.security.providers import (
    get_access_token_provider,
    get_password_hasher,
    get_refresh_token_provider,
)
from src.events_api.core.security.tokens import (
    AccessTokenProvider,
    IssuedRefreshToken,
    RefreshTokenProvider,
    TokenType,
    hash_token,
)

__all__ = [
    # Passwords
    "PasswordHasher",
    # Tokens
    "AccessTokenProvider",
    "IssuedRefreshToken",
    "RefreshTokenProvider",
    "TokenType",
    "hash_token",
    # Providers
    "get_access_token_provider",
    "get_password_hasher",
    "get_refresh_token_provider",
]
