"""Process-wide security providers, built once from settings."""

from functools import lru_cache

from src.events_api.core.config import get_settings
from src.events_api.core.security.passwords import PasswordHasher
from src.events_api.core.security.tokens import AccessTokenProvider, RefreshTokenProvider


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(get_settings())


@lru_cache
def get_access_token_provider() -> AccessTokenProvider:
    return AccessTokenProvider(get_settings())


@lru_cache
def get_refresh_token_provider() -> RefreshTokenProvider:
    return RefreshTokenProvider(get_settings())
