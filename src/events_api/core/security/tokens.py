"""Access token signing and refresh token generation."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from hashlib import sha256
from typing import Any, Protocol
from uuid import UUID

from jose import JWTError, jwt
from jose.constants import ALGORITHMS

from src.events_api.core.config import MIN_REFRESH_TOKEN_BYTES, Settings


class TokenType:
    """Token type constants."""

    ACCESS = "access"


class TokenSubject(Protocol):
    """Anything an access token can be issued for."""

    id: UUID
    username: str
    role: str


@dataclass(frozen=True)
class IssuedRefreshToken:
    """A freshly generated refresh token. Only the hash of value is persisted."""

    user_id: UUID
    value: str
    expires_at: datetime


def hash_token(token: str) -> str:
    """Hash a token using SHA256 for secure storage."""
    return sha256(token.encode()).hexdigest()


class AccessTokenProvider:
    """Signs short-lived bearer tokens carrying user id, username and role.

    Key, algorithm, issuer and audience are fixed when the provider is built.
    Construction fails for keys or algorithms that cannot be used, so building
    the provider at startup makes a bad configuration fatal there instead of
    on the first login.
    """

    def __init__(self, settings: Settings):
        if not settings.jwt_secret_key:
            raise ValueError("JWT signing key is not configured")
        if settings.jwt_algorithm not in ALGORITHMS.HMAC:
            raise ValueError(f"Unsupported JWT algorithm: {settings.jwt_algorithm}")

        self._secret_key = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._issuer = settings.jwt_issuer
        self._audience = settings.jwt_audience
        self._expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    def generate_token(self, user: TokenSubject) -> str:
        """Create JWT access token for user."""
        now = datetime.now(UTC)
        to_encode = {
            "sub": str(user.id),
            "username": user.username,
            "role": user.role,
            "iat": now,
            "exp": now + self._expires_delta,
            "iss": self._issuer,
            "aud": self._audience,
            "type": TokenType.ACCESS,
        }
        return jwt.encode(  # type: ignore[no-any-return]
            to_encode,
            self._secret_key,
            algorithm=self._algorithm,
        )

    def decode_token(self, token: str) -> dict[str, Any] | None:
        """Decode and validate an access token. Returns None on any error."""
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except JWTError:
            return None

        if payload.get("type") != TokenType.ACCESS:
            return None
        return payload


class RefreshTokenProvider:
    """Generates opaque, unguessable refresh tokens with an expiry."""

    def __init__(self, settings: Settings):
        if settings.refresh_token_length < MIN_REFRESH_TOKEN_BYTES:
            raise ValueError("Refresh token length is below 128 bits")

        self._length = settings.refresh_token_length
        self._lifetime = timedelta(days=settings.refresh_token_expire_days)

    def generate_token(self, user_id: UUID) -> IssuedRefreshToken:
        """Create refresh token. Expiry is an aware UTC datetime."""
        expires_at = datetime.now(UTC) + self._lifetime
        return IssuedRefreshToken(
            user_id=user_id,
            value=secrets.token_urlsafe(self._length),
            expires_at=expires_at,
        )
