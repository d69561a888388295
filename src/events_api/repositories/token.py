"""Repository for RefreshToken entity."""

from uuid import UUID

from sqlmodel import select

from src.events_api.models import RefreshToken
from src.events_api.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    """Repository for RefreshToken entity. At most one row per user."""

    model = RefreshToken

    async def get_by_user_id(
        self, user_id: UUID, track_changes: bool = False
    ) -> RefreshToken | None:
        """Get the current refresh token of a user."""
        return await self._first(
            select(RefreshToken).where(RefreshToken.user_id == user_id), track_changes
        )

    async def get_by_hash(
        self, token_hash: str, track_changes: bool = False
    ) -> RefreshToken | None:
        """Get refresh token by its hash."""
        return await self._first(
            select(RefreshToken).where(RefreshToken.token_hash == token_hash), track_changes
        )
