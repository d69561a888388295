"""Refresh token lifecycle - one current token per user."""

import hmac
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.events_api.core.exceptions import ConflictError
from src.events_api.core.logging import get_logger
from src.events_api.core.security import IssuedRefreshToken, RefreshTokenProvider, hash_token
from src.events_api.models import RefreshToken
from src.events_api.models.base import utc_now
from src.events_api.repositories import REFRESH_TOKEN_TAKEN, RepositoryManager, is_unique_violation

logger = get_logger(__name__)


class RefreshTokenService:
    """Owns every write to refresh token records.

    A user has zero or one stored token. Rotation overwrites the stored hash
    and expiry in place instead of appending rows.
    """

    def __init__(
        self,
        repository_manager: RepositoryManager,
        refresh_token_provider: RefreshTokenProvider,
    ):
        self.repository_manager = repository_manager
        self.refresh_token_provider = refresh_token_provider

    async def create_refresh_token(self, user_id: UUID) -> IssuedRefreshToken:
        """Generate and enqueue the first token of a new user.

        Does not commit; the caller saves it together with the user.
        Raises ConflictError if the user already has a token.
        """
        repo = self.repository_manager.refresh_token
        if await repo.get_by_user_id(user_id) is not None:
            raise ConflictError(f"refresh token for user {user_id} already exists")

        issued = self.refresh_token_provider.generate_token(user_id)
        repo.create(
            RefreshToken(
                user_id=user_id,
                token_hash=hash_token(issued.value),
                expires_at=issued.expires_at,
            )
        )
        return issued

    async def update_refresh_token(
        self,
        user_id: UUID,
        new_token: IssuedRefreshToken,
        track_changes: bool = True,
    ) -> None:
        """Replace the user's current token with new_token and commit.

        Overwrites the existing row if there is one, inserts otherwise.
        Two rotations racing to insert for the same user hit the unique
        user_id constraint; the loser gets ConflictError.
        """
        repo = self.repository_manager.refresh_token
        existing = await repo.get_by_user_id(user_id, track_changes)

        if existing is None:
            repo.create(
                RefreshToken(
                    user_id=user_id,
                    token_hash=hash_token(new_token.value),
                    expires_at=new_token.expires_at,
                )
            )
        else:
            existing.token_hash = hash_token(new_token.value)
            existing.expires_at = new_token.expires_at
            existing.updated_at = utc_now()
            repo.update(existing)

        try:
            await self.repository_manager.save()
        except IntegrityError as e:
            if not is_unique_violation(e, REFRESH_TOKEN_TAKEN):
                raise
            raise ConflictError("Refresh token was rotated concurrently, please retry") from e

        logger.info("Refresh token rotated", user_id=str(user_id), created=existing is None)

    async def get_refresh_token(self, user_id: UUID) -> RefreshToken | None:
        """Get the user's current token record."""
        return await self.repository_manager.refresh_token.get_by_user_id(user_id)

    async def get_by_value(self, value: str) -> RefreshToken | None:
        """Find the stored record matching a raw token value."""
        token_hash = hash_token(value)
        stored = await self.repository_manager.refresh_token.get_by_hash(token_hash)
        if stored is None:
            return None
        # Use constant-time comparison to prevent timing attacks
        if not hmac.compare_digest(token_hash, stored.token_hash):
            return None
        return stored

    async def revoke_refresh_token(self, user_id: UUID) -> bool:
        """Delete the user's current token. Returns False if there was none."""
        repo = self.repository_manager.refresh_token
        existing = await repo.get_by_user_id(user_id, track_changes=True)
        if existing is None:
            return False

        await repo.delete(existing)
        await self.repository_manager.save()
        logger.info("Refresh token revoked", user_id=str(user_id))
        return True
