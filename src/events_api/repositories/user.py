"""Repository for User entity."""

from sqlmodel import select

from src.events_api.models import User
from src.events_api.repositories.base import BaseRepository
from src.events_api.schemas.pagination import Paging


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_username(self, username: str, track_changes: bool = False) -> User | None:
        """Get user by username (exact match)."""
        return await self._first(select(User).where(User.username == username), track_changes)

    async def get_all(self, paging: Paging, track_changes: bool = False) -> list[User]:
        """Get one page of users ordered by username."""
        return await self.paginate(select(User), paging, User.username, track_changes)
