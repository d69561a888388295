"""Unit of work over a single session."""

from functools import cached_property

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.events_api.repositories.event import EventRepository, ParticipantRepository
from src.events_api.repositories.token import RefreshTokenRepository
from src.events_api.repositories.user import UserRepository

# Postgres reports the violated index (ix_users_username), SQLite the
# table.column pairs; each marker matches one of the two forms.
USERNAME_TAKEN = ("ix_users_username", "users.username")
REFRESH_TOKEN_TAKEN = (
    "ix_refresh_tokens_user_id",
    "ix_refresh_tokens_token_hash",
    "refresh_tokens.user_id",
    "refresh_tokens.token_hash",
)
PARTICIPANT_TAKEN = ("uq_participant_event_user", "participants.event_id")


def is_unique_violation(error: IntegrityError, markers: tuple[str, ...]) -> bool:
    """Tell whether error is a unique violation on one of the marked constraints."""
    message = str(error.orig).lower()
    if "unique" not in message:
        return False
    return any(marker in message for marker in markers)


class RepositoryManager:
    """Groups the repositories of one session and commits their pending work.

    Repositories only enqueue changes. Nothing reaches the database until
    flush() or save(); a failed write is rolled back and re-raised unchanged.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @cached_property
    def user(self) -> UserRepository:
        return UserRepository(self.session)

    @cached_property
    def refresh_token(self) -> RefreshTokenRepository:
        return RefreshTokenRepository(self.session)

    @cached_property
    def event(self) -> EventRepository:
        return EventRepository(self.session)

    @cached_property
    def participant(self) -> ParticipantRepository:
        return ParticipantRepository(self.session)

    async def flush(self) -> None:
        """Send pending inserts without committing.

        Rows that later inserts reference by foreign key must be flushed
        first; there are no relationships to order them otherwise.
        """
        try:
            await self.session.flush()
        except Exception:
            await self.session.rollback()
            raise

    async def save(self) -> None:
        """Commit the pending unit of work."""
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
