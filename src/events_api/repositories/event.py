"""Repositories for Event and Participant entities."""

from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select

from src.events_api.models import Event, Participant
from src.events_api.repositories.base import BaseRepository
from src.events_api.schemas.pagination import Paging


class EventRepository(BaseRepository[Event]):
    """Repository for Event entity."""

    model = Event

    async def get_all(self, paging: Paging, track_changes: bool = False) -> list[Event]:
        """Get one page of events, soonest first."""
        return await self.paginate(select(Event), paging, Event.starts_at, track_changes)


class ParticipantRepository(BaseRepository[Participant]):
    """Repository for Participant entity, always scoped to an event."""

    model = Participant

    async def get_all(
        self, event_id: UUID, paging: Paging, track_changes: bool = False
    ) -> list[Participant]:
        """Get one page of an event's participants in registration order."""
        return await self.paginate(
            select(Participant).where(Participant.event_id == event_id),
            paging,
            Participant.registered_at,
            track_changes,
        )

    async def get_for_event(
        self, event_id: UUID, id: UUID, track_changes: bool = False
    ) -> Participant | None:
        """Get a participant only if it belongs to the given event."""
        return await self._first(
            select(Participant).where(Participant.id == id, Participant.event_id == event_id),
            track_changes,
        )

    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID, track_changes: bool = False
    ) -> Participant | None:
        """Get a user's registration for an event."""
        return await self._first(
            select(Participant).where(
                Participant.event_id == event_id,
                Participant.user_id == user_id,
            ),
            track_changes,
        )

    async def count_for_event(self, event_id: UUID) -> int:
        """Count registrations for an event."""
        result = await self.session.execute(
            select(func.count()).select_from(Participant).where(Participant.event_id == event_id)
        )
        return int(result.scalar_one())

    async def delete_for_event(self, event_id: UUID) -> int:
        """Delete every registration of an event. Runs in the current transaction."""
        stmt = delete(Participant).where(Participant.event_id == event_id)  # type: ignore[arg-type]
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]
