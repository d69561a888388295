"""Participant service - registrations of users for events."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.events_api.core.exceptions import AlreadyExistsError, ConflictError, NotFoundError
from src.events_api.core.logging import get_logger
from src.events_api.models import Event, Participant
from src.events_api.repositories import PARTICIPANT_TAKEN, RepositoryManager, is_unique_violation
from src.events_api.schemas.pagination import Paging
from src.events_api.schemas.participant import ParticipantRead, ParticipantRequest
from src.events_api.services.mappers import (
    apply_participant_request,
    participant_from_request,
    participant_to_read,
)

logger = get_logger(__name__)


class ParticipantService:
    """Participant management, always scoped to an existing event."""

    def __init__(self, repository_manager: RepositoryManager):
        self.repository_manager = repository_manager

    async def create_participant(
        self,
        event_id: UUID,
        user_id: UUID,
        data: ParticipantRequest,
        track_changes: bool = False,
    ) -> ParticipantRead:
        """Register a user for an event.

        Raises NotFoundError if the event or user does not exist,
        AlreadyExistsError if the user is already registered and
        ConflictError if the event is full.
        """
        event = await self._get_event_or_raise(event_id, track_changes)
        await self._get_user_or_raise(user_id, track_changes)

        repo = self.repository_manager.participant
        if await repo.get_by_event_and_user(event_id, user_id) is not None:
            raise AlreadyExistsError(f"user {user_id} is already registered for event {event_id}")

        if await repo.count_for_event(event_id) >= event.max_participants:
            raise ConflictError(f"event with id {event_id} is full")

        participant = participant_from_request(data, event_id, user_id)
        repo.create(participant)

        try:
            await self.repository_manager.save()
        except IntegrityError as e:
            if not is_unique_violation(e, PARTICIPANT_TAKEN):
                raise
            raise AlreadyExistsError(
                f"user {user_id} is already registered for event {event_id}"
            ) from e

        logger.info("Participant registered", event_id=str(event_id), user_id=str(user_id))
        return participant_to_read(participant)

    async def get_all_participants(
        self, event_id: UUID, paging: Paging, track_changes: bool = False
    ) -> list[ParticipantRead]:
        await self._get_event_or_raise(event_id, track_changes)
        participants = await self.repository_manager.participant.get_all(
            event_id, paging, track_changes
        )
        return [participant_to_read(p) for p in participants]

    async def get_participant_by_id(
        self, event_id: UUID, id: UUID, track_changes: bool = False
    ) -> ParticipantRead:
        await self._get_event_or_raise(event_id, track_changes)
        participant = await self._get_participant_or_raise(event_id, id, track_changes)
        return participant_to_read(participant)

    async def update_participant(
        self,
        event_id: UUID,
        id: UUID,
        data: ParticipantRequest,
        track_changes: bool = True,
    ) -> ParticipantRead:
        await self._get_event_or_raise(event_id, track_changes)
        participant = await self._get_participant_or_raise(event_id, id, track_changes)

        apply_participant_request(data, participant)
        self.repository_manager.participant.update(participant)
        await self.repository_manager.save()
        return participant_to_read(participant)

    async def delete_participant(
        self, event_id: UUID, id: UUID, track_changes: bool = True
    ) -> None:
        await self._get_event_or_raise(event_id, track_changes)
        participant = await self._get_participant_or_raise(event_id, id, track_changes)

        await self.repository_manager.participant.delete(participant)
        await self.repository_manager.save()
        logger.info("Participant removed", event_id=str(event_id), participant_id=str(id))

    async def _get_event_or_raise(self, event_id: UUID, track_changes: bool) -> Event:
        event = await self.repository_manager.event.get_by_id(event_id, track_changes)
        if event is None:
            raise NotFoundError(f"event with id {event_id} not found")
        return event

    async def _get_user_or_raise(self, user_id: UUID, track_changes: bool) -> None:
        if await self.repository_manager.user.get_by_id(user_id, track_changes) is None:
            raise NotFoundError(f"user with id {user_id} not found")

    async def _get_participant_or_raise(
        self, event_id: UUID, id: UUID, track_changes: bool
    ) -> Participant:
        participant = await self.repository_manager.participant.get_for_event(
            event_id, id, track_changes
        )
        if participant is None:
            raise NotFoundError(f"participant with id {id} not found")
        return participant
