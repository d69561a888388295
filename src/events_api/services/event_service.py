from uuid import UUID

from src.events_api.core.exceptions import NotFoundError
from src.events_api.core.logging import get_logger
from src.events_api.models import Event
from src.events_api.repositories import RepositoryManager
from src.events_api.schemas.event import EventRead, EventRequest
from src.events_api.schemas.pagination import Paging
from src.events_api.services.mappers import apply_event_request, event_from_request, event_to_read

logger = get_logger(__name__)


class EventService:
    """Event management service."""

    def __init__(self, repository_manager: RepositoryManager):
        self.repository_manager = repository_manager

    async def get_all_events(self, paging: Paging, track_changes: bool = False) -> list[EventRead]:
        events = await self.repository_manager.event.get_all(paging, track_changes)
        return [event_to_read(event) for event in events]

    async def get_event_by_id(self, event_id: UUID, track_changes: bool = False) -> EventRead:
        event = await self.get_event_or_raise(event_id, track_changes)
        return event_to_read(event)

    async def create_event(self, data: EventRequest) -> EventRead:
        event = event_from_request(data)
        self.repository_manager.event.create(event)
        await self.repository_manager.save()

        logger.info("Event created", event_id=str(event.id))
        return event_to_read(event)

    async def update_event(
        self, event_id: UUID, data: EventRequest, track_changes: bool = True
    ) -> EventRead:
        event = await self.get_event_or_raise(event_id, track_changes)
        apply_event_request(data, event)
        self.repository_manager.event.update(event)
        await self.repository_manager.save()
        return event_to_read(event)

    async def delete_event(self, event_id: UUID, track_changes: bool = True) -> None:
        event = await self.get_event_or_raise(event_id, track_changes)
        await self.repository_manager.participant.delete_for_event(event_id)
        await self.repository_manager.event.delete(event)
        await self.repository_manager.save()
        logger.info("Event deleted", event_id=str(event_id))

    async def get_event_or_raise(self, event_id: UUID, track_changes: bool = False) -> Event:
        """Get event by ID. Raises NotFoundError if missing."""
        event = await self.repository_manager.event.get_by_id(event_id, track_changes)
        if event is None:
            raise NotFoundError(f"event with id {event_id} not found")
        return event
