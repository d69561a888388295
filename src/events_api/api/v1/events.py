"""Event endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.events_api.api.dependencies import CurrentUser, EventServiceDep, ManagerUser
from src.events_api.schemas.event import EventRead, EventRequest
from src.events_api.schemas.pagination import PaginatedResponse, Paging

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=PaginatedResponse[EventRead])
async def list_events(
    current_user: CurrentUser,
    service: EventServiceDep,
    paging: Annotated[Paging, Query()],
) -> PaginatedResponse[EventRead]:
    """List events, soonest first."""
    events = await service.get_all_events(paging)
    return PaginatedResponse(
        items=events, page_number=paging.page_number, page_size=paging.page_size
    )


@router.get("/{event_id}", response_model=EventRead)
async def get_event(
    event_id: UUID, current_user: CurrentUser, service: EventServiceDep
) -> EventRead:
    return await service.get_event_by_id(event_id)


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(
    data: EventRequest, manager: ManagerUser, service: EventServiceDep
) -> EventRead:
    """Create an event. Admin or manager only."""
    return await service.create_event(data)


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: UUID, data: EventRequest, manager: ManagerUser, service: EventServiceDep
) -> EventRead:
    """Replace an event's details. Admin or manager only."""
    return await service.update_event(event_id, data)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: UUID, manager: ManagerUser, service: EventServiceDep) -> None:
    """Delete an event and its registrations. Admin or manager only."""
    await service.delete_event(event_id)
