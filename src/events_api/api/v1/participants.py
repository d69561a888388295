"""Participant endpoints, nested under an event."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.events_api.api.dependencies import CurrentUser, ManagerUser, ParticipantServiceDep
from src.events_api.schemas.pagination import PaginatedResponse, Paging
from src.events_api.schemas.participant import ParticipantRead, ParticipantRequest

router = APIRouter(prefix="/events/{event_id}/participants", tags=["participants"])


@router.post(
    "",
    response_model=ParticipantRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Event not found"},
        409: {"description": "Already registered or event full"},
    },
)
async def register_for_event(
    event_id: UUID,
    data: ParticipantRequest,
    current_user: CurrentUser,
    service: ParticipantServiceDep,
) -> ParticipantRead:
    """Register the current user for an event."""
    return await service.create_participant(event_id, current_user.id, data)


@router.get("", response_model=PaginatedResponse[ParticipantRead])
async def list_participants(
    event_id: UUID,
    current_user: CurrentUser,
    service: ParticipantServiceDep,
    paging: Annotated[Paging, Query()],
) -> PaginatedResponse[ParticipantRead]:
    participants = await service.get_all_participants(event_id, paging)
    return PaginatedResponse(
        items=participants, page_number=paging.page_number, page_size=paging.page_size
    )


@router.get("/{participant_id}", response_model=ParticipantRead)
async def get_participant(
    event_id: UUID,
    participant_id: UUID,
    current_user: CurrentUser,
    service: ParticipantServiceDep,
) -> ParticipantRead:
    return await service.get_participant_by_id(event_id, participant_id)


@router.put("/{participant_id}", response_model=ParticipantRead)
async def update_participant(
    event_id: UUID,
    participant_id: UUID,
    data: ParticipantRequest,
    manager: ManagerUser,
    service: ParticipantServiceDep,
) -> ParticipantRead:
    """Edit a registration. Admin or manager only."""
    return await service.update_participant(event_id, participant_id, data)


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_participant(
    event_id: UUID,
    participant_id: UUID,
    manager: ManagerUser,
    service: ParticipantServiceDep,
) -> None:
    """Remove a registration. Admin or manager only."""
    await service.delete_participant(event_id, participant_id)
