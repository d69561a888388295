"""Field-by-field mapping between request/response schemas and models."""

from datetime import UTC, datetime
from uuid import UUID

from src.events_api.models import Event, Participant, Role, User
from src.events_api.schemas.event import EventRead, EventRequest
from src.events_api.schemas.participant import ParticipantRead, ParticipantRequest
from src.events_api.schemas.user import UserRead, UserRegisterRequest


def _as_utc(value: datetime) -> datetime:
    """Naive input is taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def user_from_register(data: UserRegisterRequest) -> User:
    """Build a User from a registration request. Password hash and role are set by the caller."""
    return User(username=data.username, email=str(data.email))


def user_to_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        username=user.username,
        email=user.email,
        role=Role(user.role),
        created_at=user.created_at,
    )


def event_from_request(data: EventRequest) -> Event:
    event = Event()
    apply_event_request(data, event)
    return event


def apply_event_request(data: EventRequest, event: Event) -> Event:
    event.name = data.name
    event.description = data.description
    event.starts_at = _as_utc(data.starts_at)
    event.location = data.location
    event.category = data.category
    event.max_participants = data.max_participants
    event.image_url = str(data.image_url) if data.image_url else None
    return event


def event_to_read(event: Event) -> EventRead:
    return EventRead(
        id=event.id,
        name=event.name,
        description=event.description,
        starts_at=event.starts_at,
        location=event.location,
        category=event.category,
        max_participants=event.max_participants,
        image_url=event.image_url,
        created_at=event.created_at,
    )


def participant_from_request(
    data: ParticipantRequest, event_id: UUID, user_id: UUID
) -> Participant:
    participant = Participant(event_id=event_id, user_id=user_id)
    apply_participant_request(data, participant)
    return participant


def apply_participant_request(data: ParticipantRequest, participant: Participant) -> Participant:
    participant.first_name = data.first_name
    participant.last_name = data.last_name
    participant.birth_date = data.birth_date
    participant.email = str(data.email)
    return participant


def participant_to_read(participant: Participant) -> ParticipantRead:
    return ParticipantRead(
        id=participant.id,
        event_id=participant.event_id,
        user_id=participant.user_id,
        first_name=participant.first_name,
        last_name=participant.last_name,
        birth_date=participant.birth_date,
        email=participant.email,
        registered_at=participant.registered_at,
    )
