"""Event and participant models."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.events_api.models.base import UTCDateTime, utc_now


class Event(SQLModel, table=True):
    """A scheduled event users can register for."""

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    description: str = Field(default="", max_length=2000)
    starts_at: datetime = Field(index=True, sa_type=UTCDateTime)
    location: str = Field(max_length=255)
    category: str = Field(max_length=50, index=True)
    max_participants: int
    image_url: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)


class Participant(SQLModel, table=True):
    """A user's registration for an event."""

    __tablename__ = "participants"
    __table_args__ = (UniqueConstraint("event_id", "user_id", name="uq_participant_event_user"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    event_id: UUID = Field(foreign_key="events.id", index=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    birth_date: date
    email: str = Field(max_length=255)
    registered_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
