"""User model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.events_api.models.base import UTCDateTime, utc_now
from src.events_api.models.enums import Role


class User(SQLModel, table=True):
    """Registered user. Username is unique; role is a Role value."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(max_length=50, unique=True, index=True)
    email: str = Field(max_length=255, index=True)
    hashed_password: str = Field(max_length=255)
    role: str = Field(default=Role.USER.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
