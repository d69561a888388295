from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class ParticipantRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    birth_date: date
    email: EmailStr


class ParticipantRead(BaseModel):
    id: UUID
    event_id: UUID
    user_id: UUID
    first_name: str
    last_name: str
    birth_date: date
    email: str
    registered_at: datetime
