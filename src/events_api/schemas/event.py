from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, HttpUrl


class EventRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=2000)
    starts_at: datetime
    location: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=50)
    max_participants: int = Field(ge=1)
    image_url: HttpUrl | None = None


class EventRead(BaseModel):
    id: UUID
    name: str
    description: str
    starts_at: datetime
    location: str
    category: str
    max_participants: int
    image_url: str | None
    created_at: datetime
