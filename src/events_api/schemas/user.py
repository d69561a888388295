from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.events_api.models.enums import Role


class UserRegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)


class UserLoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=100)


class UserRead(BaseModel):
    id: UUID
    username: str
    email: str
    role: Role
    created_at: datetime


class GrantRoleRequest(BaseModel):
    """Role name, matched case-insensitively against the known roles."""

    role: str = Field(min_length=1, max_length=20)
