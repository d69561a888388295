from src.events_api.schemas.auth import TokenResponse
from src.events_api.schemas.event import EventRead, EventRequest
from src.events_api.schemas.pagination import PaginatedResponse, Paging
from src.events_api.schemas.participant import ParticipantRead, ParticipantRequest
from src.events_api.schemas.user import (
    GrantRoleRequest,
    UserLoginRequest,
    UserRead,
    UserRegisterRequest,
)

__all__ = [
    "EventRead",
    "EventRequest",
    "GrantRoleRequest",
    "PaginatedResponse",
    "Paging",
    "ParticipantRead",
    "ParticipantRequest",
    "TokenResponse",
    "UserLoginRequest",
    "UserRead",
    "UserRegisterRequest",
]
