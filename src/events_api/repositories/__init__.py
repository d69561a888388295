"""Repository layer - data access abstraction."""

from src.events_api.repositories.base import BaseRepository
from src.events_api.repositories.event import EventRepository, ParticipantRepository
from src.events_api.repositories.manager import (
    PARTICIPANT_TAKEN,
    REFRESH_TOKEN_TAKEN,
    USERNAME_TAKEN,
    RepositoryManager,
    is_unique_violation,
)
from src.events_api.repositories.token import RefreshTokenRepository
from src.events_api.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "RepositoryManager",
    "is_unique_violation",
    "PARTICIPANT_TAKEN",
    "REFRESH_TOKEN_TAKEN",
    "USERNAME_TAKEN",
    # Repositories
    "EventRepository",
    "ParticipantRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
