"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Auth
from src.events_api.api.dependencies.auth import (
    AdminUser,
    CurrentUser,
    ManagerUser,
    get_current_user,
    require_roles,
)

# Database
from src.events_api.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.events_api.api.dependencies.repositories import (
    RepositoryManagerDep,
    get_repository_manager,
)

# Services
from src.events_api.api.dependencies.services import (
    AccessTokenProviderDep,
    EventServiceDep,
    ParticipantServiceDep,
    PasswordHasherDep,
    RefreshTokenProviderDep,
    RefreshTokenServiceDep,
    UserServiceDep,
    get_event_service,
    get_participant_service,
    get_refresh_token_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AdminUser",
    "CurrentUser",
    "ManagerUser",
    "get_current_user",
    "require_roles",
    # Repositories
    "RepositoryManagerDep",
    "get_repository_manager",
    # Services
    "AccessTokenProviderDep",
    "EventServiceDep",
    "ParticipantServiceDep",
    "PasswordHasherDep",
    "RefreshTokenProviderDep",
    "RefreshTokenServiceDep",
    "UserServiceDep",
    "get_event_service",
    "get_participant_service",
    "get_refresh_token_service",
    "get_user_service",
]
