"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.events_api.api.dependencies.repositories import RepositoryManagerDep
from src.events_api.core.security import (
    AccessTokenProvider,
    PasswordHasher,
    RefreshTokenProvider,
    get_access_token_provider,
    get_password_hasher,
    get_refresh_token_provider,
)
from src.events_api.services import (
    EventService,
    ParticipantService,
    RefreshTokenService,
    UserService,
)

PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]
AccessTokenProviderDep = Annotated[AccessTokenProvider, Depends(get_access_token_provider)]
RefreshTokenProviderDep = Annotated[RefreshTokenProvider, Depends(get_refresh_token_provider)]


def get_refresh_token_service(
    repository_manager: RepositoryManagerDep,
    refresh_token_provider: RefreshTokenProviderDep,
) -> RefreshTokenService:
    """Get refresh token service."""
    return RefreshTokenService(repository_manager, refresh_token_provider)


RefreshTokenServiceDep = Annotated[RefreshTokenService, Depends(get_refresh_token_service)]


def get_user_service(
    repository_manager: RepositoryManagerDep,
    password_hasher: PasswordHasherDep,
    access_token_provider: AccessTokenProviderDep,
    refresh_token_provider: RefreshTokenProviderDep,
    refresh_token_service: RefreshTokenServiceDep,
) -> UserService:
    """Get user service with its providers."""
    return UserService(
        repository_manager,
        password_hasher,
        access_token_provider,
        refresh_token_provider,
        refresh_token_service,
    )


def get_event_service(repository_manager: RepositoryManagerDep) -> EventService:
    """Get event service."""
    return EventService(repository_manager)


def get_participant_service(repository_manager: RepositoryManagerDep) -> ParticipantService:
    """Get participant service."""
    return ParticipantService(repository_manager)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
EventServiceDep = Annotated[EventService, Depends(get_event_service)]
ParticipantServiceDep = Annotated[ParticipantService, Depends(get_participant_service)]
