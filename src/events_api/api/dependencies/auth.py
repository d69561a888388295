"""Authentication and authorization dependencies."""

from collections.abc import Awaitable, Callable
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.events_api.api.dependencies.services import AccessTokenProviderDep, UserServiceDep
from src.events_api.core.exceptions import NotFoundError
from src.events_api.core.logging import bind_user_context
from src.events_api.models import Role
from src.events_api.schemas.user import UserRead


async def get_current_user(
    user_service: UserServiceDep,
    access_token_provider: AccessTokenProviderDep,
    authorization: Annotated[str | None, Header()] = None,
) -> UserRead:
    """Validate the bearer access token and return the user it names.

    The role is read from the database, not from the token, so a role
    change applies to the next request even while old tokens are valid.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = access_token_provider.decode_token(authorization[7:])
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    try:
        user = await user_service.get_user_by_id(user_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    bind_user_context(user.id, user.role.value, user.email)
    return user


CurrentUser = Annotated[UserRead, Depends(get_current_user)]


def require_roles(*roles: Role) -> Callable[[UserRead], Awaitable[UserRead]]:
    """Build a dependency that only lets users with one of roles through."""

    async def dependency(current_user: CurrentUser) -> UserRead:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role for this operation",
            )
        return current_user

    return dependency


AdminUser = Annotated[UserRead, Depends(require_roles(Role.ADMIN))]
ManagerUser = Annotated[UserRead, Depends(require_roles(Role.ADMIN, Role.MANAGER))]
