"""User management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from src.events_api.api.dependencies import AdminUser, CurrentUser, UserServiceDep
from src.events_api.schemas.pagination import PaginatedResponse, Paging
from src.events_api.schemas.user import GrantRoleRequest, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
async def get_current_user(current_user: CurrentUser) -> UserRead:
    """Get current authenticated user."""
    return current_user


@router.get("", response_model=PaginatedResponse[UserRead])
async def list_users(
    admin: AdminUser,
    service: UserServiceDep,
    paging: Annotated[Paging, Query()],
) -> PaginatedResponse[UserRead]:
    """List users one page at a time. Admin only."""
    users = await service.get_all_users(paging)
    return PaginatedResponse(
        items=users, page_number=paging.page_number, page_size=paging.page_size
    )


@router.get(
    "/{user_id}",
    response_model=UserRead,
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: UUID, admin: AdminUser, service: UserServiceDep) -> UserRead:
    """Get a user by ID. Admin only."""
    return await service.get_user_by_id(user_id)


@router.put(
    "/{user_id}/role",
    response_model=UserRead,
    responses={
        400: {"description": "Unknown role"},
        404: {"description": "User not found"},
    },
)
async def grant_role(
    user_id: UUID,
    data: GrantRoleRequest,
    admin: AdminUser,
    service: UserServiceDep,
) -> UserRead:
    """Grant a role (admin, user or manager, any case) to a user. Admin only."""
    return await service.grant_role(user_id, data.role)
