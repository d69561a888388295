"""Authentication endpoints."""

from fastapi import APIRouter, Request, Response, status

from src.events_api.api.dependencies import CurrentUser, UserServiceDep
from src.events_api.core.config import get_settings
from src.events_api.core.rate_limit import limiter
from src.events_api.core.security import IssuedRefreshToken
from src.events_api.models.base import utc_now
from src.events_api.schemas.auth import TokenResponse
from src.events_api.schemas.user import UserLoginRequest, UserRead, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["auth"])

REFRESH_COOKIE_PATH = "/api/v1/auth"


def _set_refresh_cookie(response: Response, refresh_token: IssuedRefreshToken) -> None:
    settings = get_settings()
    max_age = int((refresh_token.expires_at - utc_now()).total_seconds())
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=refresh_token.value,
        max_age=max(max_age, 0),
        path=REFRESH_COOKIE_PATH,
        httponly=True,
        secure=settings.refresh_cookie_secure,
        samesite="strict",
    )


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Username already taken"}},
)
@limiter.limit("10/hour")
async def register(
    request: Request, register_data: UserRegisterRequest, service: UserServiceDep
) -> UserRead:
    """Register a new user with the default `user` role."""
    return await service.register(register_data)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"description": "Invalid credentials"}},
)
@limiter.limit("5/minute")
async def login(
    request: Request,
    response: Response,
    login_data: UserLoginRequest,
    service: UserServiceDep,
) -> TokenResponse:
    """Authenticate user.

    Returns the access token in the body and sets the refresh token as an
    HTTP-only cookie. Any previous refresh token of the user stops working.
    """
    access_token, refresh_token = await service.login(login_data)
    _set_refresh_cookie(response, refresh_token)
    return TokenResponse(access_token=access_token)


@router.post(
    "/refresh",
    response_model=TokenResponse,
    responses={401: {"description": "Invalid or expired refresh token"}},
)
@limiter.limit("10/minute")
async def refresh(request: Request, response: Response, service: UserServiceDep) -> TokenResponse:
    """Exchange the refresh token cookie for a new access token and cookie."""
    settings = get_settings()
    access_token, refresh_token = await service.refresh_tokens(
        request.cookies.get(settings.refresh_cookie_name)
    )
    _set_refresh_cookie(response, refresh_token)
    return TokenResponse(access_token=access_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(current_user: CurrentUser, service: UserServiceDep) -> Response:
    """Revoke the current user's refresh token and clear the cookie."""
    await service.logout(current_user.id)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(get_settings().refresh_cookie_name, path=REFRESH_COOKIE_PATH)
    return response
