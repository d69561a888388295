"""User service - registration, login, token refresh and role grants."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.events_api.core.exceptions import (
    AlreadyExistsError,
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
)
from src.events_api.core.logging import get_logger
from src.events_api.core.security import (
    AccessTokenProvider,
    IssuedRefreshToken,
    PasswordHasher,
    RefreshTokenProvider,
)
from src.events_api.models import Role, User
from src.events_api.models.base import utc_now
from src.events_api.repositories import USERNAME_TAKEN, RepositoryManager, is_unique_violation
from src.events_api.schemas.pagination import Paging
from src.events_api.schemas.user import UserLoginRequest, UserRead, UserRegisterRequest
from src.events_api.services.mappers import user_from_register, user_to_read
from src.events_api.services.refresh_token_service import RefreshTokenService

logger = get_logger(__name__)

# Same message for unknown username and wrong password
LOGIN_FAILED_MESSAGE = "Failed to login"
REFRESH_FAILED_MESSAGE = "Invalid or expired refresh token"


def parse_role(role: str) -> Role:
    """Match a role name case-insensitively. Raises BadRequestError if unknown."""
    normalized = role.lower()
    try:
        return Role(normalized)
    except ValueError as e:
        raise BadRequestError(f"Role {normalized} doesn't exist") from e


class UserService:
    """Orchestrates credentials, tokens and roles of users.

    Stateless per call. Checks such as username uniqueness are
    check-then-act; the unique constraints in the database are what
    finally decides between two concurrent requests.
    """

    def __init__(
        self,
        repository_manager: RepositoryManager,
        password_hasher: PasswordHasher,
        access_token_provider: AccessTokenProvider,
        refresh_token_provider: RefreshTokenProvider,
        refresh_token_service: RefreshTokenService,
    ):
        self.repository_manager = repository_manager
        self.password_hasher = password_hasher
        self.access_token_provider = access_token_provider
        self.refresh_token_provider = refresh_token_provider
        self.refresh_token_service = refresh_token_service

    async def register(self, data: UserRegisterRequest, track_changes: bool = False) -> UserRead:
        """Register a new user with role `user` and an initial refresh token.

        1. Reject a taken username
        2. Hash the password
        3. Map the request to a User with the hash and default role
        4. Enqueue and flush the user
        5. Enqueue the first refresh token
        6. Commit both in one transaction

        Raises AlreadyExistsError if the username is taken, including when a
        concurrent registration wins the race at commit time.
        """
        existing = await self.repository_manager.user.get_by_username(data.username, track_changes)
        if existing is not None:
            raise AlreadyExistsError(f"user with username {data.username} already exists")

        password_hash = self.password_hasher.generate_hash(data.password)

        user = user_from_register(data)
        user.hashed_password = password_hash
        user.role = Role.USER.value

        self.repository_manager.user.create(user)

        try:
            # The refresh token row references the user row
            await self.repository_manager.flush()
            await self.refresh_token_service.create_refresh_token(user.id)
            await self.repository_manager.save()
        except IntegrityError as e:
            if not is_unique_violation(e, USERNAME_TAKEN):
                raise
            raise AlreadyExistsError(f"user with username {data.username} already exists") from e

        logger.info("User registered", user_id=str(user.id))
        return user_to_read(user)

    async def login(
        self,
        data: UserLoginRequest,
        track_user_changes: bool = False,
        track_refresh_token_changes: bool = True,
    ) -> tuple[str, IssuedRefreshToken]:
        """Authenticate user and return (access_token, refresh_token).

        The new refresh token replaces whatever token the user had before.
        Raises UnauthorizedError with one message for every failure so the
        response does not reveal whether the username exists.
        """
        user = await self.repository_manager.user.get_by_username(
            data.username, track_user_changes
        )

        # Always verify a hash so unknown usernames take as long as bad passwords
        password_hash = user.hashed_password if user else self.password_hasher.dummy_hash
        password_valid = self.password_hasher.verify_password(data.password, password_hash)

        if user is None or not password_valid:
            logger.info("Login failed")
            raise UnauthorizedError(LOGIN_FAILED_MESSAGE)

        access_token, refresh_token = await self._issue_tokens(user, track_refresh_token_changes)
        logger.info("User logged in", user_id=str(user.id))
        return access_token, refresh_token

    async def refresh_tokens(self, refresh_value: str | None) -> tuple[str, IssuedRefreshToken]:
        """Exchange a valid refresh token for a new access + refresh token pair.

        The presented token stops working as soon as the new one is saved.
        """
        if not refresh_value:
            raise UnauthorizedError(REFRESH_FAILED_MESSAGE)

        stored = await self.refresh_token_service.get_by_value(refresh_value)
        if stored is None or stored.is_expired():
            raise UnauthorizedError(REFRESH_FAILED_MESSAGE)

        user = await self.repository_manager.user.get_by_id(stored.user_id)
        if user is None:
            raise UnauthorizedError(REFRESH_FAILED_MESSAGE)

        return await self._issue_tokens(user, track_refresh_token_changes=True)

    async def logout(self, user_id: UUID) -> None:
        """Revoke the user's refresh token, if any."""
        await self.refresh_token_service.revoke_refresh_token(user_id)

    async def grant_role(self, user_id: UUID, role: str, track_changes: bool = True) -> UserRead:
        """Set a user's role. Role names are matched case-insensitively."""
        user = await self._get_user_or_raise(user_id, track_changes)
        verified_role = parse_role(role)

        user.role = verified_role.value
        user.updated_at = utc_now()
        self.repository_manager.user.update(user)
        await self.repository_manager.save()

        logger.info("Role granted", user_id=str(user_id), role=verified_role.value)
        return user_to_read(user)

    async def get_user_by_id(self, user_id: UUID, track_changes: bool = False) -> UserRead:
        user = await self._get_user_or_raise(user_id, track_changes)
        return user_to_read(user)

    async def get_all_users(self, paging: Paging, track_changes: bool = False) -> list[UserRead]:
        users = await self.repository_manager.user.get_all(paging, track_changes)
        return [user_to_read(user) for user in users]

    async def _get_user_or_raise(self, user_id: UUID, track_changes: bool) -> User:
        user = await self.repository_manager.user.get_by_id(user_id, track_changes)
        if user is None:
            raise NotFoundError(f"user with id {user_id} not found")
        return user

    async def _issue_tokens(
        self, user: User, track_refresh_token_changes: bool
    ) -> tuple[str, IssuedRefreshToken]:
        access_token = self.access_token_provider.generate_token(user)
        refresh_token = self.refresh_token_provider.generate_token(user.id)

        await self.refresh_token_service.update_refresh_token(
            user.id,
            refresh_token,
            track_refresh_token_changes,
        )
        return access_token, refresh_token
