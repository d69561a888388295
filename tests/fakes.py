"""In-memory repositories with the same interface as the SQL ones.

Rows are stored on create() and kept until delete(). flush() and save()
only count calls; save() raises the error queued with fail_next_save().
The SQL behaviour these fakes skip is covered in tests/integration.
"""

from typing import Any
from uuid import UUID

from src.events_api.models import Event, Participant, RefreshToken, User
from src.events_api.schemas.pagination import Paging


class FakeRepository[ModelType]:
    def __init__(self) -> None:
        self.rows: dict[UUID, ModelType] = {}

    async def get_by_id(self, id: UUID, track_changes: bool = False) -> ModelType | None:
        return self.rows.get(id)

    def create(self, entity: Any) -> None:
        self.rows[entity.id] = entity

    def update(self, entity: Any) -> None:
        self.rows[entity.id] = entity

    async def delete(self, entity: Any) -> None:
        self.rows.pop(entity.id, None)

    def _page(self, items: list[ModelType], paging: Paging) -> list[ModelType]:
        return items[paging.offset : paging.offset + paging.page_size]


class FakeUserRepository(FakeRepository[User]):
    async def get_by_username(self, username: str, track_changes: bool = False) -> User | None:
        return next((u for u in self.rows.values() if u.username == username), None)

    async def get_all(self, paging: Paging, track_changes: bool = False) -> list[User]:
        return self._page(sorted(self.rows.values(), key=lambda u: u.username), paging)


class FakeRefreshTokenRepository(FakeRepository[RefreshToken]):
    async def get_by_user_id(
        self, user_id: UUID, track_changes: bool = False
    ) -> RefreshToken | None:
        return next((t for t in self.rows.values() if t.user_id == user_id), None)

    async def get_by_hash(
        self, token_hash: str, track_changes: bool = False
    ) -> RefreshToken | None:
        return next((t for t in self.rows.values() if t.token_hash == token_hash), None)


class FakeEventRepository(FakeRepository[Event]):
    async def get_all(self, paging: Paging, track_changes: bool = False) -> list[Event]:
        return self._page(sorted(self.rows.values(), key=lambda e: e.starts_at), paging)


class FakeParticipantRepository(FakeRepository[Participant]):
    def _for_event(self, event_id: UUID) -> list[Participant]:
        return [p for p in self.rows.values() if p.event_id == event_id]

    async def get_all(
        self, event_id: UUID, paging: Paging, track_changes: bool = False
    ) -> list[Participant]:
        return self._page(
            sorted(self._for_event(event_id), key=lambda p: p.registered_at), paging
        )

    async def get_for_event(
        self, event_id: UUID, id: UUID, track_changes: bool = False
    ) -> Participant | None:
        participant = self.rows.get(id)
        if participant is None or participant.event_id != event_id:
            return None
        return participant

    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID, track_changes: bool = False
    ) -> Participant | None:
        return next((p for p in self._for_event(event_id) if p.user_id == user_id), None)

    async def count_for_event(self, event_id: UUID) -> int:
        return len(self._for_event(event_id))

    async def delete_for_event(self, event_id: UUID) -> int:
        doomed = self._for_event(event_id)
        for participant in doomed:
            del self.rows[participant.id]
        return len(doomed)


class FakeRepositoryManager:
    def __init__(self) -> None:
        self.user = FakeUserRepository()
        self.refresh_token = FakeRefreshTokenRepository()
        self.event = FakeEventRepository()
        self.participant = FakeParticipantRepository()
        self.saves = 0
        self.flushes = 0
        self._save_error: Exception | None = None

    def fail_next_save(self, error: Exception) -> None:
        self._save_error = error

    async def save(self) -> None:
        if self._save_error is not None:
            error, self._save_error = self._save_error, None
            raise error
        self.saves += 1

    async def flush(self) -> None:
        self.flushes += 1
