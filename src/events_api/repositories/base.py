"""Base repository with common CRUD operations."""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.events_api.schemas.pagination import Paging


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    is done through RepositoryManager.save() in the service layer.

    Every read takes a track_changes flag. Untracked entities are detached
    from the session after loading, so mutating them does nothing unless
    they are passed back through update().
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _track[T](self, entity: T, track_changes: bool) -> T:
        if entity is not None and not track_changes:
            self.session.expunge(entity)
        return entity

    def _track_all(self, entities: list[ModelType], track_changes: bool) -> list[ModelType]:
        if not track_changes:
            for entity in entities:
                self.session.expunge(entity)
        return entities

    async def _first(self, query: Any, track_changes: bool) -> ModelType | None:
        result = await self.session.execute(query)
        return self._track(result.scalar_one_or_none(), track_changes)

    async def get_by_id(self, id: UUID, track_changes: bool = False) -> ModelType | None:
        """Get a record by its primary key."""
        return await self._first(
            select(self.model).where(self.model.id == id),  # type: ignore[attr-defined]
            track_changes,
        )

    def create(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    def update(self, entity: ModelType) -> None:
        """Attach a possibly detached entity so its changes are written on save."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion on save."""
        await self.session.delete(entity)

    async def paginate(
        self,
        query: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        paging: Paging,
        order_by: Any,
        track_changes: bool = False,
    ) -> list[ModelType]:
        """Execute page-number pagination on a query.

        Args:
            query: The base SQLAlchemy query to paginate
            paging: Requested page number and size
            order_by: Column (or expression) giving a stable order
            track_changes: Keep the loaded entities attached to the session

        Returns:
            The items of the requested page, possibly empty.
        """
        query = query.order_by(order_by).offset(paging.offset).limit(paging.page_size)
        result = await self.session.execute(query)
        return self._track_all(list(result.scalars().all()), track_changes)
