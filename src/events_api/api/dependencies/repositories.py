"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.events_api.api.dependencies.db import DBSession
from src.events_api.repositories import RepositoryManager


def get_repository_manager(session: DBSession) -> RepositoryManager:
    """Get repository manager bound to the request session."""
    return RepositoryManager(session)


RepositoryManagerDep = Annotated[RepositoryManager, Depends(get_repository_manager)]
