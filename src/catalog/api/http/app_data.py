from dataclasses import dataclass

from src.catalog.core.services import DbSessionService
from src.catalog.core.storage.book_storage import InMemoryBookStorage


@dataclass
class ApplicationDependencies:
    """Process-wide collaborators, built once at startup.

    Exactly one of ``database_service`` and ``memory_storage`` backs the catalog,
    depending on ``config.storage.backend``.
    """

    database_service: DbSessionService | None = None
    memory_storage: InMemoryBookStorage | None = None

    def close(self) -> None:
        if self.database_service is not None:
            self.database_service.dispose()
