from dataclasses import dataclass

from src.book_manager.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
