from dataclasses import dataclass

from src.app.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
