from dataclasses import dataclass

from src.commerce.core.services import (
    DbSessionService,
    ImageSearchService,
    JwtService,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_service: JwtService
    image_search_service: ImageSearchService
