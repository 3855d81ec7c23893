"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .image_search_service import ImageSearchCredentials, ImageSearchService
from .jwt_service import JwtService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "ImageSearchCredentials",
    "ImageSearchService",
    "JwtService",
]
