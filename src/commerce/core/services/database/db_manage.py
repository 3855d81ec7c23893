"""Schema management for the commerce database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.commerce.core.services.database.db_session import build_engine
from src.commerce.runtime.context import get_config


def register_tables() -> None:
    """Import every table model so that it is registered on the metadata."""
    from src.commerce.entities.catalog.category import CategoryTable  # noqa: F401
    from src.commerce.entities.catalog.product import ProductTable  # noqa: F401
    from src.commerce.entities.marketing.banner import BannerTable  # noqa: F401
    from src.commerce.entities.marketing.deals import DealsConfigTable  # noqa: F401
    from src.commerce.entities.media.video_find import VideoFindTable  # noqa: F401
    from src.commerce.entities.service_request import ServiceRequestTable  # noqa: F401
    from src.commerce.entities.settings.app_settings import AppSettingsTable  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine or build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables."""
        register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("All database tables dropped.")
