"""VideoFind data access."""

from src.commerce.entities.core.repository import EntityRepository

from .entity import VideoFind
from .table import VideoFindTable


class VideoFindRepository(EntityRepository[VideoFind, VideoFindTable]):
    entity_type = VideoFind
    table_type = VideoFindTable
    resource_name = "Video"

    def feed(self) -> list[VideoFind]:
        """Public feed, newest first."""
        return self.list_all(newest_first=True)
