"""VideoFind database table model."""

from src.commerce.entities.core._base import EntityTable


class VideoFindTable(EntityTable, table=True):
    __tablename__ = "video_finds"

    title: str
    price: float
    original_price: float
    video_url: str
    views: str = "0"
