"""Entity: VideoFind."""

from pydantic import BaseModel, Field

from src.commerce.entities.core._base import Entity


class VideoFind(Entity):
    """Short product video shown in the storefront discovery feed."""

    title: str = Field(min_length=1)
    price: float = Field(ge=0)
    original_price: float = Field(ge=0)
    video_url: str = Field(min_length=1)
    views: str = "0"


class VideoFindUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    original_price: float | None = Field(default=None, ge=0)
    video_url: str | None = Field(default=None, min_length=1)
    views: str | None = None
