"""Entity package: Banner."""

from .entity import (
    LEGACY_POSITIONS,
    Banner,
    BannerPosition,
    BannerUpdate,
    ResourceType,
    normalize_position,
)
from .repository import BannerRepository
from .table import BannerTable

__all__ = [
    "LEGACY_POSITIONS",
    "Banner",
    "BannerPosition",
    "BannerRepository",
    "BannerTable",
    "BannerUpdate",
    "ResourceType",
    "normalize_position",
]
