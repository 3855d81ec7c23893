"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business rules
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .catalog.category import Category, CategoryRepository, CategoryTable
from .catalog.product import Product, ProductRepository, ProductTable
from .marketing.banner import Banner, BannerRepository, BannerTable
from .marketing.deals import DealsConfig, DealsConfigRepository, DealsConfigTable
from .media.video_find import VideoFind, VideoFindRepository, VideoFindTable
from .service_request import (
    ServiceRequest,
    ServiceRequestRepository,
    ServiceRequestTable,
)
from .settings.app_settings import AppSettings, AppSettingsRepository, AppSettingsTable

__all__ = [
    "AppSettings",
    "AppSettingsRepository",
    "AppSettingsTable",
    "Banner",
    "BannerRepository",
    "BannerTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "DealsConfig",
    "DealsConfigRepository",
    "DealsConfigTable",
    "Product",
    "ProductRepository",
    "ProductTable",
    "ServiceRequest",
    "ServiceRequestRepository",
    "ServiceRequestTable",
    "VideoFind",
    "VideoFindRepository",
    "VideoFindTable",
]
