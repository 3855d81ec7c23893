"""Entity: Banner."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator

from src.commerce.entities.core._base import Entity


class BannerPosition(StrEnum):
    MAIN = "Main Banner"
    POPUP = "Popup Banner"
    FOOTER = "Footer Banner"
    MAIN_SECTION = "Main Section Banner"
    DEAL_OF_THE_DAY = "Deal of the Day"
    FLASH_DEALS = "Flash Deals"


class ResourceType(StrEnum):
    PRODUCT = "Product"
    CATEGORY = "Category"
    EXTERNAL = "External"
    NONE = "None"


# Older storefront builds still ask for these slot names
LEGACY_POSITIONS: dict[str, BannerPosition] = {
    "HOME_MAIN_SLIDER": BannerPosition.MAIN,
    "POPUP_ON_FIRST_VISIT": BannerPosition.POPUP,
}


def normalize_position(value: str) -> BannerPosition:
    """Map a position name, including legacy slot names, onto a ``BannerPosition``."""
    if value in LEGACY_POSITIONS:
        return LEGACY_POSITIONS[value]
    return BannerPosition(value)


class Banner(Entity):
    """Promotional image placed in one storefront slot."""

    position: BannerPosition
    resource_type: ResourceType = ResourceType.NONE
    resource_id: str | None = None
    resource_name: str | None = None
    image_url: str = Field(min_length=1)
    is_active: bool = True
    category_name: str | None = None
    title: str | None = None
    subtitle: str | None = None

    @field_validator("position", mode="before")
    @classmethod
    def _map_legacy_position(cls, value: Any) -> Any:
        if isinstance(value, str) and value in LEGACY_POSITIONS:
            return LEGACY_POSITIONS[value]
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def image(self) -> str:
        """Alias of ``image_url`` kept for storefront components."""
        return self.image_url


class BannerUpdate(BaseModel):
    position: BannerPosition | None = None
    resource_type: ResourceType | None = None
    resource_id: str | None = None
    resource_name: str | None = None
    image_url: str | None = Field(default=None, min_length=1)
    is_active: bool | None = None
    category_name: str | None = None
    title: str | None = None
    subtitle: str | None = None

    @field_validator("position", mode="before")
    @classmethod
    def _map_legacy_position(cls, value: Any) -> Any:
        if isinstance(value, str) and value in LEGACY_POSITIONS:
            return LEGACY_POSITIONS[value]
        return value
