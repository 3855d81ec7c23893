"""Entity: DealsConfig."""

from datetime import UTC, datetime, timedelta

from pydantic import AwareDatetime, BaseModel, Field, field_validator

from src.commerce.entities.core._base import Entity, utcnow


def _ensure_aware(value: datetime) -> datetime:
    # SQLite hands datetimes back without tzinfo; they were stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class DealsConfig(Entity):
    """Storefront deal slots: the flash deal countdown and curated product lists."""

    flash_deal_target_date: datetime = Field(
        default_factory=lambda: utcnow() + timedelta(hours=24)
    )
    flash_deal_image: str = ""
    featured_deal_product_ids: list[str] = Field(default_factory=list)
    deal_of_the_day_product_ids: list[str] = Field(default_factory=list)

    @field_validator("flash_deal_target_date")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return _ensure_aware(value).astimezone(UTC)


class DealsConfigUpdate(BaseModel):
    flash_deal_target_date: AwareDatetime | None = None
    flash_deal_image: str | None = None
    featured_deal_product_ids: list[str] | None = None
    deal_of_the_day_product_ids: list[str] | None = None


class Countdown(BaseModel):
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0


def countdown(target: datetime, now: datetime | None = None) -> Countdown:
    """Time left until ``target``, all zero once it has passed."""
    remaining = int((_ensure_aware(target) - (now or utcnow())).total_seconds())
    if remaining <= 0:
        return Countdown()
    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)
    return Countdown(days=days, hours=hours, minutes=minutes, seconds=seconds)
