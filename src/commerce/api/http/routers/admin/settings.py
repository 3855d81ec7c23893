"""Admin store settings: barcode labels, product page sections and image search keys."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session

from src.commerce.api.http.deps import get_db_session, get_settings_repository
from src.commerce.api.http.schemas import ok
from src.commerce.entities.settings.app_settings import (
    AppSettings,
    AppSettingsRepository,
    BarcodeSettingsUpdate,
    DisplaySection,
)
from src.commerce.runtime.context import get_config

router = APIRouter(prefix="/settings")


class ImageSearchSettings(BaseModel):
    gemini_api_key: str | None = None
    google_cx_id: str | None = None


def _image_search_view(settings: AppSettings) -> dict:
    # The API key is write-only; callers only learn whether one is stored
    return {
        "has_api_key": bool(settings.gemini_api_key),
        "google_cx_id": settings.google_cx_id or get_config().image_search.google_cx_id,
    }


@router.get("/barcode")
def get_barcode_settings(
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
) -> dict:
    current = settings.get_or_create()
    session.commit()
    return ok(current.barcode)


@router.put("/barcode")
def update_barcode_settings(
    update: BarcodeSettingsUpdate,
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
) -> dict:
    updated = settings.update_barcode(update)
    session.commit()
    return ok(updated.barcode, "Barcode settings saved")


@router.get("/product-display")
def get_product_display(
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
) -> dict:
    current = settings.get_or_create()
    session.commit()
    return ok(current.product_display)


@router.put("/product-display")
def update_product_display(
    sections: list[DisplaySection],
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
) -> dict:
    updated = settings.update_product_display(sections)
    session.commit()
    return ok(updated.product_display, "Product display settings saved")


@router.get("/image-search")
def get_image_search_settings(
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
) -> dict:
    current = settings.get_or_create()
    session.commit()
    return ok(_image_search_view(current))


@router.put("/image-search")
def update_image_search_settings(
    body: ImageSearchSettings,
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
) -> dict:
    updated = settings.update_image_search(body.gemini_api_key, body.google_cx_id)
    session.commit()
    return ok(_image_search_view(updated), "Image search settings saved")
