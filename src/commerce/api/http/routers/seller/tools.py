"""Seller tools: product image lookup."""

from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel
from sqlmodel import Session

from src.commerce.api.http.deps import (
    get_db_session,
    get_image_search_service,
    get_settings_repository,
    require_seller,
)
from src.commerce.api.http.middleware.limiter import rate_limit
from src.commerce.api.http.schemas import failure, ok
from src.commerce.core.errors import InvalidRequestError
from src.commerce.core.services import ImageSearchCredentials, ImageSearchService
from src.commerce.entities.settings.app_settings import AppSettingsRepository
from src.commerce.runtime.context import get_config

router = APIRouter(prefix="/tools")


class ImageSearchRequest(BaseModel):
    query: str = ""


@router.post("/search-image", dependencies=[Depends(require_seller), Depends(rate_limit())])
async def search_image(
    body: ImageSearchRequest,
    session: Session = Depends(get_db_session),
    settings: AppSettingsRepository = Depends(get_settings_repository),
    search_service: ImageSearchService = Depends(get_image_search_service),
) -> dict:
    query = body.query.strip()
    if not query:
        raise InvalidRequestError("Search query is required")

    stored = settings.get_or_create()
    session.commit()
    credentials = ImageSearchCredentials.resolve(
        get_config().image_search,
        stored_api_key=stored.gemini_api_key,
        stored_cx_id=stored.google_cx_id,
    )

    result = await search_service.search(query, credentials)
    if not result.found:
        logger.info("No image found for {!r}", query)
        return failure(result.message)
    return ok({"image_url": result.image_url, "provider": result.provider}, result.message)
