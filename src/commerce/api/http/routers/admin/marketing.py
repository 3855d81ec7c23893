"""Admin storefront marketing: banners, deals and video finds."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.commerce.api.http.deps import (
    get_banner_repository,
    get_db_session,
    get_deals_repository,
    get_video_find_repository,
)
from src.commerce.api.http.schemas import ok, ok_list
from src.commerce.core.errors import InvalidRequestError, NotFoundError
from src.commerce.entities.marketing.banner import (
    Banner,
    BannerRepository,
    BannerUpdate,
    normalize_position,
)
from src.commerce.entities.marketing.deals import (
    DealsConfigRepository,
    DealsConfigUpdate,
)
from src.commerce.entities.media.video_find import (
    VideoFind,
    VideoFindRepository,
    VideoFindUpdate,
)
from src.commerce.runtime.context import get_config

router = APIRouter()


# --- Banners ---
@router.get("/banners")
def list_banners(
    position: str | None = None,
    banners: BannerRepository = Depends(get_banner_repository),
) -> dict:
    items = banners.list_all()
    if position:
        try:
            wanted = normalize_position(position)
        except ValueError as exc:
            raise InvalidRequestError(f"Unknown banner position: {position}") from exc
        items = [banner for banner in items if banner.position == wanted]
    return ok_list(items)


@router.post("/banners", status_code=201)
def create_banner(
    banner: Banner,
    session: Session = Depends(get_db_session),
    banners: BannerRepository = Depends(get_banner_repository),
) -> dict:
    created = banners.create(banner)
    session.commit()
    return ok(created, "Banner created")


@router.put("/banners/{banner_id}")
def update_banner(
    banner_id: str,
    update: BannerUpdate,
    session: Session = Depends(get_db_session),
    banners: BannerRepository = Depends(get_banner_repository),
) -> dict:
    updated = banners.patch(banner_id, update.model_dump(exclude_unset=True))
    session.commit()
    return ok(updated, "Banner updated")


@router.delete("/banners/{banner_id}")
def delete_banner(
    banner_id: str,
    session: Session = Depends(get_db_session),
    banners: BannerRepository = Depends(get_banner_repository),
) -> dict:
    if not banners.delete(banner_id):
        raise NotFoundError("Banner", banner_id)
    session.commit()
    return ok(message="Banner deleted")


# --- Deals ---
@router.get("/deals")
def get_deals(
    session: Session = Depends(get_db_session),
    deals: DealsConfigRepository = Depends(get_deals_repository),
) -> dict:
    config = deals.get_or_create(get_config().deals.flash_deal_default_hours)
    session.commit()
    return ok(config)


@router.put("/deals")
def update_deals(
    update: DealsConfigUpdate,
    session: Session = Depends(get_db_session),
    deals: DealsConfigRepository = Depends(get_deals_repository),
) -> dict:
    updated = deals.apply(update, get_config().deals.flash_deal_default_hours)
    session.commit()
    return ok(updated, "Deals updated")


# --- Video finds ---
@router.get("/video-finds")
def list_video_finds(
    videos: VideoFindRepository = Depends(get_video_find_repository),
) -> dict:
    return ok_list(videos.feed())


@router.post("/video-finds", status_code=201)
def create_video_find(
    video: VideoFind,
    session: Session = Depends(get_db_session),
    videos: VideoFindRepository = Depends(get_video_find_repository),
) -> dict:
    created = videos.create(video)
    session.commit()
    return ok(created, "Video added")


@router.put("/video-finds/{video_id}")
def update_video_find(
    video_id: str,
    update: VideoFindUpdate,
    session: Session = Depends(get_db_session),
    videos: VideoFindRepository = Depends(get_video_find_repository),
) -> dict:
    updated = videos.patch(video_id, update.model_dump(exclude_unset=True))
    session.commit()
    return ok(updated, "Video updated")


@router.delete("/video-finds/{video_id}")
def delete_video_find(
    video_id: str,
    session: Session = Depends(get_db_session),
    videos: VideoFindRepository = Depends(get_video_find_repository),
) -> dict:
    if not videos.delete(video_id):
        raise NotFoundError("Video", video_id)
    session.commit()
    return ok(message="Video deleted")
