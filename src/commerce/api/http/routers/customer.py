"""Customer-facing storefront API."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.commerce.api.http.deps import (
    get_banner_repository,
    get_db_session,
    get_deals_repository,
    get_product_repository,
    get_service_request_repository,
    get_video_find_repository,
    require_customer,
)
from src.commerce.api.http.middleware.limiter import rate_limit
from src.commerce.api.http.schemas import ok, ok_list
from src.commerce.core.models.principal import Principal
from src.commerce.entities.catalog.product import Product, ProductRepository
from src.commerce.entities.marketing.banner import BannerRepository, normalize_position
from src.commerce.entities.marketing.deals import DealsConfigRepository, countdown
from src.commerce.entities.media.video_find import VideoFindRepository
from src.commerce.entities.service_request import (
    ServiceRequest,
    ServiceRequestCreate,
    ServiceRequestRepository,
)
from src.commerce.runtime.context import get_config

router = APIRouter(prefix="/customer", tags=["customer"])


def _published(products: ProductRepository, product_ids: list[str]) -> list[Product]:
    found = (products.get(product_id) for product_id in product_ids)
    return [product for product in found if product is not None and product.publish]


@router.get("/video-finds")
def list_video_finds(
    videos: VideoFindRepository = Depends(get_video_find_repository),
) -> dict:
    return ok_list(videos.feed())


@router.get("/banners")
def list_banners(
    position: str,
    banners: BannerRepository = Depends(get_banner_repository),
) -> dict:
    try:
        slot = normalize_position(position)
    except ValueError:
        # Unknown slots simply have nothing to show
        return ok_list([])
    return ok_list(banners.active_for_position(slot))


@router.get("/deals")
def get_deals(
    session: Session = Depends(get_db_session),
    deals: DealsConfigRepository = Depends(get_deals_repository),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    config = deals.get_or_create(get_config().deals.flash_deal_default_hours)
    session.commit()
    return ok(
        {
            "config": config,
            "countdown": countdown(config.flash_deal_target_date),
            "featured_deals": _published(products, config.featured_deal_product_ids),
            "deal_of_the_day": _published(products, config.deal_of_the_day_product_ids),
        }
    )


@router.post(
    "/service-requests",
    status_code=201,
    dependencies=[Depends(require_customer), Depends(rate_limit())],
)
def create_service_request(
    body: ServiceRequestCreate,
    customer: Principal = Depends(require_customer),
    session: Session = Depends(get_db_session),
    requests: ServiceRequestRepository = Depends(get_service_request_repository),
) -> dict:
    request = ServiceRequest(
        customer_id=customer.subject,
        **body.model_dump(exclude={"customer_name"}),
        customer_name=body.customer_name or customer.name or "",
    )
    created = requests.create(request)
    session.commit()
    return ok(created, f"{body.kind.value.capitalize()} request submitted")
