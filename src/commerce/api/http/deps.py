"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from src.commerce.api.http.app_data import ApplicationDependencies
from src.commerce.core.models.principal import Principal, Role
from src.commerce.core.services import ImageSearchService, JwtService
from src.commerce.entities import (
    AppSettingsRepository,
    BannerRepository,
    CategoryRepository,
    DealsConfigRepository,
    ProductRepository,
    ServiceRequestRepository,
    VideoFindRepository,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the request; routes commit their own writes."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_service(request: Request) -> JwtService:
    """Get the JWT service instance."""
    return get_app_dependencies(request).jwt_service


def get_image_search_service(request: Request) -> ImageSearchService:
    """Get the image search service instance."""
    return get_app_dependencies(request).image_search_service


# --- Repositories ---
def get_category_repository(db: Session = Depends(get_db_session)) -> CategoryRepository:
    return CategoryRepository(db)


def get_product_repository(db: Session = Depends(get_db_session)) -> ProductRepository:
    return ProductRepository(db)


def get_banner_repository(db: Session = Depends(get_db_session)) -> BannerRepository:
    return BannerRepository(db)


def get_deals_repository(db: Session = Depends(get_db_session)) -> DealsConfigRepository:
    return DealsConfigRepository(db)


def get_video_find_repository(db: Session = Depends(get_db_session)) -> VideoFindRepository:
    return VideoFindRepository(db)


def get_service_request_repository(
    db: Session = Depends(get_db_session),
) -> ServiceRequestRepository:
    return ServiceRequestRepository(db)


def get_settings_repository(db: Session = Depends(get_db_session)) -> AppSettingsRepository:
    return AppSettingsRepository(db)


# --- Authentication ---
async def get_current_principal(
    request: Request,
    jwt_service: JwtService = Depends(get_jwt_service),
) -> Principal:
    """Authenticate the request using a Bearer token."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Bearer token")

    token = auth_header.split(" ", 1)[1].strip()
    principal = jwt_service.verify_token(token)

    request.state.principal = principal
    request.state.roles = principal.roles
    request.state.uid = principal.subject
    return principal


def require_role(*allowed: Role):
    """Create a dependency that requires one of ``allowed`` for the authenticated caller."""

    async def dep(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_role(*allowed):
            names = ", ".join(role.value for role in allowed)
            raise HTTPException(status_code=403, detail=f"Missing required role: {names}")
        return principal

    return dep


require_admin = require_role(Role.ADMIN)
require_seller = require_role(Role.SELLER)
require_delivery = require_role(Role.DELIVERY)
require_customer = require_role(Role.CUSTOMER)
