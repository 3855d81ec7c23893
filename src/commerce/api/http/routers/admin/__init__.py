"""Admin API: every route requires the ``admin`` role."""

from fastapi import APIRouter, Depends

from src.commerce.api.http.deps import require_admin

from . import catalog, marketing, service_requests, settings, stock

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])
router.include_router(catalog.router)
router.include_router(stock.router)
router.include_router(marketing.router)
router.include_router(service_requests.router)
router.include_router(settings.router)
