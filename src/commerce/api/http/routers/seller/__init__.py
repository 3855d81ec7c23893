"""Seller API."""

from fastapi import APIRouter

from . import products, tools

router = APIRouter(prefix="/seller", tags=["seller"])
router.include_router(products.router)
router.include_router(tools.router)
