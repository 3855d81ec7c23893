"""Query-string parsing shared by the admin and seller listings."""

from typing import Literal

from fastapi import Query

from src.commerce.core.services.stock_service import StockFilter, StockQuery


def stock_query_params(
    category_id: str | None = None,
    seller: str | None = None,
    status: Literal["Published", "Unpublished"] | None = None,
    stock: StockFilter | None = None,
    search: str | None = None,
    sort_by: str | None = None,
    sort_dir: Literal["asc", "desc"] = "asc",
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=500),
) -> StockQuery:
    return StockQuery(
        category_id=category_id,
        seller=seller,
        status=status,
        stock=stock,
        search=search,
        sort_by=sort_by,
        descending=sort_dir == "desc",
        page=page,
        limit=limit,
    )
