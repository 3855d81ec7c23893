"""Admin stock management: flattened per-variation listing and CSV export."""

from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from src.commerce.api.http.deps import get_category_repository, get_product_repository
from src.commerce.api.http.query_params import stock_query_params
from src.commerce.api.http.schemas import ok_page
from src.commerce.core.services.stock_service import (
    StockQuery,
    export_csv,
    filter_rows,
    load_stock_rows,
    query_rows,
    sort_rows,
)
from src.commerce.entities.catalog.category import CategoryRepository
from src.commerce.entities.catalog.product import ProductRepository

router = APIRouter(prefix="/stock")


@router.get("")
def list_stock(
    query: StockQuery = Depends(stock_query_params),
    products: ProductRepository = Depends(get_product_repository),
    categories: CategoryRepository = Depends(get_category_repository),
) -> dict:
    page = query_rows(load_stock_rows(products, categories), query)
    return ok_page(
        page.items,
        page=page.page,
        limit=page.limit,
        total=page.total,
        total_pages=page.total_pages,
    )


@router.get("/export")
def export_stock(
    query: StockQuery = Depends(stock_query_params),
    products: ProductRepository = Depends(get_product_repository),
    categories: CategoryRepository = Depends(get_category_repository),
) -> Response:
    """Every row matching the filters, in the requested order, without paging."""
    rows = sort_rows(
        filter_rows(load_stock_rows(products, categories), query),
        query.sort_by,
        query.descending,
    )
    filename = f"stock_management_{date.today().isoformat()}.csv"
    return Response(
        content=export_csv(rows),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
