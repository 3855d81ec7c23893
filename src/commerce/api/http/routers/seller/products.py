"""Seller catalog: a seller only sees and edits their own products."""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlmodel import Session

from src.commerce.api.http.deps import (
    get_category_repository,
    get_db_session,
    get_product_repository,
    require_seller,
)
from src.commerce.api.http.query_params import stock_query_params
from src.commerce.api.http.schemas import ok, ok_page
from src.commerce.core.errors import PermissionDeniedError
from src.commerce.core.models.principal import Principal
from src.commerce.core.services.stock_service import (
    StockQuery,
    load_stock_rows,
    query_rows,
)
from src.commerce.entities.catalog.category import CategoryRepository
from src.commerce.entities.catalog.product import (
    Product,
    ProductQuery,
    ProductRepository,
    ProductUpdate,
    StockLevel,
)

router = APIRouter()


class StockUpdate(BaseModel):
    stock: StockLevel


def _owned(products: ProductRepository, product_id: str, seller: Principal) -> Product:
    product = products.require(product_id)
    if product.seller_id != seller.subject:
        raise PermissionDeniedError("This product belongs to another seller")
    return product


@router.get("/products")
def list_products(
    search: str | None = None,
    category: str | None = None,
    publish: bool | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=500),
    seller: Principal = Depends(require_seller),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    query = ProductQuery(
        search=search,
        category_id=category,
        publish=publish,
        seller_id=seller.subject,
        offset=(page - 1) * limit,
        limit=limit,
    )
    items, total = products.search(query)
    return ok_page(items, page=page, limit=limit, total=total, total_pages=-(-total // limit))


@router.post("/products", status_code=201)
def create_product(
    product: Product,
    seller: Principal = Depends(require_seller),
    session: Session = Depends(get_db_session),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    owned = product.model_copy(
        update={
            "seller_id": seller.subject,
            "seller_name": product.seller_name or seller.name,
        }
    )
    created = products.create(owned)
    session.commit()
    return ok(created, "Product created")


@router.get("/products/{product_id}")
def get_product(
    product_id: str,
    seller: Principal = Depends(require_seller),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    return ok(_owned(products, product_id, seller))


@router.put("/products/{product_id}")
def update_product(
    product_id: str,
    update: ProductUpdate,
    seller: Principal = Depends(require_seller),
    session: Session = Depends(get_db_session),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    _owned(products, product_id, seller)
    updated = products.patch(product_id, update.changes())
    session.commit()
    return ok(updated, "Product updated")


@router.patch("/products/{product_id}/variations/{variation_id}/stock")
def update_variation_stock(
    product_id: str,
    variation_id: str,
    body: StockUpdate,
    seller: Principal = Depends(require_seller),
    session: Session = Depends(get_db_session),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    _owned(products, product_id, seller)
    updated = products.set_variation_stock(product_id, variation_id, body.stock)
    session.commit()
    return ok(updated, "Stock updated")


@router.get("/stock")
def list_stock(
    query: StockQuery = Depends(stock_query_params),
    seller: Principal = Depends(require_seller),
    products: ProductRepository = Depends(get_product_repository),
    categories: CategoryRepository = Depends(get_category_repository),
) -> dict:
    rows = load_stock_rows(products, categories, seller_id=seller.subject)
    page = query_rows(rows, query)
    return ok_page(
        page.items,
        page=page.page,
        limit=page.limit,
        total=page.total,
        total_pages=page.total_pages,
    )
