"""Admin catalog endpoints: categories and products."""

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlmodel import Session

from src.commerce.api.http.deps import (
    get_category_repository,
    get_db_session,
    get_product_repository,
)
from src.commerce.api.http.schemas import ok, ok_list, ok_page
from src.commerce.core.errors import ConflictError, NotFoundError
from src.commerce.entities.catalog.category import (
    Category,
    CategoryRepository,
    CategoryUpdate,
)
from src.commerce.entities.catalog.product import (
    Product,
    ProductQuery,
    ProductRepository,
    ProductUpdate,
)

router = APIRouter()


# --- Categories ---
@router.get("/categories")
def list_categories(
    parent_id: str | None = None,
    categories: CategoryRepository = Depends(get_category_repository),
) -> dict:
    if parent_id:
        return ok_list(categories.list_children(parent_id))
    return ok_list(categories.list_all())


@router.post("/categories", status_code=201)
def create_category(
    category: Category,
    session: Session = Depends(get_db_session),
    categories: CategoryRepository = Depends(get_category_repository),
) -> dict:
    if category.parent_id:
        categories.require(category.parent_id)
    created = categories.create(category)
    session.commit()
    return ok(created, "Category created")


@router.put("/categories/{category_id}")
def update_category(
    category_id: str,
    update: CategoryUpdate,
    session: Session = Depends(get_db_session),
    categories: CategoryRepository = Depends(get_category_repository),
) -> dict:
    changes = update.model_dump(exclude_unset=True)
    if changes.get("parent_id") == category_id:
        raise ConflictError("A category cannot be its own parent")
    updated = categories.patch(category_id, changes)
    session.commit()
    return ok(updated, "Category updated")


@router.delete("/categories/{category_id}")
def delete_category(
    category_id: str,
    session: Session = Depends(get_db_session),
    categories: CategoryRepository = Depends(get_category_repository),
) -> dict:
    if categories.list_children(category_id):
        raise ConflictError("Delete the subcategories first")
    if not categories.delete(category_id):
        raise NotFoundError("Category", category_id)
    session.commit()
    return ok(message="Category deleted")


# --- Products ---
@router.get("/products")
def list_products(
    search: str | None = None,
    category: str | None = None,
    publish: bool | None = None,
    seller_id: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=500),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    query = ProductQuery(
        search=search,
        category_id=category,
        publish=publish,
        seller_id=seller_id,
        offset=(page - 1) * limit,
        limit=limit,
    )
    items, total = products.search(query)
    total_pages = -(-total // limit)
    return ok_page(items, page=page, limit=limit, total=total, total_pages=total_pages)


@router.post("/products", status_code=201)
def create_product(
    product: Product,
    session: Session = Depends(get_db_session),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    created = products.create(product)
    session.commit()
    logger.info("Product {} created", created.id)
    return ok(created, "Product created")


@router.get("/products/{product_id}")
def get_product(
    product_id: str,
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    return ok(products.require(product_id))


@router.put("/products/{product_id}")
def update_product(
    product_id: str,
    update: ProductUpdate,
    session: Session = Depends(get_db_session),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    updated = products.patch(product_id, update.changes())
    session.commit()
    return ok(updated, "Product updated")


@router.delete("/products/{product_id}")
def delete_product(
    product_id: str,
    session: Session = Depends(get_db_session),
    products: ProductRepository = Depends(get_product_repository),
) -> dict:
    if not products.delete(product_id):
        raise NotFoundError("Product", product_id)
    session.commit()
    return ok(message="Product deleted")
