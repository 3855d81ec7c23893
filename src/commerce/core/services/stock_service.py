"""Stock listing: flatten products into per-variation rows, then filter, sort, page and export."""

import csv
import io
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from src.commerce.core.errors import InvalidRequestError
from src.commerce.entities.catalog.category import CategoryRepository
from src.commerce.entities.catalog.product import (
    UNLIMITED,
    Product,
    ProductQuery,
    ProductRepository,
    StockLevel,
)

# Unlimited stock sorts after every real quantity
UNLIMITED_SORT_VALUE = 999999

CSV_HEADERS = ["Variation Id", "Name", "Seller", "Variation", "Stock", "Status"]


class StockFilter(StrEnum):
    IN_STOCK = "In Stock"
    OUT_OF_STOCK = "Out of Stock"
    UNLIMITED = "Unlimited"


class StockRow(BaseModel):
    """One line of the stock table: a product variation, or the product itself."""

    id: str
    product_id: str
    variation_id: str
    name: str
    seller: str
    seller_id: str = ""
    image: str = ""
    variation: str = "Default"
    stock: StockLevel = 0
    price: float = 0
    compare_at_price: float = 0
    status: str
    publish: bool
    category: str = "Unknown"
    category_id: str = ""


def flatten_products(
    products: Iterable[Product], category_names: Mapping[str, str] | None = None
) -> list[StockRow]:
    """Expand every product into one row per variation, or a single ``Default`` row."""
    names = category_names or {}
    rows: list[StockRow] = []
    for product in products:
        common: dict[str, Any] = {
            "product_id": product.id,
            "name": product.product_name,
            "seller": product.seller_name or "Unknown Seller",
            "seller_id": product.seller_id or "",
            "image": product.display_image,
            "price": product.price,
            "compare_at_price": product.compare_at_price,
            "status": product.status,
            "publish": product.publish,
            "category": names.get(product.category_id or "", "Unknown"),
            "category_id": product.category_id or "",
        }
        if not product.variations:
            rows.append(
                StockRow(id=product.id, variation_id=product.id, stock=product.stock, **common)
            )
            continue
        for index, variation in enumerate(product.variations):
            rows.append(
                StockRow(
                    id=f"{product.id}-{index}",
                    variation_id=variation.id,
                    variation=variation.label,
                    stock=variation.stock if variation.stock is not None else product.stock,
                    **common,
                )
            )
    return rows


def _stock_sort_value(row: StockRow) -> int:
    return UNLIMITED_SORT_VALUE if row.stock == UNLIMITED else int(row.stock)


SORT_KEYS: dict[str, Callable[[StockRow], Any]] = {
    "id": lambda row: row.id,
    "name": lambda row: row.name.lower(),
    "seller": lambda row: row.seller.lower(),
    "variation": lambda row: row.variation.lower(),
    "stock": _stock_sort_value,
    "status": lambda row: row.status,
}


@dataclass(frozen=True)
class StockQuery:
    """Filter, sort and paging options for the stock table."""

    category_id: str | None = None
    seller: str | None = None
    status: str | None = None
    stock: StockFilter | None = None
    search: str | None = None
    sort_by: str | None = None
    descending: bool = False
    page: int = 1
    limit: int = 10

    def matches(self, row: StockRow) -> bool:
        if self.category_id and row.category_id != self.category_id:
            return False
        if self.seller and row.seller != self.seller:
            return False
        if self.status and row.status != self.status:
            return False
        if self.stock == StockFilter.UNLIMITED and row.stock != UNLIMITED:
            return False
        if self.stock == StockFilter.IN_STOCK and (row.stock == UNLIMITED or row.stock <= 0):
            return False
        if self.stock == StockFilter.OUT_OF_STOCK and (row.stock == UNLIMITED or row.stock != 0):
            return False
        if self.search:
            term = self.search.lower()
            if term not in row.name.lower() and term not in row.seller.lower():
                return False
        return True


class StockPage(BaseModel):
    items: list[StockRow]
    total: int
    page: int
    limit: int
    total_pages: int


def filter_rows(rows: Iterable[StockRow], query: StockQuery) -> list[StockRow]:
    return [row for row in rows if query.matches(row)]


def sort_rows(rows: list[StockRow], sort_by: str | None, descending: bool = False) -> list[StockRow]:
    """Stable sort by one column; no column keeps the incoming order."""
    if not sort_by:
        return list(rows)
    key = SORT_KEYS.get(sort_by)
    if key is None:
        raise InvalidRequestError(
            f"Cannot sort by '{sort_by}'; expected one of {', '.join(SORT_KEYS)}"
        )
    return sorted(rows, key=key, reverse=descending)


def paginate(rows: list[StockRow], page: int, limit: int) -> StockPage:
    if page < 1 or limit < 1:
        raise InvalidRequestError("page and limit must be positive")
    start = (page - 1) * limit
    return StockPage(
        items=rows[start : start + limit],
        total=len(rows),
        page=page,
        limit=limit,
        total_pages=math.ceil(len(rows) / limit),
    )


def query_rows(rows: Iterable[StockRow], query: StockQuery) -> StockPage:
    ordered = sort_rows(filter_rows(rows, query), query.sort_by, query.descending)
    return paginate(ordered, query.page, query.limit)


def export_csv(rows: Iterable[StockRow]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        writer.writerow([row.id, row.name, row.seller, row.variation, row.stock, row.status])
    return buffer.getvalue()


def load_stock_rows(
    products: ProductRepository,
    categories: CategoryRepository,
    seller_id: str | None = None,
) -> list[StockRow]:
    """Flatten every stored product (optionally one seller's) into stock rows."""
    items, _total = products.search(ProductQuery(seller_id=seller_id))
    return flatten_products(items, categories.names_by_id())
