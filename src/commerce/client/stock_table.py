"""Stock table state: local product copies plus the set of products edited inline."""

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from src.commerce.core.services.stock_service import (
    StockPage,
    StockQuery,
    StockRow,
    flatten_products,
    query_rows,
)
from src.commerce.entities.catalog.product import Product

from .dispatch import UpdateFn, dispatch_updates

# Fields sent back for each edited product
SAVED_FIELDS = ("product_name", "category_id", "compare_at_price", "price", "stock", "publish")

_EDITABLE = frozenset(SAVED_FIELDS) | {"status"}


class StockTable:
    def __init__(
        self,
        products: Iterable[Mapping[str, Any]] = (),
        category_names: Mapping[str, str] | None = None,
    ):
        self.category_names = dict(category_names or {})
        self.changed_product_ids: set[str] = set()
        self._products: dict[str, dict[str, Any]] = {}
        self.load(products)

    def load(self, products: Iterable[Mapping[str, Any]]) -> None:
        """Replace the local copies, dropping any unsaved edits."""
        self._products = {str(p["id"]): copy.deepcopy(dict(p)) for p in products}
        self.changed_product_ids.clear()

    @property
    def has_unsaved_changes(self) -> bool:
        return bool(self.changed_product_ids)

    def product(self, product_id: str) -> dict[str, Any]:
        return self._products[product_id]

    def rows(self) -> list[StockRow]:
        products = [Product.model_validate(p) for p in self._products.values()]
        return flatten_products(products, self.category_names)

    def view(self, query: StockQuery) -> StockPage:
        return query_rows(self.rows(), query)

    def edit(self, product_id: str, field: str, value: Any) -> None:
        """Apply an inline edit locally and mark the product dirty.

        ``status`` is the table's label for ``publish``: "Published" maps to True.
        An invalid value raises ``ValueError`` and leaves the table untouched.
        """
        if field not in _EDITABLE:
            raise ValueError(f"Field '{field}' cannot be edited from the stock table")
        product = self._products[product_id]
        if field == "status":
            field, value = "publish", value == "Published"
        # pydantic.ValidationError is a ValueError
        validated = Product.model_validate({**product, field: value})
        product[field] = getattr(validated, field)
        self.changed_product_ids.add(product_id)

    async def save_changes(self, send: UpdateFn) -> int:
        """Push every dirty product; the dirty set is only cleared if all succeed."""
        if not self.changed_product_ids:
            return 0

        updates = []
        for product_id in sorted(self.changed_product_ids):
            product = self._products[product_id]
            updates.append((product_id, {field: product.get(field) for field in SAVED_FIELDS}))

        await dispatch_updates(updates, send)
        saved = len(updates)
        self.changed_product_ids.clear()
        logger.info("Stock table saved {} product(s)", saved)
        return saved
