"""Product data access."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import func, or_
from sqlmodel import col, select

from src.commerce.core.errors import NotFoundError
from src.commerce.entities.core.repository import EntityRepository

from .entity import UNLIMITED, Product, StockLevel
from .table import ProductTable


@dataclass(frozen=True)
class ProductQuery:
    """Filters accepted by the product listing endpoints."""

    search: str | None = None
    category_id: str | None = None
    publish: bool | None = None
    seller_id: str | None = None
    offset: int = 0
    limit: int | None = None


class ProductRepository(EntityRepository[Product, ProductTable]):
    entity_type = Product
    table_type = ProductTable
    resource_name = "Product"

    def to_entity(self, row: ProductTable) -> Product:
        data = row.model_dump()
        if data.pop("unlimited_stock", False):
            data["stock"] = UNLIMITED
        return Product.model_validate(data)

    def to_row_data(self, entity: Product) -> dict[str, Any]:
        data = entity.model_dump(mode="python")
        unlimited = data["stock"] == UNLIMITED
        data["unlimited_stock"] = unlimited
        if unlimited:
            data["stock"] = 0
        return data

    def search(self, query: ProductQuery) -> tuple[list[Product], int]:
        """Return one page of products matching ``query`` and the total match count."""
        conditions = []
        if query.search:
            pattern = f"%{query.search.lower()}%"
            conditions.append(
                or_(
                    func.lower(col(ProductTable.product_name)).like(pattern),
                    func.lower(col(ProductTable.sku)).like(pattern),
                )
            )
        if query.category_id:
            conditions.append(
                or_(
                    col(ProductTable.category_id) == query.category_id,
                    col(ProductTable.subcategory_id) == query.category_id,
                )
            )
        if query.publish is not None:
            conditions.append(col(ProductTable.publish) == query.publish)
        if query.seller_id:
            conditions.append(col(ProductTable.seller_id) == query.seller_id)

        count_statement = select(func.count()).select_from(ProductTable).where(*conditions)
        total = self._session.exec(count_statement).one()

        statement = (
            select(ProductTable)
            .where(*conditions)
            .order_by(col(ProductTable.created_at).desc())
            .offset(query.offset)
        )
        if query.limit is not None:
            statement = statement.limit(query.limit)
        rows = self._session.exec(statement).all()
        return [self.to_entity(row) for row in rows], total

    def set_variation_stock(
        self, product_id: str, variation_id: str, stock: StockLevel
    ) -> Product:
        """Set the stock of one variation.

        A product without variations exposes a single implicit row whose id is
        the product id; updating that row sets the product-level stock.
        """
        product = self.require(product_id)
        if not product.variations and variation_id == product.id:
            return self.patch(product_id, {"stock": stock})

        variations = []
        found = False
        for variation in product.variations:
            if variation.id == variation_id:
                variation = variation.model_copy(update={"stock": stock})
                found = True
            variations.append(variation.model_dump())
        if not found:
            raise NotFoundError("Variation", variation_id)
        return self.patch(product_id, {"variations": variations})
