"""Entity package: Product."""

from .entity import UNLIMITED, Product, ProductUpdate, StockLevel, Variation
from .repository import ProductQuery, ProductRepository
from .table import ProductTable

__all__ = [
    "UNLIMITED",
    "Product",
    "ProductQuery",
    "ProductRepository",
    "ProductTable",
    "ProductUpdate",
    "StockLevel",
    "Variation",
]
