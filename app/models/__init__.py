# Import all models to register them with SQLModel
from app.models.product import (
    Product,
    ProductStatus,
    ProductRead,
    ProductWrite,
    ProductFilter,
    CatalogCounts,
    CatalogGroups,
    KNOWN_CATEGORIES,
)
from app.models.cart import CartSession, CartLine, CartLineRead, CartView

__all__ = [
    "Product",
    "ProductStatus",
    "ProductRead",
    "ProductWrite",
    "ProductFilter",
    "CatalogCounts",
    "CatalogGroups",
    "KNOWN_CATEGORIES",
    "CartSession",
    "CartLine",
    "CartLineRead",
    "CartView",
]
