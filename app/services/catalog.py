from typing import Iterable, List, Optional
from app.models.product import (
    CatalogCounts,
    CatalogGroups,
    FURNITURE_CATEGORY,
    FURNITURE_SUBCATEGORIES,
    KNOWN_CATEGORIES,
    ProductFilter,
    ProductRead,
)
from app.services.product import ProductStore

class CatalogService:
    """Read-side views over the product store used by browse, search and the cart."""

    def __init__(self, products: ProductStore):
        self.products = products

    def get(self, product_id: str) -> ProductRead:
        return self.products.get(product_id)

    def browse(self, category: Optional[str] = None, sub_category: Optional[str] = None) -> List[ProductRead]:
        return self.products.list(ProductFilter(category=category, subCategory=sub_category))

    def search(self, query: Optional[str]) -> List[ProductRead]:
        """Case-insensitive substring match over title and description of the full catalog."""
        catalog = self.products.list()
        needle = (query or "").strip().lower()
        if not needle:
            return catalog
        return [p for p in catalog if needle in f"{p.title} {p.description or ''}".lower()]

    def search_titles(self, query: Optional[str]) -> List[ProductRead]:
        catalog = self.products.list()
        needle = (query or "").strip().lower()
        return [p for p in catalog if needle in p.title.lower()]

    def counts(self) -> CatalogCounts:
        categories = {category: 0 for category in KNOWN_CATEGORIES}
        sub_counts = {sub: 0 for sub in FURNITURE_SUBCATEGORIES}
        for product in self.products.list():
            categories[product.category] = categories.get(product.category, 0) + 1
            if product.category == FURNITURE_CATEGORY and product.subCategory in sub_counts:
                sub_counts[product.subCategory] += 1
        return CatalogCounts(categories=categories, **sub_counts)

    @staticmethod
    def group_by_category(products: Iterable[ProductRead]) -> CatalogGroups:
        groups = {category: [] for category in KNOWN_CATEGORIES}
        for product in products:
            if product.category in groups:
                groups[product.category].append(product)
        return CatalogGroups(**groups)
