import logging
import secrets
from typing import List, Optional
from decimal import Decimal, InvalidOperation
from sqlmodel import Session, select
from app.core.config import settings
from app.core.errors import AuthError, NotFound, ValidationError
from app.db.session import commit_or_raise
from app.models.product import Product, ProductFilter, ProductRead, ProductStatus, ProductWrite
from app.services.images import parse_image_input, to_data_uri

logger = logging.getLogger("storefront.products")

def to_product_read(product: Product) -> ProductRead:
    if product.image_data:
        image = to_data_uri(product.image_data, product.image_mime)
    else:
        image = product.image_url
    return ProductRead(
        id=product.id,
        title=product.title,
        description=product.description,
        price=product.price,
        category=product.category,
        subCategory=product.sub_category,
        image=image,
        status=product.status,
        createdAt=product.created_at,
    )

def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None

# Matches the Numeric(14, 2) price column
PRICE_PLACES = Decimal("0.01")
MAX_PRICE = Decimal(10) ** 12

def _parse_price(value) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Missing required fields: price")
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError("Price must be a number")
    if not price.is_finite() or price < 0:
        raise ValidationError("Price must be a non-negative number")
    if price >= MAX_PRICE:
        raise ValidationError("Price must have at most 12 digits before the decimal point")
    if price != price.quantize(PRICE_PLACES):
        raise ValidationError("Price must have at most 2 decimal places")
    return price.quantize(PRICE_PLACES)

class ProductStore:
    def __init__(self, session: Session, admin_password: str, max_image_bytes: int = settings.MAX_IMAGE_BYTES):
        self.session = session
        self.admin_password = admin_password
        self.max_image_bytes = max_image_bytes

    def _authorize(self, password: Optional[str]):
        # Checked before anything else so a bad credential reveals nothing about the target
        if password is None or not secrets.compare_digest(str(password), self.admin_password):
            logger.warning("Rejected admin request with an invalid password")
            raise AuthError()

    def _validated_fields(self, data: ProductWrite) -> dict:
        title = _clean(data.title)
        category = _clean(data.category)
        missing = [name for name, value in (("title", title), ("price", data.price), ("category", category)) if value is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        image = parse_image_input(data.image, self.max_image_bytes)
        return {
            "title": title,
            "description": _clean(data.description),
            "price": _parse_price(data.price),
            "category": category.lower(),
            "sub_category": _clean(data.subCategory),
            "image_data": image.data,
            "image_mime": image.mime,
            "image_url": image.url,
        }

    def _get_row(self, product_id: str) -> Product:
        product = self.session.get(Product, product_id)
        if not product:
            raise NotFound("Product not found")
        return product

    def create(self, data: ProductWrite, password: Optional[str]) -> str:
        """Validate and persist a new product, returning its generated id."""
        self._authorize(password)
        product = Product(**self._validated_fields(data))
        product_id = product.id
        self.session.add(product)
        commit_or_raise(self.session, "create product")
        logger.info("Created product %s in category %s", product_id, product.category)
        return product_id

    def update(self, product_id: str, data: ProductWrite, password: Optional[str]) -> str:
        """Replace the mutable fields of an existing product; status and creation time are kept."""
        self._authorize(password)
        fields = self._validated_fields(data)
        product = self._get_row(product_id)
        for field, value in fields.items():
            setattr(product, field, value)
        self.session.add(product)
        commit_or_raise(self.session, "update product")
        logger.info("Updated product %s", product_id)
        return product_id

    def mark_sold(self, product_id: str, password: Optional[str]) -> str:
        self._authorize(password)
        product = self._get_row(product_id)
        if product.status != ProductStatus.SOLD:
            product.status = ProductStatus.SOLD
            self.session.add(product)
            commit_or_raise(self.session, "update product")
            logger.info("Marked product %s as sold", product_id)
        return product_id

    def delete(self, product_id: str, password: Optional[str]):
        self._authorize(password)
        product = self.session.get(Product, product_id)
        if not product:
            # Already gone
            return
        self.session.delete(product)
        commit_or_raise(self.session, "delete product")
        logger.info("Deleted product %s", product_id)

    def get(self, product_id: str) -> ProductRead:
        return to_product_read(self._get_row(product_id))

    def list(self, filter: Optional[ProductFilter] = None) -> List[ProductRead]:
        """
        List products, optionally narrowed by category and sub-category.

        Category is matched in the query; sub-category is applied afterwards
        to the category-filtered rows. Without a filter the full catalog is
        returned.
        """
        filter = filter or ProductFilter()
        category = _clean(filter.category)
        sub_category = _clean(filter.subCategory)

        statement = select(Product)
        if category:
            statement = statement.where(Product.category == category.lower())
        products = self.session.exec(statement.order_by(Product.created_at, Product.id)).all()

        if sub_category:
            products = [p for p in products if p.sub_category == sub_category]

        return [to_product_read(p) for p in products]
