import uuid
from typing import Dict, List, Optional, Union
from decimal import Decimal
from datetime import datetime
from enum import Enum
from sqlmodel import Field, SQLModel, Column
from app.core.timeutils import utcnow
from sqlalchemy import LargeBinary
from pydantic import BaseModel

# Categories the storefront renders as sections; others are stored as-is
KNOWN_CATEGORIES = ("land", "properties", "furnitures", "auto")
FURNITURE_CATEGORY = "furnitures"
FURNITURE_SUBCATEGORIES = ("home", "office")

class ProductStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"

class Product(SQLModel, table=True):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    # Basic Info
    title: str
    description: Optional[str] = None

    # Pricing
    price: Decimal = Field(default=0, max_digits=14, decimal_places=2)

    # Classification
    category: str = Field(index=True)
    sub_category: Optional[str] = None

    # Image: either an inline payload with its MIME type or an external URL
    image_data: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True))
    image_mime: Optional[str] = None
    image_url: Optional[str] = None

    # Metadata
    status: ProductStatus = Field(default=ProductStatus.AVAILABLE)
    created_at: datetime = Field(default_factory=utcnow)

class ProductRead(BaseModel):
    """Transport view of a product; ``image`` is a data URI, an external URL or null."""
    id: str
    title: str
    description: Optional[str] = None
    price: Decimal
    category: str
    subCategory: Optional[str] = None
    image: Optional[str] = None
    status: ProductStatus = ProductStatus.AVAILABLE
    createdAt: datetime

class ProductWrite(BaseModel):
    # Kept loose so missing or malformed values reach the store's validation
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[Decimal, str]] = None
    category: Optional[str] = None
    subCategory: Optional[str] = None
    image: Optional[str] = None

class ProductFilter(BaseModel):
    category: Optional[str] = None
    subCategory: Optional[str] = None

class CatalogCounts(BaseModel):
    categories: Dict[str, int]
    home: int
    office: int

class CatalogGroups(BaseModel):
    land: List[ProductRead] = []
    properties: List[ProductRead] = []
    furnitures: List[ProductRead] = []
    auto: List[ProductRead] = []
