from typing import Any, Dict, List, Optional
from decimal import Decimal
from datetime import datetime
from sqlmodel import Field, SQLModel, Column
from app.core.timeutils import utcnow
from sqlalchemy import JSON, UniqueConstraint
from pydantic import BaseModel
from app.models.product import ProductRead

class CartSession(SQLModel, table=True):
    # Opaque token carried in the session cookie
    id: str = Field(primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime

class CartLine(SQLModel, table=True):
    __table_args__ = (UniqueConstraint("cart_id", "product_id"),)

    # Autoincrement id doubles as insertion order
    id: Optional[int] = Field(default=None, primary_key=True)

    # References
    cart_id: str = Field(foreign_key="cartsession.id", index=True)
    # No foreign key: the snapshot outlives the product it was taken from
    product_id: str = Field(index=True)

    # Cart Details
    quantity: int = Field(default=1, ge=1)
    snapshot: Dict[str, Any] = Field(default={}, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

class CartLineRead(BaseModel):
    product: ProductRead
    quantity: int
    subtotal: Decimal

class CartView(BaseModel):
    lines: List[CartLineRead]
    total: Decimal
    count: int
