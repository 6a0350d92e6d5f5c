import logging
from typing import Callable, List, Optional
from decimal import Decimal
from datetime import datetime, timedelta
from sqlmodel import Session, select, delete
from sqlalchemy import update
from app.core.errors import NotFound, ValidationError
from app.core.timeutils import utcnow
from app.db.session import commit_or_raise
from app.models.cart import CartLine, CartLineRead, CartSession, CartView
from app.models.product import ProductRead
from app.services.catalog import CatalogService

logger = logging.getLogger("storefront.cart")

# Largest quantity a single line may hold
MAX_QUANTITY = 1_000_000

def coerce_quantity(value, minimum: int) -> int:
    """Coerce a client-supplied quantity to an int no lower than ``minimum``; missing means ``minimum``."""
    if value is None or value == "":
        return minimum
    try:
        quantity = int(float(value)) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("quantity must be a number")
    if quantity > MAX_QUANTITY:
        raise ValidationError(f"quantity cannot exceed {MAX_QUANTITY}")
    return max(minimum, quantity)

def _require_product_id(product_id: Optional[str]) -> str:
    if product_id is None or not str(product_id).strip():
        raise ValidationError("productId is required")
    return str(product_id).strip()

class CartStore:
    """
    Per-session carts keyed by the opaque token from the session cookie.

    Each line holds a snapshot of the product taken when it was first added,
    so later catalog edits or deletions do not change lines already in a cart.
    A cart row is only written on the first add; reads of an unknown session
    see an empty cart.
    """

    def __init__(
        self,
        session: Session,
        catalog: CatalogService,
        ttl: timedelta,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.session = session
        self.catalog = catalog
        self.ttl = ttl
        self.clock = clock

    def _purge_expired(self, now: datetime):
        expired = select(CartSession.id).where(CartSession.expires_at <= now)
        self.session.exec(delete(CartLine).where(CartLine.cart_id.in_(expired)))
        self.session.exec(delete(CartSession).where(CartSession.expires_at <= now))

    def _cart(self, session_id: str, create: bool = False) -> Optional[CartSession]:
        """Fetch the live cart for a session, discarding it once expired and optionally creating one."""
        now = self.clock()
        cart = self.session.get(CartSession, session_id)
        if cart is not None and cart.expires_at <= now:
            logger.info("Cart for session %s expired", session_id)
            cart = None
            self._purge_expired(now)
            commit_or_raise(self.session, "discard expired carts")

        if cart is None and create:
            # Abandoned carts are swept whenever a new one is opened
            self._purge_expired(now)
            cart = CartSession(id=session_id, created_at=now, expires_at=now + self.ttl)
            self.session.add(cart)
            commit_or_raise(self.session, "create cart")
        return cart

    def _line(self, session_id: str, product_id: str) -> Optional[CartLine]:
        return self.session.exec(
            select(CartLine).where(
                CartLine.cart_id == session_id,
                CartLine.product_id == product_id,
            )
        ).first()

    def view(self, session_id: str) -> List[CartLineRead]:
        if self._cart(session_id) is None:
            return []
        lines = self.session.exec(
            select(CartLine).where(CartLine.cart_id == session_id).order_by(CartLine.id)
        ).all()
        result = []
        for line in lines:
            product = ProductRead.model_validate(line.snapshot)
            result.append(CartLineRead(
                product=product,
                quantity=line.quantity,
                subtotal=product.price * line.quantity,
            ))
        return result

    def summary(self, session_id: str) -> CartView:
        lines = self.view(session_id)
        return CartView(
            lines=lines,
            total=sum((line.subtotal for line in lines), Decimal("0")),
            count=sum(line.quantity for line in lines),
        )

    def add(self, session_id: str, product_id: Optional[str], quantity=1) -> List[CartLineRead]:
        """Add a product or increase the quantity of the line already holding it."""
        product_id = _require_product_id(product_id)
        qty = coerce_quantity(quantity, minimum=1)
        product = self.catalog.get(product_id)
        self._cart(session_id, create=True)

        # Single-statement increment so concurrent adds to one line are not lost
        result = self.session.exec(
            update(CartLine)
            .where(
                CartLine.cart_id == session_id,
                CartLine.product_id == product_id,
                CartLine.quantity <= MAX_QUANTITY - qty,
            )
            .values(quantity=CartLine.quantity + qty, updated_at=self.clock())
        )
        if result.rowcount == 0:
            if self._line(session_id, product_id) is not None:
                self.session.rollback()
                raise ValidationError(f"quantity cannot exceed {MAX_QUANTITY}")
            self.session.add(CartLine(
                cart_id=session_id,
                product_id=product_id,
                quantity=qty,
                snapshot=product.model_dump(mode="json"),
            ))
        commit_or_raise(self.session, "add to cart")
        logger.info("Added %d x %s to cart %s", qty, product_id, session_id)
        return self.view(session_id)

    def set_quantity(self, session_id: str, product_id: Optional[str], quantity) -> List[CartLineRead]:
        """Overwrite a line's quantity; zero removes the line."""
        product_id = _require_product_id(product_id)
        qty = coerce_quantity(quantity, minimum=0)

        line = self._line(session_id, product_id) if self._cart(session_id) else None
        if not line:
            raise NotFound("Item not found in cart")

        if qty == 0:
            self.session.delete(line)
        else:
            line.quantity = qty
            line.updated_at = self.clock()
            self.session.add(line)
        commit_or_raise(self.session, "update cart")
        logger.info("Set quantity of %s in cart %s to %d", product_id, session_id, qty)
        return self.view(session_id)

    def clear(self, session_id: str):
        if self._cart(session_id) is None:
            return
        self.session.exec(delete(CartLine).where(CartLine.cart_id == session_id))
        commit_or_raise(self.session, "clear cart")
        logger.info("Cleared cart %s", session_id)
