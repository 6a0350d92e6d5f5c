import uuid
from datetime import timedelta
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlmodel import Session
from app.core.config import settings
from app.db.session import get_session
from app.models.cart import CartLineRead, CartView
from app.routers.products import get_catalog_service
from app.services.cart import CartStore
from app.services.catalog import CatalogService

router = APIRouter()

class CartItemRequest(BaseModel):
    productId: Optional[str] = None
    quantity: Optional[Union[int, float, str]] = None

class OkResponse(BaseModel):
    ok: bool = True

def get_cart_store(
    session: Session = Depends(get_session),
    catalog: CatalogService = Depends(get_catalog_service)
) -> CartStore:
    return CartStore(session, catalog, ttl=timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS))

def get_cart_id(request: Request) -> str:
    """Cart token stored in the signed session cookie, issued on first use"""
    cart_id = request.session.get("cart_id")
    if not cart_id:
        cart_id = uuid.uuid4().hex
        request.session["cart_id"] = cart_id
    return cart_id

@router.get("", response_model=List[CartLineRead])
def get_cart(cart_id: str = Depends(get_cart_id), store: CartStore = Depends(get_cart_store)):
    """Get cart lines in the order they were added"""
    return store.view(cart_id)

@router.get("/summary", response_model=CartView)
def get_cart_summary(cart_id: str = Depends(get_cart_id), store: CartStore = Depends(get_cart_store)):
    """Cart lines with total and item count"""
    return store.summary(cart_id)

@router.post("/add", response_model=List[CartLineRead])
def add_to_cart(
    item: CartItemRequest,
    cart_id: str = Depends(get_cart_id),
    store: CartStore = Depends(get_cart_store)
):
    """Add item to cart"""
    quantity = item.quantity if item.quantity is not None else 1
    return store.add(cart_id, item.productId, quantity)

@router.post("/update", response_model=List[CartLineRead])
def update_cart_item(
    item: CartItemRequest,
    cart_id: str = Depends(get_cart_id),
    store: CartStore = Depends(get_cart_store)
):
    """Set item quantity; zero removes it"""
    return store.set_quantity(cart_id, item.productId, item.quantity)

@router.post("/clear", response_model=OkResponse)
def clear_cart(cart_id: str = Depends(get_cart_id), store: CartStore = Depends(get_cart_store)):
    """Clear entire cart"""
    store.clear(cart_id)
    return OkResponse()
