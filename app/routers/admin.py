from typing import List, Optional
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from app.models.product import ProductRead, ProductWrite
from app.routers.products import get_catalog_service, get_product_store
from app.services.catalog import CatalogService
from app.services.product import ProductStore

router = APIRouter()

# Pydantic models for requests/responses
class AdminProductRequest(ProductWrite):
    password: Optional[str] = None

class AdminCredential(BaseModel):
    password: Optional[str] = None

class ProductIdResponse(BaseModel):
    id: str

class OkResponse(BaseModel):
    ok: bool = True

@router.get("/products", response_model=List[ProductRead])
def search_product_titles(q: Optional[str] = None, catalog: CatalogService = Depends(get_catalog_service)):
    """Admin product list, narrowed by title"""
    return catalog.search_titles(q)

@router.post("/products", response_model=ProductIdResponse, status_code=status.HTTP_201_CREATED)
def create_product(body: AdminProductRequest, store: ProductStore = Depends(get_product_store)):
    """Create a product"""
    return ProductIdResponse(id=store.create(body, password=body.password))

@router.put("/products/{product_id}", response_model=ProductIdResponse)
def update_product(product_id: str, body: AdminProductRequest, store: ProductStore = Depends(get_product_store)):
    """Replace a product's fields"""
    return ProductIdResponse(id=store.update(product_id, body, password=body.password))

@router.post("/products/{product_id}/sold", response_model=ProductIdResponse)
def mark_product_sold(
    product_id: str,
    body: Optional[AdminCredential] = None,
    store: ProductStore = Depends(get_product_store)
):
    """Mark a product as sold"""
    password = body.password if body else None
    return ProductIdResponse(id=store.mark_sold(product_id, password=password))

@router.delete("/products/{product_id}", response_model=OkResponse)
def delete_product(product_id: str, password: Optional[str] = None, store: ProductStore = Depends(get_product_store)):
    """Delete a product"""
    store.delete(product_id, password=password)
    return OkResponse()
