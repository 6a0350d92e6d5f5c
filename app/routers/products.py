from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.core.config import settings
from app.db.session import get_session
from app.models.product import CatalogCounts, CatalogGroups, ProductRead
from app.services.catalog import CatalogService
from app.services.product import ProductStore

router = APIRouter()

def get_product_store(session: Session = Depends(get_session)) -> ProductStore:
    return ProductStore(session, admin_password=settings.ADMIN_PASSWORD, max_image_bytes=settings.MAX_IMAGE_BYTES)

def get_catalog_service(store: ProductStore = Depends(get_product_store)) -> CatalogService:
    return CatalogService(store)

@router.get("", response_model=List[ProductRead])
def read_products(
    category: Optional[str] = None,
    subCategory: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """List products, optionally filtered by category and sub-category"""
    return catalog.browse(category, subCategory)

@router.get("/search", response_model=CatalogGroups)
def search_products(q: Optional[str] = None, catalog: CatalogService = Depends(get_catalog_service)):
    """Search title and description across the whole catalog, grouped by category"""
    return catalog.group_by_category(catalog.search(q))

@router.get("/counts", response_model=CatalogCounts)
def product_counts(catalog: CatalogService = Depends(get_catalog_service)):
    """Featured section counts"""
    return catalog.counts()

@router.get("/{product_id}", response_model=ProductRead)
def read_product(product_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get(product_id)
