# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import ProductOut, ProductSummaryOut
from storefront.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductSummaryOut])
def list_products(db: Session = Depends(get_db)):
    return CatalogService(db).list_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return CatalogService(db).get_product(product_id)
