# erp_api/modules/products/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from erp_api.config.database import get_db
from erp_api.core.auth import Identity, require_role
from erp_api.shared.schemas import MAX_ID
from .service import ProductService
from .schemas import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter(prefix="/products", tags=["Products"])

@router.get("", response_model=List[ProductResponse])
def list_products(
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ProductService(db).list_products()

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ProductService(db).get_product(product_id)

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ProductService(db).create_product(product_data)

@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    """
    Update price, description, name or stock. Concurrent sales keep their decrements
    unless ``stock`` itself is overwritten here.
    """
    return ProductService(db).update_product(product_id, product_data.model_dump(exclude_unset=True))

@router.delete("/{product_id}")
def delete_product(
    product_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    ProductService(db).delete_product(product_id)
    return {"message": "Product deleted"}
