# erp_api/modules/sales/router.py
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from erp_api.config.database import get_db
from erp_api.core.auth import Identity, require_role
from erp_api.shared.schemas import MAX_ID
from .service import LineItem, SaleProcessor, SalesService
from .schemas import SaleCreateRequest, SaleDetailResponse, SaleResponse

router = APIRouter(prefix="/sales", tags=["Sales"])

@router.get("", response_model=List[SaleDetailResponse])
def list_sales(
    client_id: Optional[int] = Query(None, alias="clientId", le=MAX_ID, description="Only sales of this client"),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    """
    Sales with client and items, newest first
    """
    return SalesService(db).list_sales(client_id)

@router.get("/{sale_id}", response_model=SaleDetailResponse)
def get_sale(
    sale_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return SalesService(db).get_sale(sale_id)

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreateRequest,
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    """
    Register a sale.

    All lines are checked against current stock first; then the sale, its
    items, the stock decrements and the ledger credit are committed together.
    Any failure leaves no trace.
    """
    lines = [
        LineItem(product_id=item.product_id, quantity=item.quantity, unit_price=item.price)
        for item in sale_data.items
    ]
    return SaleProcessor(db).create_sale(sale_data.client_id, lines)
