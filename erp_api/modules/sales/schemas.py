# erp_api/modules/sales/schemas.py
from datetime import datetime
from decimal import Decimal
from pydantic import Field
from typing import List, Optional

from erp_api.modules.clients.schemas import ClientResponse
from erp_api.shared.schemas import MAX_ID, ERPBaseModel, Money

# ==================== REQUEST SCHEMAS ====================

class SaleItemRequest(ERPBaseModel):
    product_id: int = Field(..., gt=0, le=MAX_ID, description="Product being sold")
    quantity: int = Field(..., gt=0, le=MAX_ID, description="Units sold")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price charged")

class SaleCreateRequest(ERPBaseModel):
    client_id: int = Field(..., gt=0, le=MAX_ID, description="Client billed for the sale")
    # an empty list is rejected by the processor as an empty order
    items: List[SaleItemRequest] = Field(..., description="Sale lines")

# ==================== RESPONSE SCHEMAS ====================

class ProductSummary(ERPBaseModel):
    id: int
    name: str

class SaleItemResponse(ERPBaseModel):
    id: int
    product_id: int
    quantity: int
    price: Money
    subtotal: Money
    product: Optional[ProductSummary] = None

class SaleResponse(ERPBaseModel):
    id: int
    client_id: int
    total: Money
    timestamp: datetime

class SaleDetailResponse(SaleResponse):
    client: Optional[ClientResponse] = None
    items: List[SaleItemResponse]
