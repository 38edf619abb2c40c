# erp_api/modules/products/schemas.py
from decimal import Decimal
from pydantic import Field
from typing import Optional

from erp_api.shared.schemas import MAX_ID, ERPBaseModel, Money

class ProductCreate(ERPBaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, description="Free-text description")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price")
    stock: int = Field(0, ge=0, le=MAX_ID, description="Units available")

class ProductUpdate(ERPBaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0, le=MAX_ID)

class ProductResponse(ERPBaseModel):
    id: int
    name: str
    description: Optional[str]
    price: Money
    stock: int
