# erp_api/modules/financial/schemas.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from pydantic import Field
from typing import Optional

from erp_api.shared.schemas import ERPBaseModel, Money

class EntryKind(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"

class FinancialEntryCreate(ERPBaseModel):
    kind: EntryKind
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    description: str = Field(..., min_length=1, max_length=255)

class FinancialEntryResponse(ERPBaseModel):
    id: int
    kind: EntryKind
    amount: Money
    description: str
    sale_id: Optional[int]
    timestamp: datetime

class LedgerSummary(ERPBaseModel):
    credits: Money
    debits: Money
    balance: Money
    entries: int
