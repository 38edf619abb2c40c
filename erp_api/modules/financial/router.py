# erp_api/modules/financial/router.py
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from erp_api.config.database import get_db
from erp_api.core.auth import Identity, UserRole, require_role
from erp_api.shared.schemas import MAX_ID
from .service import FinancialService
from .schemas import EntryKind, FinancialEntryCreate, FinancialEntryResponse, LedgerSummary

router = APIRouter(prefix="/financial", tags=["Financial - Admin"])

@router.get("", response_model=List[FinancialEntryResponse])
def list_entries(
    kind: Optional[EntryKind] = Query(None, description="Only credits or only debits"),
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    """
    Ledger entries, newest first
    """
    return FinancialService(db).list_entries(kind)

@router.get("/summary", response_model=LedgerSummary)
def get_summary(
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    """
    Totals of credits and debits and the resulting balance
    """
    return FinancialService(db).summary()

@router.get("/{entry_id}", response_model=FinancialEntryResponse)
def get_entry(
    entry_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    return FinancialService(db).get_entry(entry_id)

@router.post("", response_model=FinancialEntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(
    entry_data: FinancialEntryCreate,
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    """
    Post a manual credit or debit (expenses, adjustments)
    """
    return FinancialService(db).create_entry(entry_data)
