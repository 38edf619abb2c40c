# erp_api/modules/financial/repository.py
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from erp_api.shared.database.models import FinancialEntry

CENTS = Decimal("0.01")

class LedgerRepository:
    """
    Append-only store of financial entries
    """

    def __init__(self, db: Session):
        self.db = db

    def append(self, entry: FinancialEntry) -> int:
        self.db.add(entry)
        self.db.flush()
        return entry.id

    def get(self, entry_id: int) -> Optional[FinancialEntry]:
        return self.db.get(FinancialEntry, entry_id)

    def list(self, kind: Optional[str] = None) -> List[FinancialEntry]:
        query = self.db.query(FinancialEntry)
        if kind:
            query = query.filter(FinancialEntry.kind == kind)
        return query.order_by(desc(FinancialEntry.timestamp), desc(FinancialEntry.id)).all()

    def totals_by_kind(self) -> Dict[str, Decimal]:
        rows = self.db.query(
            FinancialEntry.kind,
            func.coalesce(func.sum(FinancialEntry.amount), 0)
        ).group_by(FinancialEntry.kind).all()
        # SQLite sums Numeric as REAL
        return {kind: Decimal(str(total)).quantize(CENTS) for kind, total in rows}

    def count(self) -> int:
        return self.db.query(FinancialEntry).count()
