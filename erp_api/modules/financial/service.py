# erp_api/modules/financial/service.py
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from erp_api.config.database import begin_write
from erp_api.core.errors import ResourceNotFound
from erp_api.shared.database.models import FinancialEntry
from .repository import LedgerRepository
from .schemas import EntryKind, FinancialEntryCreate, LedgerSummary

logger = logging.getLogger(__name__)

class FinancialService:
    """
    Ledger reporting and manual entries; entries are never edited or removed
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = LedgerRepository(db)

    def list_entries(self, kind: Optional[EntryKind] = None) -> List[FinancialEntry]:
        return self.repository.list(kind.value if kind else None)

    def get_entry(self, entry_id: int) -> FinancialEntry:
        entry = self.repository.get(entry_id)
        if not entry:
            raise ResourceNotFound("Financial entry", entry_id)
        return entry

    def create_entry(self, entry_data: FinancialEntryCreate) -> FinancialEntry:
        begin_write(self.db)
        entry = FinancialEntry(
            kind=entry_data.kind.value,
            amount=entry_data.amount,
            description=entry_data.description,
            timestamp=datetime.now()
        )
        self.repository.append(entry)
        self.db.commit()
        logger.info(f"Manual {entry.kind} entry {entry.id} of {entry.amount} posted")
        return entry

    def summary(self) -> LedgerSummary:
        totals = self.repository.totals_by_kind()
        credits = totals.get(EntryKind.CREDIT.value, Decimal("0"))
        debits = totals.get(EntryKind.DEBIT.value, Decimal("0"))
        return LedgerSummary(
            credits=credits,
            debits=debits,
            balance=credits - debits,
            entries=self.repository.count()
        )
