from .router import router as financial_router
from .service import FinancialService
from .repository import LedgerRepository

__all__ = [
    "financial_router",
    "FinancialService",
    "LedgerRepository"
]
