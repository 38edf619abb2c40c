# erp_api/modules/sales/__init__.py
"""
Sales module - sale registration with stock and ledger consistency.

Architecture:
- router.py: FastAPI endpoints
- service.py: SaleProcessor (create) and SalesService (queries)
- repository.py: data access
- schemas.py: Pydantic request/response models
"""

from .router import router as sales_router
from .service import LineItem, SaleProcessor, SalesService
from .repository import SalesRepository

__all__ = [
    "sales_router",
    "LineItem",
    "SaleProcessor",
    "SalesService",
    "SalesRepository"
]
