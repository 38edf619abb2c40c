# erp_api/modules/sales/service.py
"""
Sale processing: validate every line, then commit sale, items, stock
decrements and the ledger credit as one transaction.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from erp_api.config.database import begin_write
from erp_api.core.errors import (
    ClientNotFound, EmptyOrder, InsufficientStock, InternalFailure,
    ProductNotFound, ResourceNotFound, ValidationError
)
from erp_api.modules.clients.repository import ClientRepository
from erp_api.modules.financial.repository import LedgerRepository
from erp_api.modules.products.repository import ProductRepository
from erp_api.shared.database.models import FinancialEntry, Sale
from erp_api.shared.repositories import (
    ClientLookup, LedgerStore, ProductRepository as ProductStore, SaleRepository
)
from .repository import SalesRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    """One requested product / quantity / unit price triple"""
    product_id: int
    quantity: int
    unit_price: Decimal


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class SaleProcessor:
    """
    Creates sales while keeping stock and the ledger consistent.

    Stock is taken with the product repository's conditional decrement, so
    two sales racing for the same units cannot both succeed: the loser gets
    ``InsufficientStock`` and its whole transaction is rolled back.
    """

    def __init__(
        self,
        db: Session,
        products: Optional[ProductStore] = None,
        sales: Optional[SaleRepository] = None,
        ledger: Optional[LedgerStore] = None,
        clients: Optional[ClientLookup] = None
    ):
        self.db = db
        self.products = products or ProductRepository(db)
        self.sales = sales or SalesRepository(db)
        self.ledger = ledger or LedgerRepository(db)
        self.clients = clients or ClientRepository(db)

    def create_sale(self, client_id: int, lines: Sequence[LineItem]) -> Sale:
        if not lines:
            raise EmptyOrder()

        try:
            begin_write(self.db)
            total, demand, names = self._validate(client_id, lines)
            sale = self._commit(client_id, lines, total, demand, names)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Sale for client {client_id} failed in storage: {e}", exc_info=True)
            raise InternalFailure("create_sale") from e
        except Exception:
            self.db.rollback()
            raise

        return sale

    # ==================== VALIDATION ====================

    def _validate(
        self,
        client_id: int,
        lines: Sequence[LineItem]
    ) -> Tuple[Decimal, Dict[int, int], Dict[int, str]]:
        """
        Check every line before anything is written.

        Stock is tracked as a running balance per product, so repeated lines
        for one product are checked against what the earlier lines left.
        Returns the total, the quantity per product and the product names.
        """
        if not self.clients.exists(client_id):
            raise ClientNotFound(client_id)

        remaining: Dict[int, int] = {}
        names: Dict[int, str] = {}
        demand: Dict[int, int] = {}
        total = Decimal("0")

        for line in lines:
            if line.product_id not in remaining:
                product = self.products.get(line.product_id)
                if product is None:
                    raise ProductNotFound(line.product_id)
                remaining[line.product_id] = product.stock
                names[line.product_id] = product.name

            price = _as_decimal(line.unit_price)
            if price < 0:
                raise ValidationError(f"Price for product {line.product_id} cannot be negative")

            available = remaining[line.product_id]
            if line.quantity <= 0 or line.quantity > available:
                raise InsufficientStock(
                    line.product_id, names[line.product_id], line.quantity, available
                )

            remaining[line.product_id] = available - line.quantity
            demand[line.product_id] = demand.get(line.product_id, 0) + line.quantity
            total += line.quantity * price

        return total, demand, names

    # ==================== COMMIT ====================

    def _commit(
        self,
        client_id: int,
        lines: Sequence[LineItem],
        total: Decimal,
        demand: Dict[int, int],
        names: Dict[int, str]
    ) -> Sale:
        sale = self.sales.add_sale(client_id, total)

        for line in lines:
            self.sales.add_item(sale, line.product_id, line.quantity, _as_decimal(line.unit_price))

        # ascending id order keeps row locks ordered across concurrent sales
        for product_id in sorted(demand):
            if not self.products.try_decrement_stock(product_id, demand[product_id]):
                logger.info(f"Stock for product {product_id} was taken by a concurrent sale")
                raise InsufficientStock(product_id, names[product_id], demand[product_id])

        self.ledger.append(FinancialEntry(
            kind="credit",
            amount=total,
            description=f"Sale #{sale.id}",
            sale_id=sale.id,
            timestamp=datetime.now()
        ))

        sale_id = sale.id
        self.db.commit()
        logger.info(f"Sale #{sale_id} committed: client {client_id}, {len(lines)} line(s), total {total}")
        return sale


class SalesService:
    """
    Read side of sales
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)

    def list_sales(self, client_id: Optional[int] = None) -> List[Sale]:
        return self.repository.list_sales(client_id)

    def get_sale(self, sale_id: int) -> Sale:
        sale = self.repository.get_sale_by_id(sale_id)
        if not sale:
            raise ResourceNotFound("Sale", sale_id)
        return sale
