# erp_api/modules/sales/repository.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session, selectinload

from erp_api.shared.database.models import Sale, SaleItem

class SalesRepository:
    """
    Data access for sales and their items
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== WRITES ====================

    def add_sale(self, client_id: int, total: Decimal) -> Sale:
        sale = Sale(
            client_id=client_id,
            total=total,
            timestamp=datetime.now()
        )
        self.db.add(sale)
        self.db.flush()  # id needed by items and ledger entry
        return sale

    def add_item(self, sale: Sale, product_id: int, quantity: int, price: Decimal) -> SaleItem:
        item = SaleItem(
            product_id=product_id,
            quantity=quantity,
            price=price
        )
        sale.items.append(item)
        self.db.flush()
        return item

    # ==================== QUERIES ====================

    def get_sale_by_id(self, sale_id: int) -> Optional[Sale]:
        return self.db.query(Sale).options(
            selectinload(Sale.client),
            selectinload(Sale.items).selectinload(SaleItem.product)
        ).filter(Sale.id == sale_id).first()

    def list_sales(self, client_id: Optional[int] = None) -> List[Sale]:
        query = self.db.query(Sale).options(
            selectinload(Sale.client),
            selectinload(Sale.items).selectinload(SaleItem.product)
        )
        if client_id is not None:
            query = query.filter(Sale.client_id == client_id)
        return query.order_by(desc(Sale.timestamp), desc(Sale.id)).all()
