# erp_api/modules/products/service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from erp_api.config.database import begin_write
from erp_api.core.errors import Conflict, ResourceNotFound
from erp_api.shared.database.models import Product
from .repository import ProductRepository
from .schemas import ProductCreate

class ProductService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRepository(db)

    def list_products(self) -> List[Product]:
        return self.repository.list()

    def get_product(self, product_id: int) -> Product:
        product = self.repository.get(product_id)
        if not product:
            raise ResourceNotFound("Product", product_id)
        return product

    def create_product(self, product_data: ProductCreate) -> Product:
        begin_write(self.db)
        product = self.repository.create(product_data.model_dump())
        self.db.commit()
        return product

    def update_product(self, product_id: int, changes: Dict[str, Any]) -> Product:
        """
        Partial update; only the sent columns are written.

        ``description`` may be cleared with null, the other fields ignore it.
        """
        begin_write(self.db)
        changes = {
            key: value for key, value in changes.items()
            if value is not None or key == "description"
        }
        product = self.repository.update(product_id, changes)
        if product is None:
            raise ResourceNotFound("Product", product_id)
        self.db.commit()
        return product

    def delete_product(self, product_id: int) -> None:
        begin_write(self.db)
        self.get_product(product_id)
        if self.repository.is_referenced(product_id):
            raise Conflict(f"Product {product_id} appears in sales and cannot be deleted")
        self.repository.delete(product_id)
        self.db.commit()
