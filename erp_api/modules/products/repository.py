# erp_api/modules/products/repository.py
from sqlalchemy import update

from erp_api.shared.database.crud import CRUDRepository
from erp_api.shared.database.models import Product, SaleItem

class ProductRepository(CRUDRepository[Product]):
    """
    Data access for products.

    Stock is only ever changed with single UPDATE statements so a sale's
    decrement and a product edit cannot overwrite each other.
    """

    model = Product

    def try_decrement_stock(self, product_id: int, amount: int) -> bool:
        """
        Atomically decrement stock by ``amount`` only if it stays >= 0.

        Returns False when the product is gone or has less than ``amount``.
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock >= amount)
            .values(stock=Product.stock - amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def is_referenced(self, product_id: int) -> bool:
        return self.db.query(SaleItem.id).filter(SaleItem.product_id == product_id).first() is not None
