"""
Data-access contracts the sale processor and the auth gate depend on.

Services only see these structural interfaces; the SQLAlchemy classes in
each module's ``repository.py`` are one implementation of them, and the
tests swap in others.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, TypeVar, runtime_checkable

from erp_api.shared.database.models import FinancialEntry, Product, Sale, SaleItem

if TYPE_CHECKING:
    from erp_api.core.auth.schemas import Identity

T = TypeVar("T")


@runtime_checkable
class RecordRepository(Protocol[T]):
    """get / list / create / update / delete over one entity"""

    def get(self, record_id: int) -> Optional[T]: ...

    def list(self) -> List[T]: ...

    def create(self, data: Dict[str, Any]) -> T: ...

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[T]: ...

    def delete(self, record_id: int) -> bool: ...


@runtime_checkable
class ProductRepository(Protocol):

    def get(self, product_id: int) -> Optional[Product]: ...

    def try_decrement_stock(self, product_id: int, amount: int) -> bool:
        """Decrement only if the resulting stock stays >= 0"""
        ...


@runtime_checkable
class SaleRepository(Protocol):

    def add_sale(self, client_id: int, total: Any) -> Sale: ...

    def add_item(self, sale: Sale, product_id: int, quantity: int, price: Any) -> SaleItem: ...


@runtime_checkable
class LedgerStore(Protocol):

    def append(self, entry: FinancialEntry) -> int: ...


@runtime_checkable
class ClientLookup(Protocol):

    def exists(self, client_id: int) -> bool: ...


@runtime_checkable
class IdentityStore(Protocol):

    def validate_token(self, token: str) -> Optional["Identity"]: ...
