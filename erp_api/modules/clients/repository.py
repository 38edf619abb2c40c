# erp_api/modules/clients/repository.py
from typing import Optional

from erp_api.shared.database.crud import CRUDRepository
from erp_api.shared.database.models import Client, Sale

class ClientRepository(CRUDRepository[Client]):
    """
    Data access for clients
    """

    model = Client

    def exists(self, client_id: int) -> bool:
        return self.db.query(Client.id).filter(Client.id == client_id).first() is not None

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(Client.id).filter(Client.email == email.lower())
        if exclude_id is not None:
            query = query.filter(Client.id != exclude_id)
        return query.first() is not None

    def has_sales(self, client_id: int) -> bool:
        return self.db.query(Sale.id).filter(Sale.client_id == client_id).first() is not None
