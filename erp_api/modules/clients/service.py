# erp_api/modules/clients/service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from erp_api.config.database import begin_write
from erp_api.core.errors import Conflict, ResourceNotFound
from erp_api.shared.database.models import Client
from .repository import ClientRepository
from .schemas import ClientCreate

class ClientService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = ClientRepository(db)

    def list_clients(self) -> List[Client]:
        return self.repository.list()

    def get_client(self, client_id: int) -> Client:
        client = self.repository.get(client_id)
        if not client:
            raise ResourceNotFound("Client", client_id)
        return client

    def create_client(self, client_data: ClientCreate) -> Client:
        begin_write(self.db)
        if self.repository.email_taken(client_data.email):
            raise Conflict("Email already in use")
        client = self.repository.create(client_data.model_dump())
        self.db.commit()
        return client

    def update_client(self, client_id: int, changes: Dict[str, Any]) -> Client:
        begin_write(self.db)
        self.get_client(client_id)
        changes = {key: value for key, value in changes.items() if value is not None}
        if "email" in changes and self.repository.email_taken(changes["email"], exclude_id=client_id):
            raise Conflict("Email already in use")
        client = self.repository.update(client_id, changes)
        self.db.commit()
        return client

    def delete_client(self, client_id: int) -> None:
        begin_write(self.db)
        self.get_client(client_id)
        # sales keep a reference to their client
        if self.repository.has_sales(client_id):
            raise Conflict(f"Client {client_id} has sales and cannot be deleted")
        self.repository.delete(client_id)
        self.db.commit()
