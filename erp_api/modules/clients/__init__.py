from .router import router as clients_router
from .service import ClientService
from .repository import ClientRepository

__all__ = [
    "clients_router",
    "ClientService",
    "ClientRepository"
]
