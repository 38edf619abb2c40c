# erp_api/modules/clients/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from erp_api.config.database import get_db
from erp_api.core.auth import Identity, require_role
from erp_api.shared.schemas import MAX_ID
from .service import ClientService
from .schemas import ClientCreate, ClientUpdate, ClientResponse

router = APIRouter(prefix="/clients", tags=["Clients"])

@router.get("", response_model=List[ClientResponse])
def list_clients(
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ClientService(db).list_clients()

@router.get("/{client_id}", response_model=ClientResponse)
def get_client(
    client_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ClientService(db).get_client(client_id)

@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    client_data: ClientCreate,
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ClientService(db).create_client(client_data)

@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_data: ClientUpdate,
    client_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return ClientService(db).update_client(client_id, client_data.model_dump(exclude_unset=True))

@router.delete("/{client_id}")
def delete_client(
    client_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    ClientService(db).delete_client(client_id)
    return {"message": "Client deleted"}
