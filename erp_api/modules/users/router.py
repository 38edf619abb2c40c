# erp_api/modules/users/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from erp_api.config.database import get_db
from erp_api.core.auth import Identity, UserRole, require_role
from erp_api.shared.schemas import MAX_ID
from .service import UserService
from .schemas import UserCreate, UserUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["Users - Admin"])

@router.get("", response_model=List[UserResponse])
def list_users(
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    return UserService(db).list_users()

@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    return UserService(db).get_user(user_id)

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    """
    Create a user with any role
    """
    return UserService(db).create_user(user_data)

@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_data: UserUpdate,
    user_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    return UserService(db).update_user(user_id, user_data.model_dump(exclude_unset=True))

@router.delete("/{user_id}")
def delete_user(
    user_id: int = Path(..., le=MAX_ID),
    identity: Identity = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    """
    Delete a user. Tokens already issued to it stay valid until they expire.
    """
    UserService(db).delete_user(user_id)
    return {"message": "User deleted"}
