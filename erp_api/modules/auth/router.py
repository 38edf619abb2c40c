# erp_api/modules/auth/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from erp_api.config.database import get_db
from erp_api.core.auth import Identity, require_role
from erp_api.modules.users.schemas import ProfileUpdate, UserResponse
from erp_api.modules.users.service import UserService
from .service import AuthService
from .schemas import LoginRequest, RegisterRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """
    Self-registration; the account gets the operator role
    """
    return AuthService(db).register(data)

@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Exchange email and password for a bearer token (valid 8 hours by default)
    """
    return AuthService(db).login(credentials)

@router.get("/me", response_model=UserResponse)
def get_profile(
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return UserService(db).get_user(identity.user_id)

@router.put("/me", response_model=UserResponse)
def update_profile(
    data: ProfileUpdate,
    identity: Identity = Depends(require_role()),
    db: Session = Depends(get_db)
):
    return UserService(db).update_user(identity.user_id, data.model_dump(exclude_unset=True))
