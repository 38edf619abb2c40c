# erp_api/modules/auth/service.py
import logging

from sqlalchemy.orm import Session

from erp_api.config.settings import settings
from erp_api.core.auth.schemas import Identity, UserRole
from erp_api.core.auth.security import TokenIdentityStore, identity_store, verify_password
from erp_api.core.errors import Unauthenticated
from erp_api.modules.users.repository import UserRepository
from erp_api.modules.users.schemas import UserCreate, UserResponse
from erp_api.modules.users.service import UserService
from erp_api.shared.database.models import User
from .schemas import LoginRequest, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)

class AuthService:
    """
    Registration and login (token issuance)
    """

    def __init__(self, db: Session, token_store: TokenIdentityStore = identity_store):
        self.db = db
        self.repository = UserRepository(db)
        self.token_store = token_store

    def register(self, data: RegisterRequest) -> User:
        """Public sign-up always yields an operator; admins are created by admins"""
        return UserService(self.db).create_user(
            UserCreate(
                name=data.name,
                email=data.email,
                password=data.password,
                role=UserRole.OPERATOR
            )
        )

    def login(self, credentials: LoginRequest) -> TokenResponse:
        user = self.repository.get_by_email(credentials.email)
        if not user or not verify_password(credentials.password, user.password_hash):
            logger.info(f"Failed login for {credentials.email}")
            raise Unauthenticated("Invalid email or password")

        token = self.token_store.issue(Identity(user_id=user.id, role=UserRole(user.role)))
        return TokenResponse(
            token=token,
            expires_in=settings.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user)
        )
