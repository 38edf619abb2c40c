# erp_api/modules/users/service.py
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from erp_api.config.database import begin_write
from erp_api.core.auth.security import hash_password
from erp_api.core.errors import Conflict, ResourceNotFound
from erp_api.shared.database.models import User
from .repository import UserRepository
from .schemas import UserCreate

logger = logging.getLogger(__name__)

class UserService:
    """
    User management (admin) and self-service profile updates
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def list_users(self) -> List[User]:
        return self.repository.list()

    def get_user(self, user_id: int) -> User:
        user = self.repository.get(user_id)
        if not user:
            raise ResourceNotFound("User", user_id)
        return user

    def create_user(self, user_data: UserCreate) -> User:
        begin_write(self.db)
        if self.repository.email_taken(user_data.email):
            raise Conflict("Email already in use")

        user = self.repository.create({
            "name": user_data.name,
            "email": user_data.email,
            "password_hash": hash_password(user_data.password),
            "role": user_data.role.value
        })
        self.db.commit()
        logger.info(f"User {user.id} created with role {user.role}")
        return user

    def update_user(self, user_id: int, changes: Dict[str, Any]) -> User:
        """Apply a partial update; ``changes`` only holds the fields that were sent"""
        begin_write(self.db)
        self.get_user(user_id)

        changes = {key: value for key, value in changes.items() if value is not None}
        if "email" in changes and self.repository.email_taken(changes["email"], exclude_id=user_id):
            raise Conflict("Email already in use")
        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"))
        if "role" in changes:
            changes["role"] = getattr(changes["role"], "value", changes["role"])

        user = self.repository.update(user_id, changes)
        self.db.commit()
        return user

    def delete_user(self, user_id: int) -> None:
        begin_write(self.db)
        if not self.repository.delete(user_id):
            raise ResourceNotFound("User", user_id)
        self.db.commit()
        logger.info(f"User {user_id} deleted")
