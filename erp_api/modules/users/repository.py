# erp_api/modules/users/repository.py
from typing import Optional

from erp_api.shared.database.crud import CRUDRepository
from erp_api.shared.database.models import User

class UserRepository(CRUDRepository[User]):
    """
    Data access for users
    """

    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(User.id).filter(User.email == email.lower())
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None
