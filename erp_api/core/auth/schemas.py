from pydantic import BaseModel, ConfigDict
from enum import Enum

class UserRole(str, Enum):
    """Role claims carried by identities"""
    ADMIN = "admin"
    OPERATOR = "operator"

class Identity(BaseModel):
    """Authenticated caller, as read from a verified token"""
    model_config = ConfigDict(frozen=True)

    user_id: int
    role: UserRole
