# erp_api/modules/users/schemas.py
from pydantic import EmailStr, Field, field_validator
from typing import Optional

from erp_api.core.auth.schemas import UserRole
from erp_api.shared.schemas import ERPBaseModel

# ==================== REQUEST SCHEMAS ====================

class UserCreate(ERPBaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: UserRole = Field(UserRole.OPERATOR)

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: str):
        return v.lower()

class UserUpdate(ERPBaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=72)
    role: Optional[UserRole] = None

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: Optional[str]):
        return v.lower() if v is not None else v

class ProfileUpdate(ERPBaseModel):
    """Self-service update; the role is not editable here"""
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=72)

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: Optional[str]):
        return v.lower() if v is not None else v

# ==================== RESPONSE SCHEMAS ====================

class UserResponse(ERPBaseModel):
    id: int
    name: str
    email: str
    role: UserRole
