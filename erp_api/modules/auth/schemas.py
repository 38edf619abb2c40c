# erp_api/modules/auth/schemas.py
from pydantic import EmailStr, Field, field_validator

from erp_api.modules.users.schemas import UserResponse
from erp_api.shared.schemas import ERPBaseModel

class RegisterRequest(ERPBaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: str):
        return v.lower()

class LoginRequest(ERPBaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: str):
        return v.strip().lower()

class TokenResponse(ERPBaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
