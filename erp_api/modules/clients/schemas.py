# erp_api/modules/clients/schemas.py
from pydantic import EmailStr, Field, field_validator
from typing import Optional

from erp_api.shared.schemas import ERPBaseModel

class ClientCreate(ERPBaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1, max_length=255)

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: str):
        return v.lower()

class ClientUpdate(ERPBaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    address: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator('email')
    @classmethod
    def lower_email(cls, v: Optional[str]):
        return v.lower() if v is not None else v

class ClientResponse(ERPBaseModel):
    id: int
    name: str
    email: str
    phone: str
    address: str
