"""
Users module - account management for administrators.

- router.py: FastAPI endpoints (admin only)
- service.py: business rules (unique email, password hashing)
- repository.py: data access
- schemas.py: Pydantic request/response models
"""

from .router import router as users_router
from .service import UserService
from .repository import UserRepository

__all__ = [
    "users_router",
    "UserService",
    "UserRepository"
]
