from .router import router as auth_router
from .service import AuthService

__all__ = [
    "auth_router",
    "AuthService"
]
