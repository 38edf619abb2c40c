from .dependencies import get_current_identity, require_role
from .gate import AuthGate, authorize
from .schemas import Identity, UserRole

__all__ = [
    "AuthGate",
    "Identity",
    "UserRole",
    "authorize",
    "get_current_identity",
    "require_role"
]
