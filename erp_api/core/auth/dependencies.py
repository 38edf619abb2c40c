from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .gate import AuthGate, authorize
from .schemas import Identity, UserRole
from .security import identity_store

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_gate() -> AuthGate:
    return AuthGate(identity_store)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: AuthGate = Depends(get_auth_gate)
) -> Identity:
    """Verify the bearer token of the current request"""
    token = credentials.credentials if credentials else None
    return gate.verify(token)


def require_role(role: Optional[UserRole] = None):
    """
    Per-handler guard: authenticated identity, plus ``role`` when given.

    Usage:
        identity: Identity = Depends(require_role(UserRole.ADMIN))
    """
    def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        authorize(identity, role)
        return identity

    return dependency
