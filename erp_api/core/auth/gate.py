"""
Auth gate: verify a presented token, then check the role a handler requires.

    NoCredential -> Authenticated(identity) -> Authorized | Forbidden

Both steps are pure; a failure ends the request and the caller has to log
in again to get a new token.
"""

from typing import Optional

from erp_api.core.errors import Forbidden, Unauthenticated
from erp_api.shared.repositories import IdentityStore
from .schemas import Identity, UserRole


def authorize(identity: Identity, required_role: Optional[UserRole] = None) -> None:
    """Allow any identity when no role is required, otherwise an exact role match"""
    if required_role is not None and identity.role != required_role:
        raise Forbidden(f"Operation requires the '{required_role.value}' role")


class AuthGate:

    def __init__(self, identity_store: IdentityStore):
        self.identity_store = identity_store

    def verify(self, token: Optional[str]) -> Identity:
        if not token:
            raise Unauthenticated("Not authenticated")

        identity = self.identity_store.validate_token(token)
        if identity is None:
            raise Unauthenticated("Invalid or expired token")

        return identity

    def authorize(self, identity: Identity, required_role: Optional[UserRole] = None) -> None:
        authorize(identity, required_role)
