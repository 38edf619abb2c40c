import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, ExpiredSignatureError, jwt
from passlib.context import CryptContext

from erp_api.config.settings import settings
from .schemas import Identity, UserRole

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


class TokenIdentityStore:
    """
    Issues and validates signed identity tokens.

    Tokens only carry the user id and role claim; validation never touches
    the users table, so a token stays valid until it expires.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 480
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, identity: Identity, expires_delta: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        claims = {
            "sub": str(identity.user_id),
            "role": identity.role.value,
            "iat": now,
            "exp": expire
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def validate_token(self, token: str) -> Optional[Identity]:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except JWTError as e:
            logger.info(f"Rejected invalid token: {e}")
            return None

        try:
            return Identity(user_id=int(payload["sub"]), role=UserRole(payload["role"]))
        except (KeyError, TypeError, ValueError):
            logger.info("Rejected token with malformed claims")
            return None


identity_store = TokenIdentityStore(
    secret_key=settings.secret_key,
    algorithm=settings.algorithm,
    expire_minutes=settings.access_token_expire_minutes
)
