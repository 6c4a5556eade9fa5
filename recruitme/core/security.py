import logging
import bcrypt
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from recruitme.core import config
from recruitme.core.errors import Unauthenticated
from recruitme.db.models.user import Role

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as carried in the bearer token."""
    id: str
    email: str
    role: Role


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password (max 72 bytes in UTF-8, checked by the request schema)

    Returns:
        Hashed password string

    Raises:
        ValueError: If the password exceeds the bcrypt limit
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        raise ValueError("Password too long (bcrypt limit 72 bytes)")
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against its hash.

    Returns False for any malformed input instead of raising.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(password_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        logger.warning(f"Password verification failed on unrecognised hash: {e}")
        return False


def create_access_token(user_id: str, email: str, role: Role, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {
        "sub": user_id,
        "email": email,
        "role": Role(role).value,
        "exp": expire,
    }
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_access_token(token: Optional[str]) -> Identity:
    """
    Validate a bearer token and return the caller identity.

    Pure: signature, expiry and claims only, no database access.

    Raises:
        Unauthenticated: on a missing, malformed, expired or incomplete token
    """
    if not token:
        raise Unauthenticated("Not authenticated")

    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError:
        raise Unauthenticated("Invalid token")

    user_id = payload.get("sub")
    email = payload.get("email")
    role = payload.get("role")
    if not user_id or not email or not role:
        raise Unauthenticated("Invalid token")

    try:
        role = Role(role)
    except ValueError:
        raise Unauthenticated("Invalid token")

    return Identity(id=user_id, email=email, role=role)
