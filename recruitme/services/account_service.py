"""
Account service: registration and login.
"""
import logging
from typing import Dict
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recruitme.core.errors import Conflict, Unauthenticated
from recruitme.core.security import create_access_token, hash_password, verify_password
from recruitme.db.models import Role, User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(db: Session, name: str, email: str, password: str, role: Role) -> User:
    """
    Create a user with a fixed role.

    Raises:
        Conflict: if the email is already registered
    """
    email = normalize_email(email)
    if db.query(User.id).filter(User.email == email).first():
        raise Conflict("Email already registered")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=Role(role),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Concurrent registration won the unique index
        db.rollback()
        raise Conflict("Email already registered")
    db.refresh(user)

    logger.info(f"User registered: user_id={user.id}, role={user.role.value}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> Dict[str, str]:
    """
    Check credentials and issue an access token.

    Raises:
        Unauthenticated: on unknown email or wrong password (indistinguishable)
    """
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed: invalid credentials")
        raise Unauthenticated("Invalid email or password")

    token = create_access_token(user.id, user.email, user.role)
    logger.info(f"Login succeeded: user_id={user.id}, role={user.role.value}")

    return {
        "access_token": token,
        "token_type": "bearer",
        "role": user.role.value,
    }
