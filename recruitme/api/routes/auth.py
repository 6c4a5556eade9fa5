import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from recruitme.db.session import get_db
from recruitme.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from recruitme.schemas.common import IdResponse, MessageResponse
from recruitme.services.account_service import authenticate_user, register_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


# ✅ REGISTER (role is fixed for the lifetime of the account)
@router.post("/register", response_model=IdResponse)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db)
):
    try:
        user = register_user(db, request.name, request.email, request.password, request.role)
        return {"id": user.id}
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Registration failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user"
        )


# ✅ LOGIN -> JWT carrying user id, email and role
@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    try:
        return authenticate_user(db, request.email, request.password)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log in"
        )


# ✅ LOGOUT (tokens are stateless; the client discards its copy)
@router.post("/logout", response_model=MessageResponse)
def logout():
    return {"message": "Logout successful"}
