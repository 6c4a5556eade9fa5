from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from recruitme.core.gating import enforce_role
from recruitme.core.security import Identity, decode_access_token
from recruitme.db.models.user import Role

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    """Resolve the bearer token into the caller identity (401 on failure)."""
    token = credentials.credentials if credentials else None
    return decode_access_token(token)


def require_role(*roles: Role):
    """
    Dependency factory that authenticates the caller and checks their role.

    Returns:
        Identity of the caller if their role is one of `roles`

    Raises:
        Unauthenticated (401) or Forbidden (403)
    """
    def role_checker(identity: Identity = Depends(get_current_identity)) -> Identity:
        return enforce_role(identity, roles)

    return role_checker


require_company = require_role(Role.COMPANY)
require_applicant = require_role(Role.APPLICANT)
require_admin = require_role(Role.ADMIN)
