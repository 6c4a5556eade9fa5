"""
Role gate.

Coarse, role-based eligibility for an operation. Resource ownership is checked
afterwards by recruitme.core.ownership.
"""
import logging
from typing import Iterable
from recruitme.core.errors import Forbidden
from recruitme.core.security import Identity
from recruitme.db.models.user import Role

logger = logging.getLogger(__name__)


def has_role(identity: Identity, roles: Iterable[Role]) -> bool:
    """Check if the identity holds one of the required roles."""
    return identity.role in set(roles)


def enforce_role(identity: Identity, roles: Iterable[Role]) -> Identity:
    """
    Allow the identity through or raise Forbidden.

    Raises:
        Forbidden: if identity.role is not in roles
    """
    roles = frozenset(roles)
    if not has_role(identity, roles):
        logger.warning(
            f"Role check failed: user_id={identity.id}, role={identity.role.value}, "
            f"required={sorted(role.value for role in roles)}"
        )
        raise Forbidden()
    return identity
