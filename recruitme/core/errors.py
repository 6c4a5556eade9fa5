"""
Domain errors for the hiring workflow.

Each error is an HTTPException with a fixed status code, so services can raise
them directly and routes let them propagate unchanged.
"""
from typing import Optional
from fastapi import HTTPException, status


class RecruitMeError(HTTPException):
    """Base class for expected, caller-facing failures."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Request failed"

    def __init__(self, detail: Optional[str] = None, headers: Optional[dict] = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class Unauthenticated(RecruitMeError):
    """Missing, malformed, expired or otherwise invalid credential."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(RecruitMeError):
    """Authenticated, but the role may not perform the operation."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFound(RecruitMeError):
    """
    Resource absent, not owned by the caller, or transition precondition unmet.

    The three cases share one error so that callers cannot probe for
    resources owned by someone else or for their current state.
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(RecruitMeError):
    """Uniqueness conflict, e.g. a duplicate application or email."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Conflict"


class ValidationError(RecruitMeError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Invalid input"
