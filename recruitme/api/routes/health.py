"""
Liveness endpoint for load balancers and deploy checks.
"""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from recruitme.db.session import get_db

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check(db: Session = Depends(get_db)):
    """
    Report API and database status.

    Always 200 so the process is not restarted for a database outage;
    `status` is "degraded" when the database cannot be reached.
    """
    try:
        db.execute(text("SELECT 1"))
        database, status = "connected", "healthy"
    except Exception as e:
        logger.warning(f"Health check could not reach the database: {e}", exc_info=True)
        database, status = f"error: {type(e).__name__}", "degraded"

    return {
        "status": status,
        "database": database,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }
