import logging
from sqlalchemy.engine import Engine

from recruitme.db.base import Base
from recruitme.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(bind: Engine = None):
    """Create every table registered on Base.metadata (no-op for existing tables)."""
    # Registers all models with Base.metadata
    import recruitme.db.models  # noqa: F401

    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database tables ensured: {', '.join(sorted(Base.metadata.tables))}")
