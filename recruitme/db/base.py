from sqlalchemy.orm import declarative_base

# Shared by every model in recruitme.db.models and by alembic/env.py
Base = declarative_base()
