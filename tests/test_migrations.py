"""
Tests for schema setup: alembic migrations and create_all.
"""
from sqlalchemy import create_engine, inspect, text

from recruitme.db.init_db import init_db
from recruitme.db.migrate import run_migrations

EXPECTED_TABLES = {"users", "applicant_skills", "jobs", "job_skills", "applications"}


def test_run_migrations_creates_schema(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'migrated.db'}"

    run_migrations(database_url)
    # Running again is a no-op at head
    run_migrations(database_url)

    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        assert EXPECTED_TABLES <= set(inspector.get_table_names())

        unique_columns = [
            sorted(constraint["column_names"]) for constraint in inspector.get_unique_constraints("applications")
        ]
        assert ["applicant_id", "job_id"] in unique_columns

        with engine.connect() as conn:
            revision = conn.execute(text("SELECT version_num FROM alembic_version")).scalar()
        assert revision == "3a1c9e5d7b20"
    finally:
        engine.dispose()


def test_init_db_creates_schema(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'created.db'}")
    try:
        init_db(engine)
        assert EXPECTED_TABLES <= set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
