"""Shared fixtures: in-memory database, API client and users of every role."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-recruitme-tests")
os.environ.setdefault("AUTO_CREATE_TABLES", "0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recruitme.main import app
from recruitme.core.security import Identity, create_access_token, hash_password
from recruitme.db.base import Base
from recruitme.db.models import Application, Job, JobStatus, Role, User
from recruitme.db.session import enable_sqlite_foreign_keys, get_db


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "testpass123"
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db():
    """Provide a database session for tests."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def create_user(db, role: Role, name: str, email: str) -> Identity:
    user = User(name=name, email=email, password_hash=TEST_PASSWORD_HASH, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return Identity(id=user.id, email=user.email, role=user.role)


def auth_headers(identity: Identity) -> dict:
    token = create_access_token(identity.id, identity.email, identity.role)
    return {"Authorization": f"Bearer {token}"}


def create_job(db, company: Identity, title: str = "Backend Engineer", status: JobStatus = JobStatus.DRAFT) -> Job:
    job = Job(company_id=company.id, title=title, description="Build APIs", status=status)
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def get_application(db, job_id: str, applicant_id: str):
    """Read the row straight from the database, bypassing the identity map."""
    db.expire_all()
    return (
        db.query(Application)
        .filter(Application.job_id == job_id, Application.applicant_id == applicant_id)
        .first()
    )


@pytest.fixture
def company(db) -> Identity:
    return create_user(db, Role.COMPANY, "Acme Corp", "hr@acme.example.com")


@pytest.fixture
def other_company(db) -> Identity:
    return create_user(db, Role.COMPANY, "Globex", "jobs@globex.example.com")


@pytest.fixture
def applicant(db) -> Identity:
    return create_user(db, Role.APPLICANT, "Ada Lovelace", "ada@example.com")


@pytest.fixture
def other_applicant(db) -> Identity:
    return create_user(db, Role.APPLICANT, "Alan Turing", "alan@example.com")


@pytest.fixture
def admin(db) -> Identity:
    return create_user(db, Role.ADMIN, "Site Admin", "admin@example.com")


@pytest.fixture
def draft_job(db, company) -> Job:
    return create_job(db, company)


@pytest.fixture
def open_job(db, company) -> Job:
    return create_job(db, company, title="Data Engineer", status=JobStatus.OPEN)
