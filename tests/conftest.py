import os
from datetime import datetime, timezone

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jobboard")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.database import Base, _load_models, get_db
from jobboard.dependencies import get_current_employer, get_current_identity, get_current_seeker
from jobboard.main import app
from jobboard.models.user import UserRole
from jobboard.services.blob_store import BlobStore, get_blob_store
from jobboard.services.token_service import Identity

BLOB_BASE_URL = "https://blobs.example.test"
FAR_FUTURE = datetime(2099, 1, 1, tzinfo=timezone.utc)


class FakeS3Client:
    """In-memory stand-in for the boto3 S3 client (put_object / delete_object only)."""

    def __init__(self):
        self.objects = {}
        self.deleted = []

    def put_object(self, Bucket, Key, Body, ContentType):
        self.objects[Key] = (Body, ContentType)

    def delete_object(self, Bucket, Key):
        self.deleted.append(Key)
        self.objects.pop(Key, None)


@pytest.fixture
def s3_client() -> FakeS3Client:
    return FakeS3Client()


@pytest.fixture
def blob_store(s3_client: FakeS3Client) -> BlobStore:
    return BlobStore(s3_client, "test-bucket", BLOB_BASE_URL)


@pytest.fixture
def employer_identity() -> Identity:
    return Identity(user_id="hrd-1", role=UserRole.EMPLOYER, expires_at=FAR_FUTURE)


@pytest.fixture
def seeker_identity() -> Identity:
    return Identity(user_id="soc-1", role=UserRole.SEEKER, expires_at=FAR_FUTURE)


def _stub_client(identity: Identity, blob_store: BlobStore):
    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_identity] = lambda: identity
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    if identity.role == UserRole.EMPLOYER:
        app.dependency_overrides[get_current_employer] = lambda: identity
    else:
        app.dependency_overrides[get_current_seeker] = lambda: identity
    return TestClient(app)


@pytest.fixture
def employer_client(employer_identity: Identity, blob_store: BlobStore):
    yield _stub_client(employer_identity, blob_store)
    app.dependency_overrides.clear()


@pytest.fixture
def seeker_client(seeker_identity: Identity, blob_store: BlobStore):
    yield _stub_client(seeker_identity, blob_store)
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Unauthenticated client with a placeholder session."""

    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---- SQLite-backed fixtures for end-to-end flows ----


@pytest.fixture
def engine():
    _load_models()
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def api(session_factory, blob_store: BlobStore):
    def _db_override():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def register(api):
    """Register an account and return (token, body)."""

    def _register(role: str, email: str, password: str = "secret123", name: str = "Test User"):
        resp = api.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password, "role": role},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["access_token"], body

    return _register


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
