import os
import threading

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")
os.environ.setdefault("DATABASE_NAME", ":memory:")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_S3_BUCKET", "docdrop-test")

from docdrop.db.base import Base
from docdrop.main import app
from docdrop.models import Upload
from docdrop.services.document_store import SqlDocumentStore, get_document_store
from docdrop.services.object_store import get_object_store


class FakeObjectStore:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.puts: list[dict] = []
        self.objects: dict[tuple[str, str], bytes] = {}
        self._lock = threading.Lock()

    def put_object(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        if self.error is not None:
            raise self.error
        with self._lock:
            self.puts.append(
                {"bucket": bucket, "key": key, "body": body, "content_type": content_type}
            )
            self.objects[(bucket, key)] = body


class FakeDocumentStore:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.inserts: list[tuple[str, dict]] = []
        self._lock = threading.Lock()

    def insert_one(self, collection: str, record: dict) -> str:
        if self.error is not None:
            raise self.error
        with self._lock:
            self.inserts.append((collection, record))
            return str(len(self.inserts))


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session_factory(engine):
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    yield factory
    with factory() as db:
        db.execute(delete(Upload))
        db.commit()


@pytest.fixture()
def document_store(session_factory) -> SqlDocumentStore:
    return SqlDocumentStore(session_factory)


@pytest.fixture()
def object_store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture()
def make_client():
    def _make(object_store, document_store) -> TestClient:
        app.dependency_overrides[get_object_store] = lambda: object_store
        app.dependency_overrides[get_document_store] = lambda: document_store
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture()
def client(make_client, object_store, document_store):
    with make_client(object_store, document_store) as test_client:
        yield test_client
