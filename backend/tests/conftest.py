import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.infrastructure.db.session import Base, SessionLocal, engine, get_db
from app.infrastructure.logging import configure_logging
from app.main import app


@pytest.fixture(scope="session", autouse=True)
def logging_configured():
    configure_logging(level="INFO", json_logs=False)


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def hardened_errors(monkeypatch):
    monkeypatch.setattr(settings, "expose_error_details", False)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
