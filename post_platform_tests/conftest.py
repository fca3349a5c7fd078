import os
import tempfile

# Point the service at a throwaway database before any app module is imported
TEST_DB_DIR = tempfile.mkdtemp(prefix="post_service_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_DB_DIR, 'test.db')}"
os.environ["LOG_LEVEL"] = "INFO"

import pytest
from fastapi.testclient import TestClient

from post_platform.migration import downgrade, upgrade
from post_platform.post_service.db import SessionLocal, engine
from post_platform.post_service.main import app


@pytest.fixture(autouse=True)
def reset_database():
    # Rebuild the schema from the migrations before each test
    downgrade(engine, "base")
    upgrade(engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
