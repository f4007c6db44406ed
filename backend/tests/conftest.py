import os
import tempfile
from collections.abc import Generator
from contextlib import nullcontext

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="linkup-logs-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from linkup.api.deps import get_db, get_session_factory
from linkup.main import app
from linkup.models import *  # noqa: F403

from fixtures.factories import *  # noqa: F403


@pytest.fixture(scope="session", autouse=True)
def create_test_database() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_transaction(create_test_database: Engine) -> Generator[Session, None, None]:
    connection = create_test_database.connect()
    transaction = connection.begin()

    session = Session(bind=connection)

    def override_get_db() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_db] = override_get_db
    # Background tasks share the test session so their writes stay in the
    # rolled back outer transaction.
    app.dependency_overrides[get_session_factory] = lambda: lambda: nullcontext(
        session
    )

    yield session

    session.close()
    transaction.rollback()
    connection.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
