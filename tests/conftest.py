"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from userlookup.database import Database
from userlookup.dbmodels import Base, Users

SEEDED_USERS = [
    {"id": 1, "name": "Ada"},
    {"id": 2, "name": "Grace"},
    {"id": 3, "name": "Alan"},
]


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> Generator[str, None, None]:
    """Create a SQLite database file holding ``SEEDED_USERS`` and return its URL."""
    url = f"sqlite:///{tmp_path / 'users.db'}"

    engine = create_engine(url)
    Base.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(Users.__table__.insert(), SEEDED_USERS)
    engine.dispose()

    yield url


@pytest_asyncio.fixture(scope="function")
async def database(database_url: str) -> Any:
    """Provide a connected ``Database`` for the seeded file."""
    db = Database(database_url)
    await db.connect()
    yield db
    await db.dispose()


@pytest.fixture(scope="function")
def client(database_url: str) -> Generator[TestClient, None, None]:
    """TestClient running the full lifespan against the seeded database."""
    from userlookup.api.app import create_app

    app = create_app(Database(database_url))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def broken_storage_client(database_url: str) -> Generator[TestClient, None, None]:
    """TestClient whose database connects but has lost its users table."""
    from userlookup.api.app import create_app

    engine = create_engine(database_url)
    with engine.begin() as conn:
        conn.execute(text('DROP TABLE "User"'))
    engine.dispose()

    app = create_app(Database(database_url))
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
