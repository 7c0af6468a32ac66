"""Shared test fixtures and utilities for all tests."""
import asyncio
import os
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.application import create_app
from src.app.containers import Container, WIRED_MODULES
from src.client import StudioClient
from src.shared.database.database import Database, Base, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork


@pytest.fixture(scope="module")
def async_db_url(tmp_path_factory):
    """
    Async database URL for the test module.

    Uses a throwaway SQLite file by default. Set TEST_WITH_POSTGRES=1 to run
    against a PostgreSQL testcontainer instead (requires Docker).
    """
    if os.getenv("TEST_WITH_POSTGRES"):
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer("postgres:16-alpine") as postgres:
            connection_url = postgres.get_connection_url()
            yield connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
        return

    db_file = tmp_path_factory.mktemp("db") / "lash_studio.sqlite"
    yield f"sqlite+aiosqlite:///{db_file}"


@pytest.fixture(scope="module")
def test_settings_override(async_db_url):
    """
    Centralized settings override for all test configurations.
    Module-scoped to set up environment once per test module.
    """
    previous = os.environ.get("DATABASE_URL")
    os.environ["DATABASE_URL"] = async_db_url

    yield

    if previous is None:
        os.environ.pop("DATABASE_URL", None)
    else:
        os.environ["DATABASE_URL"] = previous


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Args:
        db: Database instance to test
        max_attempts: Maximum number of connection attempts

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create a connected database instance on the test database.
    Function-scoped for test isolation.
    """
    db_settings = DatabaseSettings(db_url=async_db_url, max_attempts=3, retry_delay_seconds=0.1)
    db = Database(db_settings)
    await wait_till_db_ready(db)
    await db.connect()
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    async with db._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db


@pytest.fixture(scope="function")
def test_container(test_settings_override, clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the container's database singleton with the test database.
    """
    container = Container()
    container.database.override(providers.Object(clean_database))
    container.wire(modules=WIRED_MODULES)
    yield container
    container.database.reset_override()
    container.unwire()


@asynccontextmanager
async def _prepared_lifespan(app: FastAPI):
    # Tables are already created by the clean_database fixture
    yield


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    yield create_app(test_container, lifespan=_prepared_lifespan)


@pytest_asyncio.fixture
async def studio_client(test_app):
    """
    Create a studio API client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = StudioClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


@pytest_asyncio.fixture(scope="function")
async def unit_of_work(clean_database, test_container):
    """
    Fixture for a UnitOfWork instance with a clean database.
    Uses the container's entity_mapper singleton.
    """
    entity_mapper = test_container.entity_mapper()
    yield UnitOfWork(clean_database, entity_mapper)


# =========================================================================
# Common repository fixtures (available to all test directories)
# =========================================================================

@pytest_asyncio.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest_asyncio.fixture
def technical_sheet_repository(test_container):
    """Get technical sheet repository from container."""
    return test_container.technical_sheet_repository()


@pytest_asyncio.fixture
def appointment_repository(test_container):
    """Get appointment repository from container."""
    return test_container.appointment_repository()


# =========================================================================
# Common service fixtures (available to all test directories)
# =========================================================================

@pytest_asyncio.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()


@pytest_asyncio.fixture
def technical_sheet_service(test_container):
    """Get technical sheet service from container."""
    return test_container.technical_sheet_service()


@pytest_asyncio.fixture
def appointment_service(test_container):
    """Get appointment service from container."""
    return test_container.appointment_service()


@pytest_asyncio.fixture
def dashboard_service(test_container):
    """Get dashboard service from container."""
    return test_container.dashboard_service()
