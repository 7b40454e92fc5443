import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_fulfilment.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SERIALIZE_CREATION_PER_LOCATION"] = "true"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from fulfilment.domain.models import Location, Warehouse
from fulfilment.errors import InvalidReferenceError
from fulfilment.main import app

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    # Use a temporary file for SQLite database
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    # Create test engine and session with proper SQLite settings
    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema and seed data
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Dispose the engine to close all connections
        test_engine.dispose()

        # Clean up - remove test database file and directory
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from fulfilment.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


# ============================================================================
# IN-MEMORY PORTS FOR RULE TESTS
# ============================================================================


class InMemoryWarehouseStore:
    """WarehouseStore keeping warehouses in a dict and recording every write."""

    def __init__(self, warehouses: list[Warehouse] | None = None):
        self.warehouses: dict[str, Warehouse] = {
            w.business_unit_code: w for w in (warehouses or [])
        }
        self.created: list[Warehouse] = []
        self.updated: list[Warehouse] = []
        self.removed: list[Warehouse] = []

    def get_all(self) -> list[Warehouse]:
        return list(self.warehouses.values())

    def find_by_business_unit_code(self, business_unit_code: str) -> Warehouse | None:
        return self.warehouses.get(business_unit_code)

    def create(self, warehouse: Warehouse) -> None:
        self.created.append(warehouse)
        self.warehouses[warehouse.business_unit_code] = warehouse

    def update(self, warehouse: Warehouse) -> None:
        self.updated.append(warehouse)
        self.warehouses[warehouse.business_unit_code] = warehouse

    def remove(self, warehouse: Warehouse) -> None:
        self.removed.append(warehouse)
        self.warehouses.pop(warehouse.business_unit_code, None)

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.updated) + len(self.removed)


class StaticLocationResolver:
    def __init__(self, *locations: Location):
        self.locations = {loc.identification: loc for loc in locations}

    def resolve_by_identifier(self, identifier: str) -> Location:
        try:
            return self.locations[identifier]
        except KeyError:
            raise InvalidReferenceError(f"Location not found: {identifier}") from None


FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def zwolle() -> Location:
    return Location("ZWOLLE-001", max_number_of_warehouses=1, max_capacity=40)


@pytest.fixture
def store() -> InMemoryWarehouseStore:
    return InMemoryWarehouseStore()


@pytest.fixture
def locations(zwolle) -> StaticLocationResolver:
    return StaticLocationResolver(
        zwolle,
        Location("AMSTERDAM-001", max_number_of_warehouses=5, max_capacity=100),
    )
