import os
import tempfile
from datetime import datetime
from decimal import Decimal
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_ledger.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["DEPOSIT_CAP_RATIO"] = "0.25"
os.environ["BEST_CLIENTS_DEFAULT_LIMIT"] = "2"
os.environ["LOG_LEVEL"] = "INFO"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from app.main import app
from app.db.models.contract import Contract as ContractModel
from app.db.models.job import Job as JobModel
from app.db.models.profile import Profile as ProfileModel

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh database for each test and run migrations."""
    # Use a temporary file for SQLite database
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    # Create test engine with proper SQLite settings
    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
        poolclass=None,  # Don't use connection pooling for SQLite
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    try:
        command.upgrade(alembic_cfg, "head")
    except Exception as e:
        print(f"Migration failed: {e}")
        raise

    try:
        yield test_engine
    finally:
        # Dispose the engine to close all connections
        test_engine.dispose()

        # Clean up - remove test database file and directory
        try:
            if os.path.exists(test_db_path):
                os.remove(test_db_path)
            # Also remove WAL files
            for suffix in ["-wal", "-shm"]:
                wal_path = f"{test_db_path}{suffix}"
                if os.path.exists(wal_path):
                    os.remove(wal_path)
            if os.path.exists(temp_db_dir):
                os.rmdir(temp_db_dir)
        except Exception as e:
            print(f"Cleanup failed: {e}")


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory bound to the test database, for tests needing several sessions."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


# ============================================================================
# SEED HELPERS
# ============================================================================


def _create_profile(
    db: Session,
    first_name: str,
    last_name: str,
    profession: str,
    balance: str | Decimal,
    type: str,
) -> ProfileModel:
    profile = ProfileModel(
        first_name=first_name,
        last_name=last_name,
        profession=profession,
        balance=Decimal(balance),
        type=type,
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def _create_contract(
    db: Session,
    client_id: int,
    contractor_id: int,
    status: str = "in_progress",
    terms: str = "bla bla bla",
) -> ContractModel:
    contract = ContractModel(
        terms=terms,
        status=status,
        client_id=client_id,
        contractor_id=contractor_id,
    )
    db.add(contract)
    db.commit()
    db.refresh(contract)
    return contract


def _create_job(
    db: Session,
    contract_id: int,
    price: str | Decimal,
    description: str = "work",
    payment_date: datetime | None = None,
) -> JobModel:
    """Create a job. Passing payment_date creates it already paid."""
    job = JobModel(
        description=description,
        price=Decimal(price),
        contract_id=contract_id,
        paid=True if payment_date is not None else None,
        payment_date=payment_date,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def client_profile(db: Session) -> ProfileModel:
    """A client with 1000 in balance."""
    return _create_profile(db, "Harry", "Potter", "Wizard", "1000", "client")


@pytest.fixture(scope="function")
def other_client_profile(db: Session) -> ProfileModel:
    return _create_profile(db, "Mr", "Robot", "Hacker", "231.11", "client")


@pytest.fixture(scope="function")
def contractor_profile(db: Session) -> ProfileModel:
    return _create_profile(db, "Linus", "Torvalds", "Programmer", "64", "contractor")


@pytest.fixture(scope="function")
def other_contractor_profile(db: Session) -> ProfileModel:
    return _create_profile(db, "John", "Lenon", "Musician", "64", "contractor")


@pytest.fixture(scope="function")
def contract(db: Session, client_profile, contractor_profile) -> ContractModel:
    """An in-progress contract between client_profile and contractor_profile."""
    return _create_contract(db, client_profile.id, contractor_profile.id)


@pytest.fixture(scope="function")
def unpaid_job(db: Session, contract) -> JobModel:
    """An unpaid job of 200 on contract."""
    return _create_job(db, contract.id, "200", description="Build a website")


@pytest.fixture(scope="function")
def make_profile(db: Session):
    """Factory fixture: make_profile(first_name, last_name, profession, balance, type)."""

    def _make(*args, **kwargs) -> ProfileModel:
        return _create_profile(db, *args, **kwargs)

    return _make


@pytest.fixture(scope="function")
def make_contract(db: Session):
    """Factory fixture: make_contract(client_id, contractor_id, status="in_progress")."""

    def _make(*args, **kwargs) -> ContractModel:
        return _create_contract(db, *args, **kwargs)

    return _make


@pytest.fixture(scope="function")
def make_job(db: Session):
    """Factory fixture: make_job(contract_id, price, payment_date=None)."""

    def _make(*args, **kwargs) -> JobModel:
        return _create_job(db, *args, **kwargs)

    return _make
