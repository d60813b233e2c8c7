"""Shared pytest fixtures for lineup tests.

Provides an in-memory SQLite database, the store collection, factories
for lineups and channels, and a FastAPI test client wired to the same
session.
"""

import os

# CRITICAL: Point the app at an in-memory database BEFORE importing config
os.environ["DATABASE_URL"] = "sqlite://"

from typing import Callable, Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  (registers tables on Base)
from database import Base, enable_sqlite_foreign_keys, get_db
from schemas.lineup import ChannelSchema, LineupCreate, LineupSchema
from services.channel_store import ChannelStore
from services.collection import APICollection
from services.lineup_store import LineupStore


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def test_engine():
    """Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so the TestClient's worker
    threads see the same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Same FK enforcement as the app engine, so channel rows cascade on delete
    event.listen(engine, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine) -> Generator[Session, None, None]:
    """Database session bound to the per-test engine."""
    session_factory = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)
    session = session_factory()

    yield session

    session.close()


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def collection(db_session: Session) -> APICollection:
    return APICollection(db_session)


@pytest.fixture
def mock_channels() -> MagicMock:
    """Channel collaborator double returning no channels by default."""
    provider = MagicMock(spec=ChannelStore)
    provider.get_channels_for_lineup.return_value = []
    return provider


@pytest.fixture
def store_with_mock_channels(db_session: Session, mock_channels: MagicMock) -> LineupStore:
    return LineupStore(db_session, channels=mock_channels)


@pytest.fixture
def lineup_factory(collection: APICollection) -> Callable[..., LineupSchema]:
    """Insert lineups with unique device UUIDs."""
    counter = {"n": 0}

    def _create(**overrides) -> LineupSchema:
        counter["n"] += 1
        data = {
            "name": f"Lineup {counter['n']}",
            "discovery_address": "10.0.0.5",
            "port": 6077,
            "device_uuid": f"12345678-0000-0000-0000-{counter['n']:012d}",
        }
        data.update(overrides)
        return collection.lineups.insert(LineupCreate(**data))

    return _create


@pytest.fixture
def channel_factory(collection: APICollection) -> Callable[..., ChannelSchema]:
    def _create(lineup_id: int, number: float, **overrides) -> ChannelSchema:
        data = {
            "title": f"Channel {number}",
            "channel_number": number,
            "stream_url": f"http://streams.local/{number}.ts",
            "active": True,
        }
        data.update(overrides)
        return collection.channels.add_channel(lineup_id, **data)

    return _create


# ============================================================================
# FastAPI Test Client
# ============================================================================

@pytest.fixture
def client(db_session: Session) -> TestClient:
    """Create FastAPI test client with overridden database dependency."""
    # Import app here to avoid loading it for unit tests
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    # Clean up
    app.dependency_overrides.clear()
