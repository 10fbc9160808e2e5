import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from helpers import FakeNotifier, FakeProvider, FakeStore
from tablewatch.db.base import Base
from tablewatch.models import WatchListEntry  # noqa: F401  registers the table
from tablewatch.services.monitor import MonitorContext


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def ctx(provider, notifier):
    return MonitorContext(provider=provider, notifier=notifier, store=FakeStore([]))


@pytest.fixture
def session_factory():
    """In-memory SQLite shared across threads (the store runs in asyncio.to_thread)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
