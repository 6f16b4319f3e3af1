"""
Shared pytest fixtures: an isolated in-memory database per test and an API
client wired to it.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.main import app
from api.routes import get_history_recorder
from db.database import get_db_dependency
from db.models import Base
from engine.history import HistoryRecorder


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def recorder(session_factory):
    return HistoryRecorder(session_factory=session_factory)


@pytest.fixture
def client(session_factory, recorder):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_dependency] = override_get_db
    app.dependency_overrides[get_history_recorder] = lambda: recorder
    yield TestClient(app)
    app.dependency_overrides.clear()
