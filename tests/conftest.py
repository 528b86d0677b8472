# /tests/conftest.py

import json
import pytest
import httpx
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import bootstrap_schema, enable_sqlite_foreign_keys
from app.services.database_service import DatabaseService

VALID_CONTENT = {
    "description": "In this video we build a sourdough starter from scratch.",
    "thumbnail_title": "STARTER IN 5 DAYS",
    "video_title_options": [
        "How to Make a Sourdough Starter",
        "Sourdough Starter for Beginners",
        "My 5-Day Sourdough Starter Method",
        "Never Buy Yeast Again",
        "The Easiest Sourdough Starter",
    ],
    "tags": "sourdough, baking, bread, starter",
}


def completion_envelope(content) -> dict:
    """Wraps a content object (or raw string) the way the AI endpoint does."""
    raw = content if isinstance(content, str) else json.dumps(content)
    return {"choices": [{"message": {"content": raw}}]}


# --- Database Fixtures ---

@pytest.fixture
def engine():
    """A fresh in-memory SQLite database with all tables, per test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    assert bootstrap_schema(bind=test_engine) is True
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService for dependency injection."""
    return MagicMock()


# --- AI Endpoint Stub ---

class AIStub:
    """Records outbound requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json=completion_envelope(VALID_CONTENT))

    def respond_with(self, handler):
        self.handler = handler

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._dispatch))

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def ai_stub(mocker):
    stub = AIStub()
    mocker.patch("app.services.ai_service._build_client", side_effect=stub.build_client)
    return stub
