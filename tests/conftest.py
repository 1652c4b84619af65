"""
Shared fixtures: an in-memory SQLite database wired into the app.
"""
import os

# Must be set before cryptopoll is imported; the app creates tables on import
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cryptopoll.db.base import build_engine, get_db
from cryptopoll.main import app
from cryptopoll.models import (
    Base,
    Comment,
    CryptocurrencyPreference,
    InvestmentFrequency,
    User,
    ValuedCharacteristic,
)

TABLES = {
    "users": User,
    "cryptocurrency_preferences": CryptocurrencyPreference,
    "investment_frequency": InvestmentFrequency,
    "valued_characteristics": ValuedCharacteristic,
    "comments": Comment,
}


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def override_db(session_factory):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def row_counts(db):
    """Return a callable giving the number of rows in each survey table."""
    def _counts():
        db.expire_all()
        return {name: db.query(model).count() for name, model in TABLES.items()}

    return _counts


@pytest.fixture
def valid_payload():
    return {
        "name": "Jöhn O'Brien-Smith",
        "email": "john@example.com",
        "age": "25",
        "role": "ethereum",
        "frequency": "weekly",
        "prefer": ["security", "community"],
        "comment": "Great survey",
    }
