"""Shared fixtures: an isolated in-memory database and a wired test client."""

import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Must be set before anything imports ``app.core.config``.
os.environ.setdefault("DB_URL", "sqlite://")
os.environ.setdefault("DATA_DIR", str(ROOT / "data"))
os.environ["GOOGLE_MAPS_API_KEY"] = ""
os.environ["METRICS_ENABLED"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from app import create_app  # noqa: E402
from app.db.session import Base, get_db  # noqa: E402
from app.models.address import Address  # noqa: E402
from app.services.geocoding import Coordinates, StaticGeocoder, get_geocoder  # noqa: E402

DEFAULT_COORDINATES = Coordinates(-23.55052, -46.633308)


def new_address_payload(**overrides):
    payload = {
        "streetName": "Avenida Paulista",
        "number": "1578",
        "complement": "Apt 42",
        "neighbourhood": "Bela Vista",
        "city": "Sao Paulo",
        "state": "SP",
        "country": "Brazil",
        "zipcode": "01310-200",
        "latitude": -23.5614,
        "longitude": -46.6559,
    }
    payload.update(overrides)
    return payload


def new_address(**overrides) -> Address:
    fields = {
        "street_name": "Avenida Paulista",
        "number": "1578",
        "complement": "Apt 42",
        "neighbourhood": "Bela Vista",
        "city": "Sao Paulo",
        "state": "SP",
        "country": "Brazil",
        "zipcode": "01310-200",
        "latitude": -23.5614,
        "longitude": -46.6559,
    }
    fields.update(overrides)
    return Address(**fields)


@pytest.fixture()
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    try:
        yield TestingSessionLocal
    finally:
        engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def geocoder():
    return StaticGeocoder(DEFAULT_COORDINATES)


@pytest.fixture()
def app(session_factory, geocoder):
    application = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_geocoder] = lambda: geocoder
    return application


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
