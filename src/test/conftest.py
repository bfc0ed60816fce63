import os

# La app no debe tocar el Postgres real durante los tests
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from src.main import app
from src.database import Base, get_db
from src.api_clients.identity_api import get_identity_client
from src.services.table_gateway import TableGateway
from src.test.fake_identity import FakeIdentityClient
import src.models  # noqa: F401

# Una sola conexión en memoria compartida por el threadpool de FastAPI
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def gateway(db_session: Session) -> TableGateway:
    return TableGateway(db_session)


@pytest.fixture(scope="function")
def identity() -> FakeIdentityClient:
    return FakeIdentityClient()


@pytest.fixture(scope="function")
def client(db_session: Session, identity: FakeIdentityClient):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_client] = lambda: identity

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


# Niveles: si falla un test de un nivel, se saltean los niveles superiores
niveles_ejecucion = ["bajo", "medio", "alto"]
bloquear_niveles_superiores = set()
item_niveles_cache = {}


def pytest_configure(config):
    config.addinivalue_line("markers", "nivel(n): marca el test con un nivel: bajo, medio o alto")


def get_nivel(item):
    marca = item.get_closest_marker("nivel")
    return marca.args[0] if marca else "bajo"


def pytest_collection_modifyitems(session, config, items):
    for item in items:
        item_niveles_cache[item.nodeid] = get_nivel(item)
    items.sort(key=lambda item: niveles_ejecucion.index(get_nivel(item)))


def pytest_runtest_setup(item):
    nivel = get_nivel(item)
    if nivel in bloquear_niveles_superiores:
        pytest.skip(f"Tests del nivel '{nivel}' bloqueados porque falló un test de un nivel anterior")


def pytest_runtest_logreport(report):
    if report.when != "call" or not report.failed:
        return
    idx = niveles_ejecucion.index(item_niveles_cache.get(report.nodeid, "bajo"))
    for superior in niveles_ejecucion[idx + 1:]:
        bloquear_niveles_superiores.add(superior)
