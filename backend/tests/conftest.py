import pytest
from fastapi.testclient import TestClient

from skitrack.core.config import Settings
from skitrack.db import Base, create_store
from skitrack.main import create_app


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'ski.db'}"


@pytest.fixture()
def settings(db_url):
    return Settings(database_url=db_url, enforce_foreign_keys=False)


@pytest.fixture()
def engine(db_url):
    """Empty store with the tables created and nothing seeded."""
    eng = create_store(db_url)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def client(settings):
    # Entering the client runs the lifespan, which initializes and seeds the store
    with TestClient(create_app(settings)) as c:
        yield c
