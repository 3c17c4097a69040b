import os

# Keep the module-level app off any real database while tests import it
os.environ["CONNECTION_STRING"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient

from usertodo.database import Database
from usertodo.main import create_app


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'test.db'}")
    yield db
    db.dispose()


@pytest.fixture
def app(database):
    return create_app(database)


@pytest.fixture
def client(app):
    return TestClient(app)
