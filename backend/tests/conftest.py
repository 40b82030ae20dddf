import pytest
from fastapi.testclient import TestClient

from echo_app.main import app


@pytest.fixture
def client():
    # Entering the context runs the lifespan, which sizes the worker pool.
    with TestClient(app) as c:
        yield c
