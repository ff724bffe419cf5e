from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from csv_merger.config import get_settings
from csv_merger.main import app


@pytest.fixture(autouse=True)
def reset_state() -> Iterator[None]:
    get_settings.cache_clear()
    app.state.last_result = None
    yield
    get_settings.cache_clear()
    app.state.last_result = None


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
