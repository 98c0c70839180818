import pytest
from fastapi.testclient import TestClient

from mirror_service.app import create_app
from mirror_service.mirror_store import MirrorStore


@pytest.fixture
def store(tmp_path):
    return MirrorStore(tmp_path / "state" / "mirror_state.json")


@pytest.fixture
def client(store):
    # Each test gets its own state file so history / stats never leak between tests
    return TestClient(create_app(store))
