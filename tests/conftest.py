import pytest
from fastapi.testclient import TestClient

from ippool.config import Settings
from ippool.main import create_app
from ippool.services.address_pool import AddressPoolStore
from ippool.services.storage import InMemoryBackend, JSONFileBackend


@pytest.fixture
def data_store_path(tmp_path):
    return tmp_path / "datastore" / "JSON-DataStore.json"


@pytest.fixture
def file_store(data_store_path) -> AddressPoolStore:
    return AddressPoolStore(JSONFileBackend(data_store_path))


@pytest.fixture
def memory_store() -> AddressPoolStore:
    return AddressPoolStore(InMemoryBackend())


@pytest.fixture
def settings(data_store_path) -> Settings:
    return Settings(data_store_path=data_store_path, api_v1_prefix="/api/v1")


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as client:
        yield client
