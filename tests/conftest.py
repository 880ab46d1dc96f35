import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.support.fake_qdrant import API_KEY, EMBEDDING_URL, QDRANT_URL, FakeQdrant  # noqa: E402
from vector_gateway.core.secrets import SecretStore  # noqa: E402
from vector_gateway.main import create_app  # noqa: E402
from vector_gateway.services.embedding_client import EmbeddingClient  # noqa: E402
from vector_gateway.services.qdrant_gateway import QdrantGateway  # noqa: E402
from vector_gateway.services.sequence import SequenceAllocator  # noqa: E402


@pytest.fixture
def fake_qdrant():
    return FakeQdrant()


@pytest.fixture
def secrets():
    store = SecretStore()
    store.set({"QDRANT_URL": QDRANT_URL, "QDRANT_KEY": API_KEY, "EMBEDDING_URL": EMBEDDING_URL})
    return store


@pytest.fixture
def gateway(secrets, fake_qdrant):
    return QdrantGateway(secrets, collection="i", transport=fake_qdrant.transport())


@pytest.fixture
def embedder(secrets, fake_qdrant):
    return EmbeddingClient(secrets, transport=fake_qdrant.transport())


@pytest.fixture
def allocator(gateway):
    return SequenceAllocator(gateway, vector_size=3)


@pytest.fixture
def app(secrets, fake_qdrant):
    return create_app(
        secrets=secrets,
        transport=fake_qdrant.transport(),
        private_categories={"private"},
        collection="i",
    )


@pytest.fixture
def client(app):
    return TestClient(app)
