import logging
import httpx
from typing import List, Optional

from vector_gateway.core.config import EMBEDDING_URL_SECRET
from vector_gateway.core.errors import ConfigError, EmbeddingError
from vector_gateway.core.secrets import SecretStore


class EmbeddingClient:
    """Calls the external embedding endpoint and returns a single vector."""

    def __init__(self, secrets: SecretStore, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.secrets = secrets
        self.transport = transport

    async def embed(self, text: str) -> List[float]:
        try:
            url = self.secrets.require(EMBEDDING_URL_SECRET)
        except ConfigError as e:
            raise EmbeddingError(f"embedding url: {e}") from e

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                resp = await client.post(url, json={"input": text})
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise EmbeddingError(f"sending embedding request: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise EmbeddingError(f"parsing embedding response to json: {e}") from e

        # provider returns {"data": [{"embedding": [...]}, ...]}
        items = data.get("data") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            raise EmbeddingError("Embedding service returned no data")

        vector = items[0].get("embedding")
        if not isinstance(vector, list):
            raise EmbeddingError("Embedding service returned no embedding array")

        logging.debug(f"[Embedding] {len(vector)}-d vector for {len(text)} chars")
        return vector
