"""
Vector Gateway Application.

A FastAPI service that fronts a vector database and an embedding endpoint.

Main components:
- main: FastAPI application factory, error mapping and router registration
- core: Configuration, secret store and error kinds
- schemas: Pydantic request models and typed vector database responses
- api: API endpoint handlers
- services: Outbound clients (vector database, embeddings) and id allocation
"""

from vector_gateway.core.config import COLLECTION_NAME, PRIVATE_CATEGORIES
from vector_gateway.core.secrets import SecretStore
from vector_gateway.main import app, create_app

__all__ = [
    "COLLECTION_NAME",
    "PRIVATE_CATEGORIES",
    "SecretStore",
    "app",
    "create_app",
]
