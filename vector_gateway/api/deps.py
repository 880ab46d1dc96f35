from fastapi import Request
from typing import FrozenSet

from vector_gateway.services.embedding_client import EmbeddingClient
from vector_gateway.services.qdrant_gateway import QdrantGateway
from vector_gateway.services.sequence import SequenceAllocator


def get_gateway(request: Request) -> QdrantGateway:
    return request.app.state.gateway


def get_embedder(request: Request) -> EmbeddingClient:
    return request.app.state.embedder


def get_allocator(request: Request) -> SequenceAllocator:
    return request.app.state.allocator


def get_private_categories(request: Request) -> FrozenSet[str]:
    return request.app.state.private_categories


def client_host(request: Request):
    return request.client.host if request.client else None
