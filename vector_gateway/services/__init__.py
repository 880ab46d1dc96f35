"""
Services module for the gateway.

This module contains the outbound integrations and shared request logic:
- embedding_client: Turns text into a vector through the embedding endpoint
- qdrant_gateway: Authenticated REST calls against the vector database
- sequence: Counter-point id allocation
- filters: Filter clauses and id/payload helpers
"""

from .embedding_client import EmbeddingClient
from .qdrant_gateway import QdrantGateway, result_field
from .sequence import SequenceAllocator
from .filters import (
    match,
    match_filter,
    must,
    range_gte,
    point_id,
    order_value,
    compact_json,
    tag_client_ip,
)

__all__ = [
    "EmbeddingClient",
    "QdrantGateway",
    "result_field",
    "SequenceAllocator",
    "match",
    "match_filter",
    "must",
    "range_gte",
    "point_id",
    "order_value",
    "compact_json",
    "tag_client_ip",
]
