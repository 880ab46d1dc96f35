"""
Schema and Data Models module.

This module contains Pydantic models for request validation and for the
vector database responses:
- ItemQuery, SetRequest, AddRequest: item routes
- SearchRequest, GroupSearchRequest, IpSearchRequest: search routes
- PointResult, PointsResponse: typed points response from the vector database
"""

from .items import ItemQuery, SetRequest, AddRequest
from .search import SearchRequest, GroupSearchRequest, IpSearchRequest
from .qdrant import PointResult, PointsResponse

__all__ = [
    "ItemQuery",
    "SetRequest",
    "AddRequest",
    "SearchRequest",
    "GroupSearchRequest",
    "IpSearchRequest",
    "PointResult",
    "PointsResponse",
]
