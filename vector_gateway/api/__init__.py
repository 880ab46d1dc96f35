"""
API Routes module.

This module contains all FastAPI route handlers organized by resource:
- items: Fetch, create, upsert and delete items, two-sided exchange writes
- search: Semantic, grouped and by-address searches
- chats: Chat summary and message paging
- sequence: Next sequence id
"""

from .items import router as items_router
from .search import router as search_router
from .chats import router as chats_router
from .sequence import router as sequence_router

__all__ = [
    "items_router",
    "search_router",
    "chats_router",
    "sequence_router",
]
