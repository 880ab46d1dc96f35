"""
Core configuration and shared building blocks.

This module contains application-wide plumbing:
- config: Environment variables, their defaults and protocol constants
- secrets: The one-shot secret store read by every outbound call
- errors: Error kinds mapped onto HTTP responses
"""

from .config import COLLECTION_NAME, PRIVATE_CATEGORIES, SECRET_NAMES
from .errors import (
    GatewayError,
    ConfigError,
    TransportError,
    DecodeError,
    EmbeddingError,
    NotFound,
    Unauthorized,
)
from .secrets import SecretStore

__all__ = [
    "COLLECTION_NAME",
    "PRIVATE_CATEGORIES",
    "SECRET_NAMES",
    "GatewayError",
    "ConfigError",
    "TransportError",
    "DecodeError",
    "EmbeddingError",
    "NotFound",
    "Unauthorized",
    "SecretStore",
]
