"""
Error kinds raised while talking to the upstream services.

Route handlers let these propagate; the exception handler registered in
`vector_gateway.main` maps them onto HTTP responses.
"""


class GatewayError(Exception):
    """Base class for every failure the gateway knows how to report."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(GatewayError):
    """A required secret is missing."""


class TransportError(GatewayError):
    """The upstream call failed or answered with a non-2xx status."""


class DecodeError(GatewayError):
    """The upstream body is not JSON or does not have the expected shape."""


class EmbeddingError(GatewayError):
    """The embedding endpoint could not produce a vector."""


class NotFound(GatewayError):
    """No point (or no payload) for the requested id."""


class Unauthorized(GatewayError):
    """The caller is not the owner of the point."""
