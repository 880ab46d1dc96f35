import logging
from contextlib import asynccontextmanager
from typing import Iterable, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from vector_gateway.api import chats_router, items_router, search_router, sequence_router
from vector_gateway.core.config import (
    AUTO_CREATE_COLLECTION,
    COLLECTION_NAME,
    HOST,
    LOG_LEVEL,
    PORT,
    PRIVATE_CATEGORIES,
    VECTOR_DISTANCE,
    VECTOR_SIZE,
)
from vector_gateway.core.errors import GatewayError, NotFound, Unauthorized
from vector_gateway.core.secrets import SecretStore, env_secrets
from vector_gateway.services.embedding_client import EmbeddingClient
from vector_gateway.services.qdrant_gateway import QdrantGateway
from vector_gateway.services.sequence import SequenceAllocator

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

SERVER_ERROR_MESSAGE = "An error occurred on our side"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup logic: populate the secret store from the environment unless
    secrets were injected, and optionally create the collection.
    """
    secrets: SecretStore = app.state.secrets
    if not secrets.loaded:
        values = env_secrets()
        secrets.set(values)
        logging.info(f"[Startup] Loaded secrets: {sorted(values)}")

    if AUTO_CREATE_COLLECTION:
        gateway: QdrantGateway = app.state.gateway
        try:
            if not await gateway.collection_exists():
                await gateway.create_collection(VECTOR_SIZE, VECTOR_DISTANCE)
        except GatewayError as e:
            # missing config or an unreachable store is reported per request
            logging.error(f"[Startup] Collection bootstrap failed: {e}")

    yield


async def handle_gateway_error(request: Request, exc: GatewayError):
    if isinstance(exc, NotFound):
        return JSONResponse("Not Found", status_code=404)
    if isinstance(exc, Unauthorized):
        return JSONResponse("Unauthorized", status_code=401)

    logging.error(f"[{request.method} {request.url.path}] {exc}", exc_info=exc)
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)


async def handle_unexpected_error(request: Request, exc: Exception):
    logging.error(f"[{request.method} {request.url.path}] Unhandled: {exc}", exc_info=exc)
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)


def create_app(
    secrets: Optional[SecretStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    private_categories: Optional[Iterable[str]] = None,
    collection: str = COLLECTION_NAME,
) -> FastAPI:
    app = FastAPI(
        title="Vector Gateway",
        version="1.0",
        description="HTTP façade over a vector database and an embedding endpoint",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    secrets = secrets if secrets is not None else SecretStore()
    gateway = QdrantGateway(secrets, collection=collection, transport=transport)

    app.state.secrets = secrets
    app.state.gateway = gateway
    app.state.embedder = EmbeddingClient(secrets, transport=transport)
    app.state.allocator = SequenceAllocator(gateway)
    app.state.private_categories = frozenset(
        private_categories if private_categories is not None else PRIVATE_CATEGORIES
    )

    app.add_exception_handler(GatewayError, handle_gateway_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Register routers
    app.include_router(items_router)
    app.include_router(search_router)
    app.include_router(chats_router)
    app.include_router(sequence_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run():
    import uvicorn
    logging.info(f"Starting Vector Gateway on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
