"""
Item endpoints mounted at the root path, plus the two-sided `/add` write.
"""
import logging
import uuid
from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from typing import Any, Dict, FrozenSet

from vector_gateway.api.deps import (
    client_host,
    get_allocator,
    get_embedder,
    get_gateway,
    get_private_categories,
)
from vector_gateway.core.config import MESSAGE_CATEGORY
from vector_gateway.core.errors import NotFound, Unauthorized
from vector_gateway.schemas.items import AddRequest, ItemQuery, SetRequest
from vector_gateway.services.embedding_client import EmbeddingClient
from vector_gateway.services.filters import compact_json, point_id, tag_client_ip
from vector_gateway.services.qdrant_gateway import QdrantGateway
from vector_gateway.services.sequence import SequenceAllocator

router = APIRouter()


def is_owner(payload: Dict[str, Any], user: str) -> bool:
    owner = payload.get("u")
    return owner is not None and str(owner) == user


def is_private(payload: Dict[str, Any], private_categories: FrozenSet[str]) -> bool:
    category = payload.get("c")
    return isinstance(category, str) and category in private_categories


# -------------------------
# FETCH ITEM
# -------------------------
@router.get("/")
async def get_item(
    query: ItemQuery = Depends(),
    gateway: QdrantGateway = Depends(get_gateway),
    private_categories: FrozenSet[str] = Depends(get_private_categories),
):
    payload = await gateway.fetch_payload(point_id(query.i))

    # visibility follows the stored category, not the `c` hint
    if is_private(payload, private_categories):
        if not is_owner(payload, query.u):
            raise Unauthorized(f"{query.u} does not own {query.i}")
        if "v" not in payload:
            raise NotFound(f"no value on point {query.i}")
        return JSONResponse(payload["v"])

    return payload


# -------------------------
# CREATE ITEM
# -------------------------
@router.post("/", status_code=201, response_class=PlainTextResponse)
async def create_item(
    request: Request,
    body: Dict[str, Any] = Body(...),
    gateway: QdrantGateway = Depends(get_gateway),
    embedder: EmbeddingClient = Depends(get_embedder),
):
    doc_id = str(uuid.uuid4())
    payload = tag_client_ip(body, client_host(request))

    vector = await embedder.embed(compact_json(payload))
    await gateway.upsert([{"id": doc_id, "payload": payload, "vector": vector}])

    logging.info(f"[Items] Created {doc_id}")
    return doc_id


# -------------------------
# UPSERT ITEM
# -------------------------
@router.put("/", response_class=PlainTextResponse)
async def set_item(
    req: SetRequest,
    gateway: QdrantGateway = Depends(get_gateway),
    embedder: EmbeddingClient = Depends(get_embedder),
):
    pid = point_id(req.i)
    try:
        existing = await gateway.fetch_payload(pid)
    except NotFound:
        existing = None

    vector = await embedder.embed(req.v)

    if existing is None:
        await gateway.upsert([{"id": pid, "payload": {"v": req.v}, "vector": vector}])
        logging.info(f"[Items] Inserted {req.i}")
        return PlainTextResponse("Inserted", status_code=201)

    # no owner check: any caller can overwrite an existing value
    await gateway.upsert([{"id": pid, "payload": {**existing, "v": req.v}, "vector": vector}])
    logging.info(f"[Items] Updated {req.i}")
    return "Updated"


# -------------------------
# DELETE ITEM
# -------------------------
@router.delete("/", response_class=PlainTextResponse)
async def delete_item(
    u: str,
    i: str,
    gateway: QdrantGateway = Depends(get_gateway),
):
    pid = point_id(i)
    payload = await gateway.fetch_payload(pid)

    if not is_owner(payload, u):
        logging.info(f"[Items] {u} does not own {i}, delete refused")
        return PlainTextResponse("Unauthorized", status_code=401)

    await gateway.delete([pid])
    logging.info(f"[Items] Deleted {i}")
    return "Deleted"


# -------------------------
# ADD EXCHANGE (TWO-SIDED)
# -------------------------
@router.post("/add", response_class=PlainTextResponse)
async def add_exchange(
    req: AddRequest,
    request: Request,
    gateway: QdrantGateway = Depends(get_gateway),
    embedder: EmbeddingClient = Depends(get_embedder),
    allocator: SequenceAllocator = Depends(get_allocator),
):
    """
    Store both sides of an exchange as two points sharing the conversation id.

    Party A (`u` text, role 1) carries the caller address; party B (`a` text,
    role 0) does not. Each point embeds its own text.
    """
    first_id, second_id = await allocator.next_ids(2)

    party_a = {"u": 1, "m": req.u, "c": MESSAGE_CATEGORY, "i": req.i, "p": req.p, "d": req.ud}
    tag_client_ip(party_a, client_host(request))
    party_b = {"u": 0, "m": req.a, "c": MESSAGE_CATEGORY, "i": req.i, "p": req.p, "d": req.ad}

    await gateway.upsert([
        {"id": first_id, "payload": party_a, "vector": await embedder.embed(req.u)},
        {"id": second_id, "payload": party_b, "vector": await embedder.embed(req.a)},
    ])

    logging.info(f"[Items] Added exchange {first_id}/{second_id} to {req.i}")
    return str(first_id)
