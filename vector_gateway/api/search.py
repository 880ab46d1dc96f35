from fastapi import APIRouter, Depends

from vector_gateway.api.deps import get_embedder, get_gateway
from vector_gateway.core.config import GROUP_SIZE, RESULT_LIMIT, SEARCH_PAYLOAD_FIELDS
from vector_gateway.schemas.search import GroupSearchRequest, IpSearchRequest, SearchRequest
from vector_gateway.services.embedding_client import EmbeddingClient
from vector_gateway.services.filters import match, match_filter, must, range_gte
from vector_gateway.services.qdrant_gateway import QdrantGateway, result_field

router = APIRouter()


async def search_body(req: SearchRequest, embedder: EmbeddingClient) -> dict:
    body = {
        "vector": await embedder.embed(req.q),
        "limit": RESULT_LIMIT,
        "with_payload": SEARCH_PAYLOAD_FIELDS,
    }
    query_filter = match_filter(req.f)
    if query_filter:
        body["filter"] = query_filter
    return body


@router.post("/search")
async def search(
    req: SearchRequest,
    gateway: QdrantGateway = Depends(get_gateway),
    embedder: EmbeddingClient = Depends(get_embedder),
):
    """Semantic search over the collection, optionally narrowed by exact payload matches."""
    res = await gateway.search(await search_body(req, embedder))
    return result_field(res, "result")


@router.post("/groupsearch")
async def group_search(
    req: GroupSearchRequest,
    gateway: QdrantGateway = Depends(get_gateway),
    embedder: EmbeddingClient = Depends(get_embedder),
):
    """Semantic search returning the best hit per distinct value of payload key `k`."""
    body = await search_body(req, embedder)
    body["group_by"] = req.k
    body["group_size"] = GROUP_SIZE
    res = await gateway.search_groups(body)
    return result_field(res, "result", "groups")


@router.post("/ip")
async def search_by_ip(
    req: IpSearchRequest,
    gateway: QdrantGateway = Depends(get_gateway),
):
    """Distinct caller addresses of party-A messages dated at or after `d`."""
    conditions = [match("u", 1), range_gte("d", req.d)]
    if req.p is not None:
        conditions.append(match("p", req.p))

    res = await gateway.query_groups({
        "query": {"order_by": {"key": "d", "direction": "asc"}},
        "filter": must(*conditions),
        "group_by": "ip",
        "limit": RESULT_LIMIT,
        "group_size": GROUP_SIZE,
        "with_payload": True,
    })
    return result_field(res, "result", "groups")
