import logging
import httpx
from pydantic import ValidationError
from typing import Any, Dict, List, Optional, Union

from vector_gateway.core.config import COLLECTION_NAME, QDRANT_KEY_SECRET, QDRANT_URL_SECRET
from vector_gateway.core.errors import DecodeError, NotFound, TransportError
from vector_gateway.core.secrets import SecretStore
from vector_gateway.schemas.qdrant import PointsResponse

PointId = Union[int, str]


class QdrantGateway:
    """
    Authenticated access to the vector database REST API.

    Every call reads the base URL and API key from the secret store, makes
    exactly one HTTP request and returns the parsed JSON body. There are no
    retries: failures surface as `TransportError` / `DecodeError`, missing
    secrets as `ConfigError`.
    """

    def __init__(
        self,
        secrets: SecretStore,
        collection: str = COLLECTION_NAME,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.secrets = secrets
        self.collection = collection
        self.transport = transport

    # -------------------------
    # RAW REQUESTS
    # -------------------------
    def url(self, path: str) -> str:
        base = self.secrets.require(QDRANT_URL_SECRET)
        return f"{base.rstrip('/')}/{path.lstrip('/')}"

    async def _request(self, method: str, path: str, body: Any = None) -> Any:
        url = self.url(path)
        headers = {"api-key": self.secrets.require(QDRANT_KEY_SECRET)}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                resp = await client.request(method, url, json=body, headers=headers)
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path}: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"{method} {path} response to json: {e}") from e

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def put(self, path: str, body: Any) -> Any:
        return await self._request("PUT", path, body)

    async def post(self, path: str, body: Any) -> Any:
        return await self._request("POST", path, body)

    async def post_points(self, path: str, body: Any) -> PointsResponse:
        data = await self.post(path, body)
        try:
            return PointsResponse.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"POST {path} unexpected points response: {e}") from e

    # -------------------------
    # COLLECTION ENDPOINTS
    # -------------------------
    def points_path(self, suffix: str = "") -> str:
        return f"collections/{self.collection}/points{suffix}"

    async def retrieve(self, ids: List[PointId], with_payload: Any = True) -> PointsResponse:
        return await self.post_points(
            self.points_path(), {"ids": ids, "with_payload": with_payload}
        )

    async def fetch_payload(self, point_id: PointId) -> Dict[str, Any]:
        response = await self.retrieve([point_id])
        if not response.result:
            raise NotFound(f"no point {point_id}")
        payload = response.result[0].payload
        if payload is None:
            raise NotFound(f"no payload on point {point_id}")
        return payload

    async def upsert(self, points: List[Dict[str, Any]]) -> Any:
        return await self.put(self.points_path("?wait=true"), {"points": points})

    async def set_payload(self, payload: Dict[str, Any], ids: List[PointId]) -> Any:
        return await self.post(
            self.points_path("/payload?wait=true"), {"payload": payload, "points": ids}
        )

    async def delete(self, ids: List[PointId]) -> Any:
        return await self.post(self.points_path("/delete?wait=true"), {"points": ids})

    async def search(self, body: Dict[str, Any]) -> Any:
        return await self.post(self.points_path("/search"), body)

    async def search_groups(self, body: Dict[str, Any]) -> Any:
        return await self.post(self.points_path("/search/groups"), body)

    async def query_groups(self, body: Dict[str, Any]) -> Any:
        return await self.post(self.points_path("/query/groups"), body)

    async def scroll(self, body: Dict[str, Any]) -> Any:
        return await self.post(self.points_path("/scroll"), body)

    async def collection_exists(self) -> bool:
        try:
            await self.get(f"collections/{self.collection}")
        except TransportError as e:
            cause = e.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                return False
            raise
        return True

    async def create_collection(self, size: int, distance: str) -> Any:
        logging.info(f"[Gateway] Creating collection {self.collection} ({size}, {distance})")
        return await self.put(
            f"collections/{self.collection}",
            {"vectors": {"size": size, "distance": distance}},
        )


def result_field(data: Any, *keys: str) -> Any:
    """Walk `data` along `keys`, e.g. result_field(res, "result", "points")."""
    value = data
    for key in keys:
        if not isinstance(value, dict) or key not in value:
            raise DecodeError(f"response has no {'.'.join(keys)}")
        value = value[key]
    return value
