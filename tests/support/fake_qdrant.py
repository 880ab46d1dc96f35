from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx

QDRANT_URL = "http://qdrant.test"
EMBEDDING_URL = "http://embed.test/embeddings"
API_KEY = "test-key"
EMBEDDING = [0.1, 0.2, 0.3]


def _ok(result: Any) -> httpx.Response:
    return httpx.Response(200, json={"result": result, "status": "ok", "time": 0.001})


def _matches(payload: Dict[str, Any], query_filter: Optional[Dict[str, Any]]) -> bool:
    for condition in (query_filter or {}).get("must", []):
        if "match" in condition and payload.get(condition["key"]) != condition["match"]["value"]:
            return False
    return True


class FakeQdrant:
    """In-memory stand-in for the vector database REST API and the embedding endpoint.

    Serve it through `httpx.MockTransport(fake.handler)`. Every vector database
    request is recorded in `calls`; every embedding input in `embedded`.
    Offsets are ignored by `scroll`; canned `search_result` / `groups` answer
    the search endpoints.
    """

    def __init__(self, *, api_key: str = API_KEY, embedding: Optional[List[float]] = None) -> None:
        self.api_key = api_key
        self.embedding = embedding if embedding is not None else list(EMBEDDING)
        self.embedding_status = 200

        self.collections: Dict[str, Dict[Any, Dict[str, Any]]] = {}
        self.vector_configs: Dict[str, Dict[str, Any]] = {}
        self.search_result: List[Dict[str, Any]] = []
        self.groups: List[Dict[str, Any]] = []
        self.overrides: List[httpx.Response] = []

        self.calls: List[Dict[str, Any]] = []
        self.embedded: List[str] = []

    # -------------------------
    # FIXTURE HELPERS
    # -------------------------
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def points(self, collection: str = "i") -> Dict[Any, Dict[str, Any]]:
        return self.collections.setdefault(collection, {})

    def add_point(self, point_id: Any, payload: Dict[str, Any], collection: str = "i") -> None:
        self.points(collection)[point_id] = {"id": point_id, "payload": dict(payload), "vector": list(self.embedding)}

    def last_call(self, suffix: str) -> Dict[str, Any]:
        for call in reversed(self.calls):
            if call["path"].endswith(suffix):
                return call
        raise AssertionError(f"no call to *{suffix}")

    # -------------------------
    # TRANSPORT HANDLER
    # -------------------------
    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None

        if request.url.host == "embed.test":
            self.embedded.append(body["input"])
            if self.embedding_status != 200:
                return httpx.Response(self.embedding_status, text="embedding backend down")
            return httpx.Response(200, json={"data": [{"embedding": self.embedding}]})

        self.calls.append({
            "method": request.method,
            "path": request.url.path,
            "params": dict(request.url.params),
            "headers": dict(request.headers),
            "body": body,
        })

        if request.headers.get("api-key") != self.api_key:
            return httpx.Response(403, json={"status": {"error": "Invalid api-key"}})
        if self.overrides:
            return self.overrides.pop(0)

        parts = request.url.path.strip("/").split("/")
        if len(parts) < 2 or parts[0] != "collections":
            return httpx.Response(404, json={"status": {"error": "Not found"}})

        name, route = parts[1], "/".join(parts[2:])
        if route == "":
            return self._collection(request.method, name, body)
        return self._points(request.method, name, route, body)

    def _collection(self, method: str, name: str, body: Any) -> httpx.Response:
        if method == "GET":
            if name not in self.collections:
                return httpx.Response(404, json={"status": {"error": f"Collection `{name}` doesn't exist!"}})
            return _ok({"status": "green", "config": self.vector_configs.get(name)})
        if method == "PUT":
            self.collections.setdefault(name, {})
            self.vector_configs[name] = body["vectors"]
            return _ok(True)
        return httpx.Response(405)

    def _points(self, method: str, name: str, route: str, body: Any) -> httpx.Response:
        points = self.points(name)

        if (method, route) == ("POST", "points"):
            return _ok([self._record(points[pid], body.get("with_payload", False)) for pid in body["ids"] if pid in points])

        if (method, route) == ("PUT", "points"):
            for point in body["points"]:
                points[point["id"]] = {
                    "id": point["id"],
                    "payload": dict(point.get("payload") or {}),
                    "vector": point.get("vector"),
                }
            return _ok({"operation_id": len(self.calls), "status": "completed"})

        if (method, route) == ("POST", "points/payload"):
            for pid in body["points"]:
                if pid not in points:
                    return httpx.Response(404, json={"status": {"error": f"No point with id {pid} found"}})
                points[pid]["payload"].update(body["payload"])
            return _ok({"operation_id": len(self.calls), "status": "completed"})

        if (method, route) == ("POST", "points/delete"):
            for pid in body["points"]:
                points.pop(pid, None)
            return _ok({"operation_id": len(self.calls), "status": "completed"})

        if (method, route) == ("POST", "points/search"):
            return _ok(self.search_result)

        if (method, route) in (("POST", "points/search/groups"), ("POST", "points/query/groups")):
            return _ok({"groups": self.groups})

        if (method, route) == ("POST", "points/scroll"):
            found = [p for p in points.values() if _matches(p["payload"], body.get("filter"))]
            order_by = body.get("order_by")
            if order_by:
                found.sort(key=lambda p: p["payload"].get(order_by["key"]), reverse=order_by.get("direction") == "desc")
            records = [self._record(p, True) for p in found[: body.get("limit", 10)]]
            return _ok({"points": records, "next_page_offset": None})

        return httpx.Response(404, json={"status": {"error": "Not found"}})

    @staticmethod
    def _record(point: Dict[str, Any], with_payload: Any) -> Dict[str, Any]:
        record = {"id": point["id"]}
        if with_payload is True:
            record["payload"] = dict(point["payload"])
        elif isinstance(with_payload, list):
            record["payload"] = {k: v for k, v in point["payload"].items() if k in with_payload}
        return record
