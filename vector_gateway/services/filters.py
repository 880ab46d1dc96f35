import json
import math
from typing import Any, Dict, Mapping, Optional, Union


def match(key: str, value: Any) -> dict:
    return {"key": key, "match": {"value": value}}


def range_gte(key: str, value: Any) -> dict:
    return {"key": key, "range": {"gte": value}}


def must(*conditions: dict) -> dict:
    return {"must": list(conditions)}


def match_filter(fields: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """One exact-match `must` clause per key; None when there is nothing to filter on."""
    if not fields:
        return None
    return must(*(match(key, value) for key, value in fields.items()))


def point_id(raw: Union[int, str]) -> Union[int, str]:
    # ids from query strings arrive as text; numeric ones are integer ids upstream
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        return int(raw)
    return raw


def compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def order_value(raw: str) -> Union[int, float, str]:
    """Cursor values from the path: finite numbers stay numbers, anything else (datetimes) stays text."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return raw
    return value if math.isfinite(value) else raw


def tag_client_ip(payload: Dict[str, Any], host: Optional[str]) -> Dict[str, Any]:
    # both `a` and `ip` name the caller address; `/ip` groups on `ip`
    if host:
        payload["a"] = host
        payload["ip"] = host
    return payload
