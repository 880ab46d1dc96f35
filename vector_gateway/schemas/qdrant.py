from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union


class PointResult(BaseModel):
    # Qdrant ids are either unsigned integers or UUID strings
    id: Union[int, str]
    version: Optional[int] = None
    score: Optional[float] = None
    payload: Optional[Dict[str, Any]] = None
    vector: Optional[Any] = None
    shard_key: Optional[Any] = None


class PointsResponse(BaseModel):
    time: Optional[float] = None
    status: Optional[Any] = None
    result: List[PointResult]
