from pydantic import BaseModel
from typing import Dict, Optional, Union


class SearchRequest(BaseModel):
    q: str
    f: Optional[Dict[str, str]] = None


class GroupSearchRequest(SearchRequest):
    k: str


class IpSearchRequest(BaseModel):
    d: Union[int, float, str]
    p: Optional[str] = None
