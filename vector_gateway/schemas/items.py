from pydantic import BaseModel
from typing import Optional


class ItemQuery(BaseModel):
    u: str
    i: str
    c: Optional[str] = None


class SetRequest(BaseModel):
    i: str
    v: str


class AddRequest(BaseModel):
    a: str   # party B text
    u: str   # party A text
    ad: str  # party B timestamp
    ud: str  # party A timestamp
    i: str   # conversation id
    p: str
