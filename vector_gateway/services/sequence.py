import logging
from typing import List, Optional, Union

from vector_gateway.core.config import COUNTER_CATEGORY, COUNTER_POINT_ID, VECTOR_SIZE
from vector_gateway.services.qdrant_gateway import QdrantGateway

COUNTER_FIELD = "sc"


class SequenceAllocator:
    """
    Mints increasing ids from the `sc` counter stored on a well-known point.

    The read-modify-write is not atomic: two concurrent `next_id()` calls can
    read the same counter and hand out the same id.
    """

    def __init__(
        self,
        gateway: QdrantGateway,
        point_id: Union[int, str] = COUNTER_POINT_ID,
        vector_size: int = VECTOR_SIZE,
    ):
        self.gateway = gateway
        self.point_id = point_id
        self.vector_size = vector_size

    async def current(self) -> Optional[int]:
        """Stored counter, 0 when unset, None when the counter point does not exist."""
        response = await self.gateway.retrieve([self.point_id], with_payload=[COUNTER_FIELD])
        if not response.result:
            return None
        value = (response.result[0].payload or {}).get(COUNTER_FIELD)
        if isinstance(value, bool) or not isinstance(value, int):
            return 0
        return value

    async def next_id(self) -> int:
        current = await self.current()
        if current is None:
            current = 0
            await self._seed(current + 1)
        else:
            await self.gateway.set_payload({COUNTER_FIELD: current + 1}, [self.point_id])

        logging.info(f"[Sequence] allocated {current}, next {current + 1}")
        return current

    async def next_ids(self, count: int) -> List[int]:
        return [await self.next_id() for _ in range(count)]

    async def _seed(self, value: int):
        logging.info(f"[Sequence] Counter point {self.point_id} missing, seeding")
        await self.gateway.upsert([{
            "id": self.point_id,
            "payload": {COUNTER_FIELD: value, "c": COUNTER_CATEGORY},
            "vector": [0.0] * self.vector_size,
        }])
