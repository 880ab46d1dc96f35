from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from vector_gateway.api.deps import get_allocator
from vector_gateway.services.sequence import SequenceAllocator

router = APIRouter()


@router.get("/i", response_class=PlainTextResponse)
async def next_id(allocator: SequenceAllocator = Depends(get_allocator)):
    """Allocate the next sequence id."""
    return str(await allocator.next_id())
