"""
Chat listing endpoints: summary points (`lucid`) and per-conversation
messages (`scm`), newest first, paged by offset or by a `d` cursor.
"""
from fastapi import APIRouter, Depends, Path, Query
from typing import Any, Optional

from vector_gateway.api.deps import get_gateway
from vector_gateway.core.config import CHAT_MESSAGE_CATEGORY, CHAT_SUMMARY_CATEGORY, PAGE_SIZE
from vector_gateway.services.filters import match, must, order_value
from vector_gateway.services.qdrant_gateway import QdrantGateway, result_field

router = APIRouter()


def scroll_body(
    category: str,
    conversation_id: Optional[str] = None,
    page: Optional[int] = None,
    start_from: Any = None,
) -> dict:
    order_by = {"key": "d", "direction": "desc"}
    if start_from is not None:
        order_by["start_from"] = start_from

    conditions = [match("c", category)]
    if conversation_id is not None:
        conditions.append(match("i", conversation_id))

    body = {"limit": PAGE_SIZE, "order_by": order_by, "filter": must(*conditions)}
    if page is not None:
        body["offset"] = (page - 1) * PAGE_SIZE
    return body


async def scroll_points(gateway: QdrantGateway, body: dict):
    res = await gateway.scroll(body)
    return result_field(res, "result", "points")


# -------------------------
# CHAT SUMMARIES
# -------------------------
@router.get("/chats")
async def list_chats(gateway: QdrantGateway = Depends(get_gateway)):
    return await scroll_points(gateway, scroll_body(CHAT_SUMMARY_CATEGORY, page=1))


@router.get("/chats/{page}")
async def list_chats_page(
    page: int = Path(..., ge=1),
    gateway: QdrantGateway = Depends(get_gateway),
):
    return await scroll_points(gateway, scroll_body(CHAT_SUMMARY_CATEGORY, page=page))


@router.get("/chats_from/{start}")
async def list_chats_from(start: str, gateway: QdrantGateway = Depends(get_gateway)):
    return await scroll_points(
        gateway, scroll_body(CHAT_SUMMARY_CATEGORY, start_from=order_value(start))
    )


# -------------------------
# CHAT MESSAGES
# -------------------------
@router.get("/chat/{conversation_id}")
async def chat_messages(
    conversation_id: str,
    page: int = Query(1, ge=1),
    gateway: QdrantGateway = Depends(get_gateway),
):
    return await scroll_points(
        gateway, scroll_body(CHAT_MESSAGE_CATEGORY, conversation_id, page=page)
    )


@router.get("/chat/{conversation_id}/{page}")
async def chat_messages_page(
    conversation_id: str,
    page: int = Path(..., ge=1),
    gateway: QdrantGateway = Depends(get_gateway),
):
    return await scroll_points(
        gateway, scroll_body(CHAT_MESSAGE_CATEGORY, conversation_id, page=page)
    )


@router.get("/chat_from/{conversation_id}/{start}")
async def chat_messages_from(
    conversation_id: str,
    start: str,
    gateway: QdrantGateway = Depends(get_gateway),
):
    return await scroll_points(
        gateway,
        scroll_body(CHAT_MESSAGE_CATEGORY, conversation_id, start_from=order_value(start)),
    )
