"""
Chat Endpoints
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, field_validator

from mindtrack.chat.companion import ChatTurn, generate_chat_reply
from mindtrack.llm.client import OpenAIChatClient
from mindtrack.storage import repository

from .deps import close_quietly, get_llm_client, get_user_id, require_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/chat",
    tags=["chat"],
)

CONTEXT_MESSAGES = 10


class ChatRequest(BaseModel):
    message: str = Field(min_length=1, max_length=4000)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message must not be blank")
        return v.strip()


class ChatResponse(BaseModel):
    response: str


@router.get("/history")
def chat_history(
    limit: int = Query(default=20, ge=1, le=200),
    user_id: str = Depends(get_user_id),
):
    """Most recent messages in chronological order."""
    conn = require_db()
    try:
        rows = repository.list_chat_messages(conn, user_id, limit=limit)
        conn.close()
        return list(reversed(rows))
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching chat history")
        raise HTTPException(status_code=500, detail=f"Failed to fetch chat history: {str(e)}")


@router.post("", response_model=ChatResponse)
def send_message(
    request: ChatRequest,
    user_id: str = Depends(get_user_id),
    client: Optional[OpenAIChatClient] = Depends(get_llm_client),
):
    conn = require_db()
    try:
        # History excludes the message being sent
        recent = repository.list_chat_messages(conn, user_id, limit=CONTEXT_MESSAGES)
        history = [ChatTurn(message=r["message"], is_bot=bool(r["is_bot"])) for r in reversed(recent)]

        repository.create_chat_message(conn, user_id, request.message, is_bot=False)
        reply = generate_chat_reply(request.message, history, client)
        repository.create_chat_message(conn, user_id, reply, is_bot=True)

        conn.commit()
        conn.close()
        return ChatResponse(response=reply)
    except Exception as e:
        close_quietly(conn, rollback=True)
        logger.exception("Error processing chat message")
        raise HTTPException(status_code=500, detail=f"Failed to process chat message: {str(e)}")
