"""Chat companion."""

from .companion import ChatTurn, build_messages, fallback_reply, generate_chat_reply

__all__ = ["ChatTurn", "build_messages", "fallback_reply", "generate_chat_reply"]
