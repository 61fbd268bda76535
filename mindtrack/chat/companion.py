"""
Chat Companion

Supportive replies about social media wellness. The model sees a fixed
system prompt plus the last six messages; when the call fails a keyword
matched canned reply is returned instead.
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel

from mindtrack.llm.client import LLMClientException, OpenAIChatClient

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 6
CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 300

SYSTEM_PROMPT = """You are MindTrack AI, a compassionate mental health companion specializing in digital wellness and social media impact. Your role is to:

1. Provide supportive, evidence-based guidance on digital wellness
2. Help users understand their relationship with social media
3. Offer practical strategies for healthier technology use
4. Encourage self-reflection and mindful usage patterns
5. Provide emotional support without giving medical advice

Guidelines:
- Be warm, empathetic, and non-judgmental
- Focus on practical, actionable advice
- Ask thoughtful follow-up questions
- Acknowledge users' feelings and experiences
- Suggest healthy coping strategies
- Remind users to seek professional help for serious concerns
- Keep responses concise but meaningful (2-4 sentences typically)

Remember: You're a supportive companion, not a replacement for professional mental health care."""

EMPTY_REPLY = "I'm here to help with your digital wellness journey. How can I support you today?"

STRESS_REPLY = (
    "I understand you're feeling stressed. Taking breaks from social media can really help. "
    "Have you tried setting specific times to check your apps, or using mindfulness techniques "
    "when you feel overwhelmed?"
)
SCREEN_TIME_REPLY = (
    "Managing screen time is a common challenge. Consider setting daily limits for your most-used "
    "apps, or try the 'phone-free' hour before bed. What platforms do you find yourself using most?"
)
COMPARISON_REPLY = (
    "Social comparison is natural but can be harmful to our wellbeing. Remember that people share "
    "their highlights, not their struggles. Try unfollowing accounts that make you feel inadequate "
    "and following those that inspire you positively."
)
GENERIC_REPLY = (
    "I'm experiencing some technical difficulties, but I'm here to support your digital wellness "
    "journey. What's on your mind about your social media use?"
)

# (keywords, reply); first match wins
FALLBACK_REPLIES = (
    (("stress", "anxious"), STRESS_REPLY),
    (("time", "usage"), SCREEN_TIME_REPLY),
    (("comparison", "compare"), COMPARISON_REPLY),
)


class ChatTurn(BaseModel):
    message: str
    is_bot: bool = False


def fallback_reply(message: str) -> str:
    lowered = (message or "").lower()
    for keywords, reply in FALLBACK_REPLIES:
        if any(k in lowered for k in keywords):
            return reply
    return GENERIC_REPLY


def build_messages(message: str, history: Sequence[ChatTurn]) -> List[dict]:
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    for turn in list(history)[-HISTORY_WINDOW:]:
        messages.append({
            "role": "assistant" if turn.is_bot else "user",
            "content": turn.message,
        })
    messages.append({"role": "user", "content": message})
    return messages


def generate_chat_reply(
    message: str,
    history: Sequence[ChatTurn],
    client: Optional[OpenAIChatClient],
) -> str:
    """
    Reply to a user message.

    history is chronological (oldest first). Never raises.
    """
    if client is None:
        return fallback_reply(message)

    try:
        reply = client.complete(
            build_messages(message, history),
            temperature=CHAT_TEMPERATURE,
            max_tokens=CHAT_MAX_TOKENS,
        )
    except LLMClientException as e:
        logger.warning(f"Chat completion failed: {e}")
        return fallback_reply(message)

    return reply.strip() or EMPTY_REPLY
