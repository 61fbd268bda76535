"""LLM client used for insight enrichment, trend insights and chat."""

from .client import (
    LLMClientError,
    LLMClientException,
    OpenAIChatClient,
    build_default_client,
)

__all__ = [
    "LLMClientError",
    "LLMClientException",
    "OpenAIChatClient",
    "build_default_client",
]
