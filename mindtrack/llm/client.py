"""
OpenAI Chat Completions Client
==============================
Minimal synchronous client shared by insight enrichment, trend insights
and the chat companion.

STRICT MODE: every failure raises LLMClientException; callers decide
on fallbacks. No retries.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx

from mindtrack import config

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_ENDPOINT = "/chat/completions"


# ============================================
# ERROR CODES
# ============================================

class LLMClientError(Enum):
    LLM_NOT_CONFIGURED = "LLM_NOT_CONFIGURED"
    LLM_TIMEOUT = "LLM_TIMEOUT"
    LLM_UNAVAILABLE = "LLM_UNAVAILABLE"
    LLM_API_ERROR = "LLM_API_ERROR"
    LLM_INVALID_RESPONSE = "LLM_INVALID_RESPONSE"


class LLMClientException(Exception):
    """Exception for chat-completion failures."""

    def __init__(self, error_code: LLMClientError, message: str, http_code: int = 503):
        self.error_code = error_code
        self.message = message
        self.http_code = http_code
        super().__init__(f"{error_code.value}: {message}")


# ============================================
# CLIENT
# ============================================

class OpenAIChatClient:
    """Thin wrapper over POST {base_url}/chat/completions."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: str = "https://api.openai.com/v1",
        timeout_seconds: float = 30.0,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> str:
        """
        Run one chat completion and return the first choice's content.

        Returns "" when the model produced no content.
        """
        if not self.api_key:
            raise LLMClientException(
                LLMClientError.LLM_NOT_CONFIGURED,
                "OPENAI_API_KEY is not set",
            )

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            with httpx.Client(timeout=self.timeout_seconds) as client:
                response = client.post(
                    f"{self.base_url}{CHAT_COMPLETIONS_ENDPOINT}",
                    json=payload,
                    headers=headers,
                )

                if response.status_code != 200:
                    raise LLMClientException(
                        LLMClientError.LLM_API_ERROR,
                        f"Chat completion returned HTTP {response.status_code}: {response.text[:200]}",
                        http_code=502,
                    )

                return _extract_content(response.json())

        except httpx.TimeoutException:
            raise LLMClientException(
                LLMClientError.LLM_TIMEOUT,
                f"Chat completion timed out after {self.timeout_seconds}s",
            )
        except httpx.ConnectError as e:
            raise LLMClientException(
                LLMClientError.LLM_UNAVAILABLE,
                f"Cannot connect to {self.base_url}: {str(e)}",
            )
        except LLMClientException:
            raise
        except Exception as e:
            raise LLMClientException(
                LLMClientError.LLM_UNAVAILABLE,
                f"Unexpected error calling chat completion: {str(e)}",
            )


def _extract_content(body: Any) -> str:
    try:
        content = body["choices"][0]["message"].get("content")
    except (KeyError, IndexError, TypeError, AttributeError):
        raise LLMClientException(
            LLMClientError.LLM_INVALID_RESPONSE,
            "Response has no choices[0].message",
            http_code=502,
        )
    return content or ""


def build_default_client() -> Optional[OpenAIChatClient]:
    """Client from environment settings, or None when no API key is configured."""
    if not config.OPENAI_API_KEY:
        logger.debug("OPENAI_API_KEY not set; AI features will use fallbacks")
        return None
    return OpenAIChatClient(
        api_key=config.OPENAI_API_KEY,
        model=config.OPENAI_MODEL,
        base_url=config.OPENAI_BASE_URL,
        timeout_seconds=config.OPENAI_TIMEOUT_SECONDS,
    )
