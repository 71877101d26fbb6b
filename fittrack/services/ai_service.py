# fittrack/services/ai_service.py
import logging
from typing import Iterator, Optional, Sequence

import openai
from openai import OpenAI

from ..core.settings import settings
from ..errors import AuthError, ConfigError, RateLimitError, UpstreamError, UpstreamTimeoutError
from ..schemas.ai_schemas import ChatMessage
from .canned_responses import FALLBACK_RESPONSE, find_canned_response

logger = logging.getLogger(__name__)


def get_chat_client() -> Iterator[Optional[OpenAI]]:
    """Chat-completion client, or None when no API key is configured."""
    if not settings.GROK_API_KEY:
        yield None
        return
    client = OpenAI(
        api_key=settings.GROK_API_KEY,
        base_url=settings.AI_BASE_URL,
        timeout=settings.AI_TIMEOUT_SECONDS,
        max_retries=0,
    )
    try:
        yield client
    finally:
        client.close()


def _upstream_details(e: openai.APIStatusError):
    if e.body:
        return e.body
    return "No additional details"


def ask_upstream(client: OpenAI, messages: Sequence[ChatMessage], temperature: float) -> str:
    """
    Forward the whole conversation to the chat-completion endpoint.

    A single call, no retries. Upstream failures are mapped onto the app
    error taxonomy; a 403 becomes the fallback answer unless
    AI_MASK_FORBIDDEN is turned off.
    """
    logger.info("[AI] calling %s with %d messages", settings.AI_MODEL, len(messages))
    try:
        resp = client.chat.completions.create(
            model=settings.AI_MODEL,
            messages=[{"role": m.role.value, "content": m.content} for m in messages],
            temperature=temperature,
            stream=False,
        )
    except openai.PermissionDeniedError as e:
        logger.warning("[AI] upstream 403: %s", e.body)
        if settings.AI_MASK_FORBIDDEN:
            return FALLBACK_RESPONSE
        raise AuthError("AI service refused the request", details=_upstream_details(e))
    except openai.AuthenticationError as e:
        logger.error("[AI] upstream 401: %s", e.body)
        raise AuthError("API authentication failed. Check GROK_API_KEY.")
    except openai.RateLimitError as e:
        logger.warning("[AI] upstream 429: %s", e.body)
        raise RateLimitError()
    except openai.APITimeoutError:
        logger.error("[AI] upstream timed out after %ss", settings.AI_TIMEOUT_SECONDS)
        raise UpstreamTimeoutError()
    except openai.APIStatusError as e:
        logger.error("[AI] upstream %s: %s", e.status_code, e.body)
        raise UpstreamError(e.message or "Failed to get response from AI", details=_upstream_details(e))
    except openai.APIConnectionError as e:
        logger.error("[AI] connection error: %s", e)
        raise UpstreamError(str(e) or "Failed to get response from AI", details="No additional details")

    content = (resp.choices[0].message.content or "").strip()
    logger.info("[AI] got response from upstream")
    return content


def answer_conversation(messages: Sequence[ChatMessage], temperature: float, client: Optional[OpenAI]) -> str:
    canned = find_canned_response(messages[-1].content)
    if canned is not None:
        logger.info("[AI] using canned response")
        return canned

    if client is None:
        logger.error("[AI] GROK_API_KEY not set in environment")
        raise ConfigError("GROK_API_KEY not configured on server")

    return ask_upstream(client, messages, temperature)
