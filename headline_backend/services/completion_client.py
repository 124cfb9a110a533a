"""
Completion Client - OpenAI Chat Completions

Thin wrapper around the OpenAI Python SDK used by the headline service.

Architecture:
- Pattern: single user-role message, single completion, no tools
- Model: settings.OPENAI_MODEL (default gpt-3.5-turbo)
- Temperature: 0.7
- Retries: none (SDK retries disabled, failures surface immediately)

The client is created lazily once per process and shared by all requests.
The SDK client holds no per-request state, so sharing it is safe.
"""

import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from headline_backend.config import settings
from headline_backend.services.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.7

# Initialize OpenAI client (lazy initialization)
_openai_client: Optional[OpenAI] = None


def _get_openai_client() -> OpenAI:
    """
    Lazy initialization of the OpenAI client.

    Raises:
        UpstreamError: If OPENAI_API_KEY is not configured.
    """
    global _openai_client

    if _openai_client is not None:
        return _openai_client

    if not settings.OPENAI_API_KEY:
        logger.error(
            "OPENAI_API_KEY not configured. Headline service will not work. "
            "Please set OPENAI_API_KEY in your .env file."
        )
        raise UpstreamError(detail="OPENAI_API_KEY is not configured")

    _openai_client = OpenAI(api_key=settings.OPENAI_API_KEY, max_retries=0)
    logger.info("OpenAI client initialized successfully")
    return _openai_client


def reset_client() -> None:
    """Drop the cached client so the next call rebuilds it from settings."""
    global _openai_client
    _openai_client = None


def request_completion(
    prompt: str,
    max_tokens: int,
    temperature: float = DEFAULT_TEMPERATURE,
) -> str:
    """
    Send a single chat-completion request and return the reply text.

    Args:
        prompt: Full prompt, sent as one user-role message
        max_tokens: Token ceiling for the completion
        temperature: Sampling temperature

    Returns:
        The text of the first choice

    Raises:
        UpstreamError: On any provider failure or an empty completion.
            The provider exception is chained, never exposed to clients.
    """
    client = _get_openai_client()

    try:
        logger.info(f"Calling OpenAI chat completion (model={settings.OPENAI_MODEL}, max_tokens={max_tokens})")
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except OpenAIError as e:
        logger.error(f"OpenAI API error: {type(e).__name__}: {e}")
        raise UpstreamError(detail=f"{type(e).__name__}: {e}") from e

    if not response.choices or not response.choices[0].message.content:
        logger.error("Empty response from OpenAI API")
        raise UpstreamError(detail="Completion contained no text")

    content = response.choices[0].message.content
    logger.debug(f"Full OpenAI response: {content}")
    return content
