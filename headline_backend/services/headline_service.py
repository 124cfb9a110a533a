"""
Headline Service - analysis and generation orchestration

Glue between the HTTP routes and the completion API:

1. Build the prompt from already-validated request fields
2. Call the completion API once (no retries)
3. Normalize the reply into the external response model

Errors:
- UpstreamError: completion call failed (re-raised with an endpoint message)
- NormalizationError: reply could not be reshaped (analysis only)

Both carry a user-facing message; the underlying detail is logged here and
never returned to the client.

The SDK call is blocking, so it runs in Starlette's threadpool to keep the
event loop free for concurrent requests.
"""

import logging

from starlette.concurrency import run_in_threadpool

from headline_backend.agents.headline.prompts import (
    build_analysis_prompt,
    build_generation_prompt,
)
from headline_backend.schemas.headlines import AnalysisResult, GenerationResult
from headline_backend.services import completion_client
from headline_backend.services.errors import NormalizationError, UpstreamError
from headline_backend.services.normalizer import normalize_analysis, normalize_generation
from headline_backend.utils.logging import truncate_for_log

logger = logging.getLogger(__name__)

ANALYSIS_MAX_TOKENS = 1000
GENERATION_MAX_TOKENS = 500

ANALYSIS_UPSTREAM_MESSAGE = (
    "An error occurred while analyzing the headline. "
    "Please clear your cache and try again."
)
ANALYSIS_PARSE_MESSAGE = (
    "Failed to parse headline analysis. "
    "Please clear your cache and try again."
)
GENERATION_UPSTREAM_MESSAGE = "An error occurred while generating headlines. Please try again."


async def analyze_headline(
    headline: str,
    category: str,
    platform: str,
    target_audience: str,
) -> AnalysisResult:
    """
    Score a headline on clarity, emotion, SEO and engagement.

    Args:
        headline: Headline text to analyze
        category: Content category
        platform: Publishing platform
        target_audience: Intended audience

    Returns:
        AnalysisResult in the external (camelCase) contract

    Raises:
        UpstreamError: If the completion call fails
        NormalizationError: If the reply cannot be reshaped
    """
    logger.info(f"analyze_headline called: headline='{truncate_for_log(headline)}', platform='{platform}'")

    prompt = build_analysis_prompt(
        headline=headline,
        category=category,
        platform=platform,
        target_audience=target_audience,
    )

    try:
        content = await run_in_threadpool(
            completion_client.request_completion,
            prompt,
            ANALYSIS_MAX_TOKENS,
        )
    except UpstreamError as e:
        logger.error(f"Completion API error during analysis: {e.detail}")
        raise UpstreamError(ANALYSIS_UPSTREAM_MESSAGE, detail=e.detail) from e

    try:
        result = normalize_analysis(content)
    except NormalizationError as e:
        logger.error(f"Error parsing completion response: {e.detail}")
        logger.debug(f"Unparseable response: {content[:500]}")
        raise NormalizationError(ANALYSIS_PARSE_MESSAGE, detail=e.detail) from e

    logger.info(f"Headline analysis completed: generalScore={result.general_score}")
    return result


async def generate_headlines(
    category: str,
    platform: str,
    target_audience: str,
) -> GenerationResult:
    """
    Ask the model for candidate headlines and return them one per line.

    Raises:
        UpstreamError: If the completion call fails
    """
    logger.info(f"generate_headlines called: category='{category}', platform='{platform}'")

    prompt = build_generation_prompt(
        category=category,
        platform=platform,
        target_audience=target_audience,
    )

    try:
        content = await run_in_threadpool(
            completion_client.request_completion,
            prompt,
            GENERATION_MAX_TOKENS,
        )
    except UpstreamError as e:
        logger.error(f"Completion API error during generation: {e.detail}")
        raise UpstreamError(GENERATION_UPSTREAM_MESSAGE, detail=e.detail) from e

    result = normalize_generation(content)
    logger.info(f"Returning {len(result.headlines)} generated headlines")
    return result
