"""
Service layer for the Headline Analyzer backend.

Contains the orchestration that:
- Builds prompts from validated request fields
- Calls the completion API (one call, no retries)
- Normalizes model replies into the response models

Services act as the glue between routes (HTTP layer) and the completion API.
"""

from .errors import (
    HeadlineServiceError,
    InputValidationError,
    NormalizationError,
    UpstreamError,
)
from .completion_client import request_completion
from .normalizer import (
    extract_json_object,
    normalize_analysis,
    normalize_generation,
)
from .headline_service import (
    analyze_headline,
    generate_headlines,
)

__all__ = [
    "HeadlineServiceError",
    "InputValidationError",
    "NormalizationError",
    "UpstreamError",
    "request_completion",
    "extract_json_object",
    "normalize_analysis",
    "normalize_generation",
    "analyze_headline",
    "generate_headlines",
]
