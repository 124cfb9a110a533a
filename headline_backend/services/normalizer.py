"""
Response Normalizer

Turns raw completion text into the external response contracts.

Analysis replies:
1. Find the first balanced {...} span that parses as JSON. The scanner tracks
   brace depth and skips braces inside JSON string literals, so prose before
   or after the object (and braces inside recommendation text) do not break
   extraction.
2. Check the expected key structure (general_score + four aspects, each with
   a short-form score and a recommendations list).
3. Re-key into AnalysisResult. Recommendation ids are always assigned here
   by position (c_rec1, c_rec2, ...); ids sent by the model are ignored.

Normalization is all-or-nothing: any missing aspect or key raises
NormalizationError, no defaults are substituted.

Generation replies are plain text: one headline per non-blank line. Lines are
split on LF or CRLF only; other Unicode line separators stay inside a line.
"""

import json
import logging
import math
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from headline_backend.agents.headline.types import RawHeadlineAnalysis
from headline_backend.schemas.headlines import (
    AnalysisResult,
    AspectResult,
    GenerationResult,
    Recommendation,
)
from headline_backend.services.errors import NormalizationError

logger = logging.getLogger(__name__)


# (model aspect key, model score key, external key, recommendation id prefix)
ASPECT_MAPPING = (
    ("clarity_and_conciseness", "c_score", "clarity", "c"),
    ("emotional_impact", "e_score", "emotion", "e"),
    ("seo_optimization", "s_score", "seo", "s"),
    ("engagement_potential", "g_score", "engagement", "g"),
)


# =============================================================================
# JSON EXTRACTION
# =============================================================================

def _balanced_span_end(text: str, start: int) -> Optional[int]:
    """
    Return the index just past the '}' that closes the '{' at ``start``.

    Braces inside double-quoted strings are ignored; backslash escapes inside
    strings are honored. Returns None if the object is never closed.
    """
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]

        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1

    return None


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Extract the first JSON object embedded in free-form text.

    Args:
        text: Raw model reply, possibly with prose around the JSON

    Returns:
        The parsed object

    Raises:
        NormalizationError: If the text contains no '{', or no balanced span
            parses as a JSON object.
    """
    start = text.find("{")
    if start == -1:
        raise NormalizationError(detail="No valid JSON found in model response: no '{' present")

    last_error: Optional[str] = None
    while start != -1:
        end = _balanced_span_end(text, start)
        if end is not None:
            candidate = text[start:end]
            try:
                parsed = json.loads(candidate, parse_constant=_reject_constant)
            except ValueError as e:
                last_error = str(e)
            else:
                if isinstance(parsed, dict):
                    return parsed
        start = text.find("{", start + 1)

    if last_error is None:
        raise NormalizationError(detail="No valid JSON found in model response: unbalanced braces")
    raise NormalizationError(detail=f"No valid JSON found in model response: {last_error}")


# =============================================================================
# SHAPE CHECKS
# =============================================================================

def _require(container: Any, key: str, path: str) -> Any:
    """Fetch ``container[key]`` or fail with the dotted path of the missing key."""
    if not isinstance(container, dict):
        raise NormalizationError(detail=f"Expected an object at '{path}'")
    if key not in container or container[key] is None:
        raise NormalizationError(detail=f"Missing key '{path}.{key}'" if path else f"Missing key '{key}'")
    return container[key]


def _require_number(container: Any, key: str, path: str) -> Any:
    value = _require(container, key, path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NormalizationError(detail=f"Expected a number at '{path}.{key}', got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise NormalizationError(detail=f"Expected a finite number at '{path}.{key}', got {value}")
    return value


def _build_recommendations(raw_recommendations: Any, prefix: str, path: str) -> List[Recommendation]:
    """Keep model text in order and assign ids by position."""
    if not isinstance(raw_recommendations, list):
        raise NormalizationError(detail=f"Expected a list at '{path}.recommendations'")

    recommendations = []
    for position, entry in enumerate(raw_recommendations, start=1):
        entry_path = f"{path}.recommendations[{position - 1}]"
        text = _require(entry, "text", entry_path)
        if not isinstance(text, str):
            raise NormalizationError(detail=f"Expected a string at '{entry_path}.text'")
        recommendations.append(Recommendation(id=f"{prefix}_rec{position}", text=text))

    return recommendations


# =============================================================================
# PUBLIC API
# =============================================================================

def normalize_analysis(raw_reply: str) -> AnalysisResult:
    """
    Convert a raw analysis reply into the external AnalysisResult.

    Raises:
        NormalizationError: If the reply has no JSON object or the object is
            missing any expected key.
    """
    parsed: RawHeadlineAnalysis = extract_json_object(raw_reply)  # type: ignore[assignment]

    general_score = _require_number(parsed, "general_score", "")
    aspects = _require(parsed, "aspects", "")

    reshaped: Dict[str, Any] = {"general_score": general_score}
    for aspect_key, score_key, external_key, prefix in ASPECT_MAPPING:
        path = f"aspects.{aspect_key}"
        aspect = _require(aspects, aspect_key, "aspects")
        score = _require_number(aspect, score_key, path)
        raw_recommendations = _require(aspect, "recommendations", path)
        reshaped[external_key] = AspectResult(
            score=score,
            recommendations=_build_recommendations(raw_recommendations, prefix, path),
        )

    try:
        return AnalysisResult(**reshaped)
    except ValidationError as e:
        raise NormalizationError(detail=f"Reshaped analysis failed validation: {e}") from e


def normalize_generation(raw_reply: str) -> GenerationResult:
    """Split a generation reply into headlines, dropping blank lines."""
    headlines = [line for line in re.split(r"\r?\n", raw_reply) if line.strip()]
    return GenerationResult(headlines=headlines)
