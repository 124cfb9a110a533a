"""
FastAPI routes for headline analysis and generation.

Endpoints:
- POST /api/analyze: Score a headline on four aspects
- POST /api/generate: Generate candidate headlines for a context

Endpoint flow:
- Step 1: Parse body → AnalysisRequest / GenerationRequest (all fields optional)
- Step 2: Presence check → 400 {"error": "All fields are required"}
- Step 3: Call service layer (prompt → completion → normalization)
- Step 4: Return response model (camelCase aliases)

Service errors propagate as HeadlineServiceError and are rendered by the
handler registered in main.py.
"""

import logging

from fastapi import APIRouter

from headline_backend.schemas.headlines import (
    AnalysisRequest,
    AnalysisResult,
    ErrorResponse,
    GenerationRequest,
    GenerationResult,
)
from headline_backend.services.errors import InputValidationError
from headline_backend.services.headline_service import analyze_headline, generate_headlines
from headline_backend.utils.logging import truncate_for_log

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/api",
    tags=["headlines"]
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "A required field is missing"},
    500: {"model": ErrorResponse, "description": "Completion or parsing failure"},
}


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses=ERROR_RESPONSES,
    status_code=200,
    summary="Analyze a headline",
    description="""
    Scores a headline for the given category, platform and audience.

    **Response:** overall `generalScore` plus `clarity`, `emotion`, `seo` and
    `engagement`, each with a `score` and ordered `recommendations`.

    **Errors:**
    - 400 if any of headline, category, platform, targetAudience is missing
    - 500 if the completion call fails or its reply cannot be parsed
    """
)
async def analyze_headline_endpoint(request: AnalysisRequest) -> AnalysisResult:
    """
    Headline analysis endpoint.

    - Validate: every field present and non-empty
    - Call service: builds prompt, calls completion API, normalizes reply
    """
    missing = request.missing_fields()
    if missing:
        logger.warning(f"POST /api/analyze rejected, missing fields: {missing}")
        raise InputValidationError()

    logger.info(f"POST /api/analyze called, headline='{truncate_for_log(request.headline)}'")

    return await analyze_headline(
        headline=request.headline,
        category=request.category,
        platform=request.platform,
        target_audience=request.target_audience,
    )


@router.post(
    "/generate",
    response_model=GenerationResult,
    responses=ERROR_RESPONSES,
    status_code=200,
    summary="Generate headlines",
    description="""
    Generates candidate headlines for the given category, platform and audience.

    **Response:** `headlines`, the non-blank lines of the model reply in order.

    **Errors:**
    - 400 if any of category, platform, targetAudience is missing
    - 500 if the completion call fails
    """
)
async def generate_headlines_endpoint(request: GenerationRequest) -> GenerationResult:
    """Headline generation endpoint."""
    missing = request.missing_fields()
    if missing:
        logger.warning(f"POST /api/generate rejected, missing fields: {missing}")
        raise InputValidationError()

    logger.info(f"POST /api/generate called, category='{request.category}'")

    return await generate_headlines(
        category=request.category,
        platform=request.platform,
        target_audience=request.target_audience,
    )
