"""
Pydantic schemas for the headline analysis and generation endpoints.

Request fields are declared optional so that a missing field reaches the
route and is reported with the fixed "All fields are required" message,
instead of FastAPI's default 422 body. Response models use camelCase aliases
because that is the contract the frontend consumes.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class AnalysisRequest(BaseModel):
    """
    Request to analyze a single headline.

    All four fields are required and must be non-empty; the route checks
    presence explicitly. No length limits or sanitization are applied.
    """
    headline: Optional[str] = Field(
        None,
        description="Headline text to analyze",
        examples=["10 Proven Ways to Double Your Newsletter Signups"]
    )
    category: Optional[str] = Field(
        None,
        description="Content category",
        examples=["Marketing"]
    )
    platform: Optional[str] = Field(
        None,
        description="Where the headline will be published",
        examples=["Blog", "LinkedIn"]
    )
    target_audience: Optional[str] = Field(
        None,
        alias="targetAudience",
        description="Who the headline is written for",
        examples=["Small business owners"]
    )

    model_config = {
        "populate_by_name": True,
    }

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty."""
        return [
            name for name in ("headline", "category", "platform", "target_audience")
            if not getattr(self, name)
        ]


class GenerationRequest(BaseModel):
    """Request to generate candidate headlines for a marketing context."""
    category: Optional[str] = Field(
        None,
        description="Content category",
        examples=["Fitness"]
    )
    platform: Optional[str] = Field(
        None,
        description="Where the headlines will be published",
        examples=["Instagram"]
    )
    target_audience: Optional[str] = Field(
        None,
        alias="targetAudience",
        description="Who the headlines are written for",
        examples=["Busy parents"]
    )

    model_config = {
        "populate_by_name": True,
    }

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty."""
        return [
            name for name in ("category", "platform", "target_audience")
            if not getattr(self, name)
        ]


# ============================================================================
# RESPONSE MODELS
# ============================================================================

Score = Union[int, float]


class Recommendation(BaseModel):
    """Single recommendation attached to an aspect."""
    id: str = Field(
        ...,
        description="Server-assigned identifier, stable by position (e.g. 'c_rec1')",
        examples=["c_rec1"]
    )
    text: str = Field(
        ...,
        description="Recommendation text exactly as produced by the model",
        examples=["Keep it under 10 words"]
    )


class AspectResult(BaseModel):
    """Score and recommendations for one evaluated aspect of a headline."""
    score: Score = Field(..., description="Aspect score as returned by the model")
    recommendations: List[Recommendation] = Field(
        default_factory=list,
        description="Ordered recommendations for this aspect"
    )


class AnalysisResult(BaseModel):
    """
    Response model for POST /api/analyze.

    The four aspect keys are always present on success; normalization is
    all-or-nothing.
    """
    general_score: Score = Field(
        ...,
        alias="generalScore",
        description="Overall headline score"
    )
    clarity: AspectResult
    emotion: AspectResult
    seo: AspectResult
    engagement: AspectResult

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "generalScore": 7,
                "clarity": {
                    "score": 8,
                    "recommendations": [{"id": "c_rec1", "text": "Keep it under 10 words"}]
                },
                "emotion": {"score": 6, "recommendations": []},
                "seo": {"score": 5, "recommendations": []},
                "engagement": {"score": 9, "recommendations": []}
            }
        }
    }


class GenerationResult(BaseModel):
    """Response model for POST /api/generate."""
    headlines: List[str] = Field(
        default_factory=list,
        description="Generated headlines in the order the model produced them"
    )


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., examples=["All fields are required"])
