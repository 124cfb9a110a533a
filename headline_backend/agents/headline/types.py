"""
Headline Analysis Type Definitions

Shape of the JSON object the model is asked to embed in its reply.
These describe what the prompt requests; the normalizer still checks every
key because the model is free to ignore the instructions.
"""

from typing import List, Literal, TypedDict, Union


class RawRecommendation(TypedDict, total=False):
    """Recommendation entry as produced by the model (id is optional)."""
    id: str
    text: str


class RawClarity(TypedDict):
    c_score: Union[int, float]
    recommendations: List[RawRecommendation]


class RawEmotion(TypedDict):
    e_score: Union[int, float]
    recommendations: List[RawRecommendation]


class RawSeo(TypedDict):
    s_score: Union[int, float]
    recommendations: List[RawRecommendation]


class RawEngagement(TypedDict):
    g_score: Union[int, float]
    recommendations: List[RawRecommendation]


class RawAspects(TypedDict):
    clarity_and_conciseness: RawClarity
    emotional_impact: RawEmotion
    seo_optimization: RawSeo
    engagement_potential: RawEngagement


class RawHeadlineAnalysis(TypedDict):
    """Top-level object embedded in the model reply."""
    general_score: Union[int, float]
    aspects: RawAspects


ExternalAspectKey = Literal["clarity", "emotion", "seo", "engagement"]
