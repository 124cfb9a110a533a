"""
Headline Prompt Package

Prompt templates for the two headline workflows:
- Analysis: score a headline on four aspects, JSON output
- Generation: propose candidate headlines, one per line

Usage:
    from headline_backend.agents.headline import build_analysis_prompt

    prompt = build_analysis_prompt(
        headline="10 Proven Ways to Double Your Signups",
        category="Marketing",
        platform="Blog",
        target_audience="Small business owners",
    )
"""

from headline_backend.agents.headline.prompts import (
    ANALYSIS_JSON_SCHEMA,
    GENERATED_HEADLINE_COUNT,
    build_analysis_prompt,
    build_generation_prompt,
)

__all__ = [
    "ANALYSIS_JSON_SCHEMA",
    "GENERATED_HEADLINE_COUNT",
    "build_analysis_prompt",
    "build_generation_prompt",
]
