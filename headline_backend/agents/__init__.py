"""
Prompt components for the Headline Analyzer backend.

1. Headline Analysis (single-shot JSON workflow)
   - One chat completion, JSON embedded in the reply text
   - Reply is normalized in headline_backend/services/normalizer.py

2. Headline Generation (single-shot text workflow)
   - One chat completion, one headline per line

Neither workflow uses tools, system prompts or multi-turn conversations.
"""

from headline_backend.agents.headline import (
    build_analysis_prompt,
    build_generation_prompt,
)

__all__ = [
    "build_analysis_prompt",
    "build_generation_prompt",
]
