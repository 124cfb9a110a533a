"""
Headline Prompt Templates

Contains the prompt builders for headline analysis and headline generation.

Both prompts are sent as a single user-role message (no system prompt).
User input is interpolated verbatim; nothing is escaped.

Analysis output contract (requested from the model):
- general_score: number
- aspects.clarity_and_conciseness: c_score + recommendations[{id, text}]
- aspects.emotional_impact:        e_score + recommendations[{id, text}]
- aspects.seo_optimization:        s_score + recommendations[{id, text}]
- aspects.engagement_potential:    g_score + recommendations[{id, text}]

Generation output contract: plain text, one headline per line.
"""

GENERATED_HEADLINE_COUNT = 10


# =============================================================================
# ANALYSIS PROMPT
# =============================================================================

ANALYSIS_JSON_SCHEMA = """{
  "general_score": number,
  "aspects": {
    "clarity_and_conciseness": {
      "c_score": number,
      "recommendations": [
        {"id": "c_rec1", "text": "Use specific keywords like 'free', 'easy'"},
        {"id": "c_rec2", "text": "Keep it under 10 words"},
        {"id": "c_rec3", "text": "Avoid jargon and complex terms"},
        {"id": "c_rec4", "text": "Revise for clarity and brevity"}
      ]
    },
    "emotional_impact": {
      "e_score": number,
      "recommendations": [
        {"id": "e_rec1", "text": "Use words like 'exciting', 'amazing'"},
        {"id": "e_rec2", "text": "Evoke curiosity with questions"},
        {"id": "e_rec3", "text": "Include strong action verbs"},
        {"id": "e_rec4", "text": "Test different emotional appeals"}
      ]
    },
    "seo_optimization": {
      "s_score": number,
      "recommendations": [
        {"id": "s_rec1", "text": "Incorporate target keywords"},
        {"id": "s_rec2", "text": "Use a number or list in the title"},
        {"id": "s_rec3", "text": "Optimize for featured snippets"},
        {"id": "s_rec4", "text": "Analyze competitor headlines for insights"}
      ]
    },
    "engagement_potential": {
      "g_score": number,
      "recommendations": [
        {"id": "g_rec1", "text": "Ask a compelling question"},
        {"id": "g_rec2", "text": "Create a sense of urgency"},
        {"id": "g_rec3", "text": "Include a unique value proposition"},
        {"id": "g_rec4", "text": "Experiment with different formats (e.g., questions, lists)"}
      ]
    }
  }
}"""


def build_analysis_prompt(
    headline: str,
    category: str,
    platform: str,
    target_audience: str,
) -> str:
    """
    Build the prompt asking the model to score a headline.

    Args:
        headline: Headline text to analyze
        category: Content category (e.g. "Marketing")
        platform: Publishing platform (e.g. "LinkedIn")
        target_audience: Intended audience (e.g. "Small business owners")

    Returns:
        Prompt string describing the task and the exact JSON shape to return
    """
    return f"""You are an expert in marketing and content creation, specializing in analyzing headlines for effectiveness. Please provide a comprehensive analysis of the following headline based on the selected category and target audience. Your analysis should focus on clarity and conciseness, emotional impact, SEO optimization, and engagement potential.

Headline: "{headline}"
Category: "{category}"
Target Audience: "{target_audience}"
Platform: "{platform}"

Score each aspect and the headline overall from 0 to 100, and give four specific recommendations per aspect.

Please provide your analysis in the following JSON format:
{ANALYSIS_JSON_SCHEMA}"""


# =============================================================================
# GENERATION PROMPT
# =============================================================================

def build_generation_prompt(
    category: str,
    platform: str,
    target_audience: str,
    count: int = GENERATED_HEADLINE_COUNT,
) -> str:
    """Build the prompt asking the model for candidate headlines, one per line."""
    return f"""You are an expert in marketing and content creation, specializing in writing headlines that drive clicks and engagement. Write {count} compelling headlines for the following context.

Category: "{category}"
Target Audience: "{target_audience}"
Platform: "{platform}"

Return only the headlines, one per line, with no introduction, explanation, or closing remarks."""
