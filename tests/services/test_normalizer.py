"""
Tests for the response normalizer.

These tests verify:
- JSON extraction from replies with surrounding prose
- Brace scanning that ignores braces inside string literals
- All-or-nothing shape checks (missing aspects, keys, wrong types)
- Server-side recommendation ids
- Generation line splitting
"""

import json

import pytest

from headline_backend.schemas.headlines import AnalysisResult, GenerationResult
from headline_backend.services.errors import NormalizationError
from headline_backend.services.normalizer import (
    extract_json_object,
    normalize_analysis,
    normalize_generation,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def analysis_payload():
    """Complete analysis object in the shape the prompt requests."""
    return {
        "general_score": 72,
        "aspects": {
            "clarity_and_conciseness": {
                "c_score": 80,
                "recommendations": [
                    {"id": "c_rec1", "text": "Keep it under 10 words"},
                    {"id": "c_rec2", "text": "Avoid jargon"},
                ],
            },
            "emotional_impact": {
                "e_score": 65,
                "recommendations": [{"id": "e_rec1", "text": "Use stronger verbs"}],
            },
            "seo_optimization": {
                "s_score": 70,
                "recommendations": [{"id": "s_rec1", "text": "Add a target keyword"}],
            },
            "engagement_potential": {
                "g_score": 75,
                "recommendations": [{"id": "g_rec1", "text": "Ask a question"}],
            },
        },
    }


# =============================================================================
# JSON EXTRACTION
# =============================================================================

class TestExtractJsonObject:
    """Tests for extract_json_object."""

    def test_extracts_object_surrounded_by_prose(self):
        text = 'Here is the analysis:\n{"a": 1, "b": {"c": 2}}\nHope this helps!'
        assert extract_json_object(text) == {"a": 1, "b": {"c": 2}}

    def test_no_opening_brace_raises_normalization_error(self):
        with pytest.raises(NormalizationError) as exc_info:
            extract_json_object("Sorry, I cannot analyze that headline.")
        assert "no '{'" in exc_info.value.detail

    def test_unclosed_object_raises_normalization_error(self):
        with pytest.raises(NormalizationError):
            extract_json_object('{"general_score": 7, "aspects": ')

    def test_braces_inside_strings_are_ignored(self):
        text = 'Result: {"text": "use {curly} words and a } brace"} trailing }'
        assert extract_json_object(text) == {"text": "use {curly} words and a } brace"}

    def test_escaped_quotes_inside_strings(self):
        text = '{"text": "say \\"hi {there}\\""}'
        assert extract_json_object(text) == {"text": 'say "hi {there}"'}

    def test_skips_non_json_brace_span_before_object(self):
        text = 'Template {placeholder} first, then {"score": 5}'
        assert extract_json_object(text) == {"score": 5}

    def test_only_second_object_is_ignored(self):
        text = '{"first": 1} and also {"second": 2}'
        assert extract_json_object(text) == {"first": 1}

    def test_markdown_code_fence(self):
        text = '```json\n{"score": 9}\n```'
        assert extract_json_object(text) == {"score": 9}

    def test_invalid_json_raises_with_decoder_detail(self):
        with pytest.raises(NormalizationError) as exc_info:
            extract_json_object("{'single': 'quotes'}")
        assert "No valid JSON found" in exc_info.value.detail

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_are_rejected(self, constant):
        with pytest.raises(NormalizationError) as exc_info:
            extract_json_object(f'{{"score": {constant}}}')
        assert "Invalid JSON constant" in exc_info.value.detail

    def test_skips_object_with_constant_and_uses_next_valid_one(self):
        text = 'Draft: {"score": NaN} Final: {"score": 4}'
        assert extract_json_object(text) == {"score": 4}


# =============================================================================
# ANALYSIS NORMALIZATION
# =============================================================================

class TestNormalizeAnalysis:
    """Tests for normalize_analysis."""

    def test_documented_example_with_prefix_and_suffix(self, valid_analysis_reply):
        result = normalize_analysis(valid_analysis_reply)

        assert isinstance(result, AnalysisResult)
        assert result.model_dump(by_alias=True) == {
            "generalScore": 7,
            "clarity": {"score": 8, "recommendations": [{"id": "c_rec1", "text": "x"}]},
            "emotion": {"score": 6, "recommendations": []},
            "seo": {"score": 5, "recommendations": []},
            "engagement": {"score": 9, "recommendations": []},
        }

    def test_integer_scores_stay_integers(self, valid_analysis_reply):
        dumped = json.loads(normalize_analysis(valid_analysis_reply).model_dump_json(by_alias=True))
        assert dumped["generalScore"] == 7
        assert isinstance(dumped["generalScore"], int)

    def test_float_scores_are_kept(self, analysis_payload):
        analysis_payload["general_score"] = 7.5
        result = normalize_analysis(json.dumps(analysis_payload))
        assert result.general_score == 7.5

    def test_recommendation_ids_are_assigned_by_position(self, analysis_payload):
        analysis_payload["aspects"]["clarity_and_conciseness"]["recommendations"] = [
            {"id": "whatever", "text": "First"},
            {"id": "whatever", "text": "Second"},
            {"text": "Third, no id"},
        ]
        result = normalize_analysis(json.dumps(analysis_payload))

        assert [r.id for r in result.clarity.recommendations] == ["c_rec1", "c_rec2", "c_rec3"]
        assert [r.text for r in result.clarity.recommendations] == ["First", "Second", "Third, no id"]
        assert result.emotion.recommendations[0].id == "e_rec1"
        assert result.seo.recommendations[0].id == "s_rec1"
        assert result.engagement.recommendations[0].id == "g_rec1"

    @pytest.mark.parametrize("missing_aspect", [
        "clarity_and_conciseness",
        "emotional_impact",
        "seo_optimization",
        "engagement_potential",
    ])
    def test_missing_aspect_fails(self, analysis_payload, missing_aspect):
        del analysis_payload["aspects"][missing_aspect]

        with pytest.raises(NormalizationError) as exc_info:
            normalize_analysis(json.dumps(analysis_payload))
        assert missing_aspect in exc_info.value.detail

    def test_missing_general_score_fails(self, analysis_payload):
        del analysis_payload["general_score"]
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_missing_aspect_score_fails(self, analysis_payload):
        del analysis_payload["aspects"]["seo_optimization"]["s_score"]
        with pytest.raises(NormalizationError) as exc_info:
            normalize_analysis(json.dumps(analysis_payload))
        assert "s_score" in exc_info.value.detail

    def test_null_aspect_fails(self, analysis_payload):
        analysis_payload["aspects"]["emotional_impact"] = None
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_missing_recommendations_fails(self, analysis_payload):
        del analysis_payload["aspects"]["engagement_potential"]["recommendations"]
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_recommendations_not_a_list_fails(self, analysis_payload):
        analysis_payload["aspects"]["clarity_and_conciseness"]["recommendations"] = "Be brief"
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_recommendation_without_text_fails(self, analysis_payload):
        analysis_payload["aspects"]["clarity_and_conciseness"]["recommendations"] = [{"id": "c_rec1"}]
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_non_numeric_score_fails(self, analysis_payload):
        analysis_payload["aspects"]["clarity_and_conciseness"]["c_score"] = "high"
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_scores_are_not_range_checked(self, analysis_payload):
        analysis_payload["general_score"] = 1000
        analysis_payload["aspects"]["seo_optimization"]["s_score"] = -3
        result = normalize_analysis(json.dumps(analysis_payload))
        assert result.general_score == 1000
        assert result.seo.score == -3

    def test_reply_without_json_fails(self):
        with pytest.raises(NormalizationError):
            normalize_analysis("I'm sorry, but I can't help with that.")

    def test_aspects_not_an_object_fails(self, analysis_payload):
        analysis_payload["aspects"] = ["clarity"]
        with pytest.raises(NormalizationError):
            normalize_analysis(json.dumps(analysis_payload))

    def test_nan_and_infinity_scores_fail(self, analysis_payload):
        raw = json.dumps(analysis_payload)
        raw = raw.replace('"general_score": 72', '"general_score": NaN')
        raw = raw.replace('"c_score": 80', '"c_score": Infinity')

        with pytest.raises(NormalizationError):
            normalize_analysis(raw)

    def test_overflowing_literal_score_fails(self, analysis_payload):
        raw = json.dumps(analysis_payload).replace('"s_score": 70', '"s_score": 1e999')

        with pytest.raises(NormalizationError) as exc_info:
            normalize_analysis(raw)
        assert "s_score" in exc_info.value.detail


# =============================================================================
# GENERATION NORMALIZATION
# =============================================================================

class TestNormalizeGeneration:
    """Tests for normalize_generation."""

    def test_blank_lines_dropped_order_preserved(self):
        result = normalize_generation("1. Headline A\n\n2. Headline B\n")
        assert isinstance(result, GenerationResult)
        assert result.headlines == ["1. Headline A", "2. Headline B"]

    def test_whitespace_only_lines_dropped(self):
        result = normalize_generation("First\n   \n\t\nSecond")
        assert result.headlines == ["First", "Second"]

    def test_lines_kept_verbatim(self):
        result = normalize_generation('  - "Quoted" headline  \n10 Tips: {Braces} Stay')
        assert result.headlines == ['  - "Quoted" headline  ', "10 Tips: {Braces} Stay"]

    def test_empty_reply_yields_no_headlines(self):
        assert normalize_generation("").headlines == []

    def test_crlf_line_endings(self):
        result = normalize_generation("First\r\n\r\nSecond\r\n")
        assert result.headlines == ["First", "Second"]

    def test_only_newlines_split_lines(self):
        result = normalize_generation("Form\x0cfeed stays\nLine separator stays")
        assert result.headlines == ["Form\x0cfeed stays", "Line separator stays"]
