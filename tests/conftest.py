"""
Pytest configuration for the Headline Analyzer backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-api-key")


VALID_ANALYSIS_REPLY = (
    'prefix text {"general_score":7,"aspects":{'
    '"clarity_and_conciseness":{"c_score":8,"recommendations":[{"id":"c_rec1","text":"x"}]},'
    '"emotional_impact":{"e_score":6,"recommendations":[]},'
    '"seo_optimization":{"s_score":5,"recommendations":[]},'
    '"engagement_potential":{"g_score":9,"recommendations":[]}}} suffix text'
)


@pytest.fixture
def valid_analysis_reply():
    """Raw model reply with prose around a complete analysis object."""
    return VALID_ANALYSIS_REPLY


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Each test starts with an empty rate-limit window."""
    from headline_backend.main import rate_limiter

    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def openai_client():
    """
    Mock OpenAI client installed as the shared completion client.
    Returns a MagicMock that simulates chat.completions.create.
    """
    from headline_backend.services import completion_client

    mock_client = MagicMock()
    completion_client._openai_client = mock_client
    yield mock_client
    completion_client.reset_client()


@pytest.fixture
def make_completion():
    """Factory for mock chat completions whose first choice has ``content``."""
    def _make(content):
        completion = MagicMock()
        choice = MagicMock()
        choice.message.content = content
        completion.choices = [choice]
        return completion
    return _make
