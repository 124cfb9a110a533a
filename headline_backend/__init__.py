"""Headline Analyzer backend: headline scoring and generation over the OpenAI API."""

__version__ = "0.1.0"
