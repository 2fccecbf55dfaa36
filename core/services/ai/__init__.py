"""
AI Core Service for Arivu.

This package provides a unified AI service layer that sends prompts to
Gemini, OpenAI or Anthropic over HTTP, normalizes their responses and
falls back from one provider to the next.
"""

from .config import AIConfiguration
from .router import AIRouter
from .schemas import AIResult, ProviderType

__all__ = ['AIConfiguration', 'AIRouter', 'AIResult', 'ProviderType']
