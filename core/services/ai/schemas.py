"""
Data schemas for AI service requests and responses.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from django.db import models


class ProviderType(models.TextChoices):
    """Supported generative-text providers; the label is reported as AIResult.model."""
    GEMINI = 'gemini', 'Gemini'
    OPENAI = 'openai', 'OpenAI GPT-4'
    ANTHROPIC = 'anthropic', 'Anthropic Claude'


# Final fallback of every chain
DEFAULT_PROVIDER = ProviderType.GEMINI

SUCCESS_MESSAGE = 'Response generated successfully'


@dataclass(frozen=True)
class AIResult:
    """Normalized result returned to API clients."""
    success: bool
    message: str
    response: str
    model: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProviderResponse:
    """Internal response from provider implementation."""
    text: str
    raw: Any
