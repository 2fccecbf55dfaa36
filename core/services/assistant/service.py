"""
Assistant Service

Answers free-form student questions. The question text is sent to the
model unchanged; Gemini is the only provider in the chain.
"""

import logging
from typing import Optional

from core.services.ai import AIConfiguration, AIResult, AIRouter, ProviderType

logger = logging.getLogger(__name__)

FALLBACK_ORDER = (ProviderType.GEMINI,)


class AssistantService:
    """Service behind the /api/ai-assistant endpoints."""

    def __init__(self, router: Optional[AIRouter] = None):
        self.router = router or AIRouter(
            config=AIConfiguration.from_settings(),
            fallback_order=FALLBACK_ORDER,
        )

    async def generate_response(self, prompt: str) -> AIResult:
        """
        Generate an answer for a free-form prompt.

        Args:
            prompt: Question typed by the user

        Returns:
            AIResult with the generated answer

        Raises:
            AIServiceUnavailable: If no provider produced an answer
        """
        logger.debug(f"Assistant prompt received ({len(prompt)} chars)")
        return await self.router.generate(prompt, preferred=ProviderType.GEMINI)
