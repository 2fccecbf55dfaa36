"""
Wellbeing Service

Mental wellbeing guidance for students.

Provider preference per operation:
    - assessment, stress management: Anthropic Claude
    - sleep improvement, mindfulness: OpenAI GPT-4
    - short daily exercises and resources: Gemini

Whatever is preferred, the router continues along Anthropic, OpenAI, Gemini
and always ends at Gemini.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from django.utils import timezone

from core.services.ai import AIConfiguration, AIResult, AIRouter, ProviderType
from . import prompts

logger = logging.getLogger(__name__)

FALLBACK_ORDER = (ProviderType.ANTHROPIC, ProviderType.OPENAI, ProviderType.GEMINI)

SYSTEM_PROMPT = (
    'You are an expert in mental wellbeing, providing detailed, personalized '
    'guidance that is evidence-based and compassionate.'
)

DEFAULT_GROUNDING_DURATION = 5
DEFAULT_THOUGHT_PATTERN = 'general'
DEFAULT_RESOURCE_TYPE = 'all'


class WellbeingService:
    """Service behind the /api/mental-wellbeing endpoints."""

    def __init__(self, router: Optional[AIRouter] = None):
        self.router = router or AIRouter(
            config=AIConfiguration.from_settings(),
            fallback_order=FALLBACK_ORDER,
            system_prompt=SYSTEM_PROMPT,
        )

    async def _generate(self, operation: str, prompt: str, preferred: ProviderType) -> AIResult:
        logger.info(f"Generating {operation} (preferred: {preferred.label})")
        return await self.router.generate(prompt, preferred=preferred)

    async def generate_mental_assessment(self, data: Dict[str, Any]) -> AIResult:
        """
        Generate a mental wellbeing assessment.

        Args:
            data: Cleaned MentalAssessmentForm data

        Returns:
            AIResult with the assessment text

        Raises:
            AIServiceUnavailable: If every provider in the chain failed
        """
        return await self._generate(
            'mental assessment',
            prompts.build_mental_assessment_prompt(data),
            ProviderType.ANTHROPIC,
        )

    async def generate_stress_management(self, data: Dict[str, Any]) -> AIResult:
        """Generate a stress management plan from cleaned StressManagementForm data."""
        return await self._generate(
            'stress management plan',
            prompts.build_stress_management_prompt(data),
            ProviderType.ANTHROPIC,
        )

    async def generate_sleep_improvement(self, data: Dict[str, Any]) -> AIResult:
        """Generate a sleep improvement plan from cleaned SleepImprovementForm data."""
        return await self._generate(
            'sleep improvement plan',
            prompts.build_sleep_improvement_prompt(data),
            ProviderType.OPENAI,
        )

    async def generate_mindfulness_practices(self, data: Dict[str, Any]) -> AIResult:
        """Generate a mindfulness program from cleaned MindfulnessForm data."""
        return await self._generate(
            'mindfulness program',
            prompts.build_mindfulness_prompt(data),
            ProviderType.OPENAI,
        )

    async def generate_daily_reflection(self, today: Optional[date] = None) -> AIResult:
        today = today or timezone.localdate()
        return await self._generate(
            'daily reflection',
            prompts.build_daily_reflection_prompt(today),
            ProviderType.GEMINI,
        )

    async def generate_coping_strategies(
        self,
        emotion: Optional[str] = None,
        situation: Optional[str] = None,
    ) -> AIResult:
        return await self._generate(
            'coping strategies',
            prompts.build_coping_strategies_prompt(emotion, situation),
            ProviderType.GEMINI,
        )

    async def generate_grounding_techniques(
        self,
        duration: int = DEFAULT_GROUNDING_DURATION,
    ) -> AIResult:
        """
        Generate grounding exercises.

        Args:
            duration: Length of each exercise in minutes
        """
        return await self._generate(
            'grounding techniques',
            prompts.build_grounding_techniques_prompt(duration),
            ProviderType.GEMINI,
        )

    async def generate_cognitive_reframing(
        self,
        thought_pattern: str = DEFAULT_THOUGHT_PATTERN,
    ) -> AIResult:
        return await self._generate(
            'cognitive reframing exercises',
            prompts.build_cognitive_reframing_prompt(thought_pattern or DEFAULT_THOUGHT_PATTERN),
            ProviderType.GEMINI,
        )

    async def get_mental_health_resources(
        self,
        resource_type: str = DEFAULT_RESOURCE_TYPE,
    ) -> AIResult:
        return await self._generate(
            'mental health resources',
            prompts.build_resources_prompt(resource_type or DEFAULT_RESOURCE_TYPE),
            ProviderType.GEMINI,
        )
