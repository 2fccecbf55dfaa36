"""
Fitness Service

Personalized workout, nutrition and general wellbeing advice for students.

All operations prefer Gemini. OpenAI is kept in the fallback order so that
routing a call to it later only requires changing the preferred provider.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from django.utils import timezone

from core.services.ai import AIConfiguration, AIResult, AIRouter, ProviderType
from . import prompts

logger = logging.getLogger(__name__)

FALLBACK_ORDER = (ProviderType.OPENAI, ProviderType.GEMINI)

SYSTEM_PROMPT = (
    'You are an expert in fitness and wellbeing, providing detailed, '
    'personalized advice.'
)


class FitnessService:
    """
    Service behind the /api/ai-fitness endpoints.

    Example:
        >>> service = FitnessService()
        >>> result = await service.generate_workout_plan(form.cleaned_data)
        >>> result.to_dict()['model']
        'Gemini'
    """

    def __init__(self, router: Optional[AIRouter] = None):
        self.router = router or AIRouter(
            config=AIConfiguration.from_settings(),
            fallback_order=FALLBACK_ORDER,
            system_prompt=SYSTEM_PROMPT,
        )

    async def _generate(self, operation: str, prompt: str) -> AIResult:
        logger.info(f"Generating fitness {operation}")
        return await self.router.generate(prompt, preferred=ProviderType.GEMINI)

    async def generate_workout_plan(self, data: Dict[str, Any]) -> AIResult:
        """
        Generate a 7-day workout plan.

        Args:
            data: Cleaned FitnessRequestForm data

        Returns:
            AIResult with the plan text
        """
        return await self._generate('workout plan', prompts.build_workout_plan_prompt(data))

    async def generate_nutrition_advice(self, data: Dict[str, Any]) -> AIResult:
        """Generate nutrition advice from cleaned FitnessRequestForm data."""
        return await self._generate('nutrition advice', prompts.build_nutrition_advice_prompt(data))

    async def generate_wellbeing_advice(self, data: Dict[str, Any]) -> AIResult:
        """Generate wellbeing advice from cleaned WellbeingRequestForm data."""
        return await self._generate('wellbeing advice', prompts.build_wellbeing_advice_prompt(data))

    async def get_exercise_library(
        self,
        exercise_type: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> AIResult:
        """
        Describe exercises of a type and difficulty.

        Args:
            exercise_type: e.g. 'strength', 'cardio' ('all' when omitted)
            difficulty: e.g. 'beginner' ('all' when omitted)
        """
        return await self._generate(
            'exercise library',
            prompts.build_exercise_library_prompt(exercise_type, difficulty),
        )

    async def generate_daily_wellness_tips(self, today: Optional[date] = None) -> AIResult:
        """Generate five wellness tips for today (or the given date)."""
        today = today or timezone.localdate()
        return await self._generate(
            'daily wellness tips',
            prompts.build_daily_wellness_tips_prompt(today),
        )
