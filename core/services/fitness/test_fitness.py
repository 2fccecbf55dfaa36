"""
Tests for the Fitness Service
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

from django.test import SimpleTestCase

from core.services.ai import AIResult, ProviderType
from core.services.fitness import FitnessService
from core.services.fitness import prompts
from core.services.fitness.service import FALLBACK_ORDER, SYSTEM_PROMPT


FITNESS_DATA = {
    'age': 21,
    'gender': 'female',
    'height': 165.0,
    'weight': 58.5,
    'fitness_level': 'beginner',
    'goals': 'Build endurance',
    'preferred_duration': 45,
    'workouts_per_week': None,
    'medical_conditions': '',
    'available_equipment': 'Dumbbells',
    'dietary_preferences': 'Vegetarian',
    'allergies': '',
    'workout_location': '',
    'injuries': '',
    'fitness_experience': '',
}

WELLBEING_DATA = {
    'age': 20,
    'gender': 'male',
    'mental_health_goals': 'Less anxiety before exams',
    'stress_level': 7,
    'sleep_quality': 4,
    'sleep_duration': None,
    'sleep_issues': ['falling_asleep'],
    'current_practices': '',
    'energy_level': None,
    'mood_patterns': '',
    'screen_time': None,
    'social_connection': None,
    'work_life_balance': None,
    'previous_approaches': '',
}


def make_router():
    router = Mock()
    router.generate = AsyncMock(return_value=AIResult(
        success=True,
        message='Response generated successfully',
        response='plan',
        model='Gemini',
    ))
    return router


class FitnessPromptTestCase(SimpleTestCase):
    """Test prompt builders."""

    def test_workout_prompt_contains_answers(self):
        prompt = prompts.build_workout_plan_prompt(FITNESS_DATA)

        self.assertIn('- Age: 21', prompt)
        self.assertIn('- Height: 165 cm', prompt)
        self.assertIn('- Weight: 58.5 kg', prompt)
        self.assertIn('- Preferred workout duration: 45 minutes', prompt)
        self.assertIn('- Available equipment: Dumbbells', prompt)
        self.assertIn('- Medical conditions: None', prompt)
        self.assertIn('7-day program', prompt)
        self.assertNotIn('Workouts per week', prompt)

    def test_workout_prompt_includes_optional_answers_when_given(self):
        data = dict(FITNESS_DATA, workouts_per_week=4, workout_location='Campus gym')
        prompt = prompts.build_workout_plan_prompt(data)

        self.assertIn('- Workouts per week: 4', prompt)
        self.assertIn('- Workout location: Campus gym', prompt)

    def test_nutrition_prompt(self):
        prompt = prompts.build_nutrition_advice_prompt(FITNESS_DATA)

        self.assertIn('certified nutritionist', prompt)
        self.assertIn('- Dietary preferences: Vegetarian', prompt)
        self.assertIn('- Allergies: None', prompt)

    def test_wellbeing_prompt(self):
        prompt = prompts.build_wellbeing_advice_prompt(WELLBEING_DATA)

        self.assertIn('- Mental health goals: Less anxiety before exams', prompt)
        self.assertIn('- Stress level (1-10): 7', prompt)
        self.assertIn('- Sleep issues: falling_asleep', prompt)
        self.assertIn('- Current mental wellness practices: None', prompt)

    def test_exercise_library_defaults_to_all(self):
        prompt = prompts.build_exercise_library_prompt()
        self.assertIn('about all exercises at the all difficulty level', prompt)

        prompt = prompts.build_exercise_library_prompt('cardio', 'advanced')
        self.assertIn('about cardio exercises at the advanced difficulty level', prompt)

    def test_daily_tips_embeds_date(self):
        prompt = prompts.build_daily_wellness_tips_prompt(date(2026, 3, 14))
        self.assertIn('daily wellness tips for 2026-03-14', prompt)


class FitnessServiceTestCase(SimpleTestCase):
    """Test FitnessService routing."""

    def setUp(self):
        self.router = make_router()
        self.service = FitnessService(router=self.router)

    def assert_preferred_gemini(self):
        self.router.generate.assert_awaited_once()
        _, kwargs = self.router.generate.call_args
        self.assertEqual(kwargs['preferred'], ProviderType.GEMINI)

    async def test_workout_plan(self):
        result = await self.service.generate_workout_plan(FITNESS_DATA)

        self.assert_preferred_gemini()
        prompt = self.router.generate.call_args[0][0]
        self.assertEqual(prompt, prompts.build_workout_plan_prompt(FITNESS_DATA))
        self.assertEqual(result.response, 'plan')

    async def test_nutrition_advice(self):
        await self.service.generate_nutrition_advice(FITNESS_DATA)
        self.assert_preferred_gemini()

    async def test_wellbeing_advice(self):
        await self.service.generate_wellbeing_advice(WELLBEING_DATA)
        self.assert_preferred_gemini()

    async def test_exercise_library(self):
        await self.service.get_exercise_library('strength', None)

        self.assert_preferred_gemini()
        self.assertIn('strength exercises', self.router.generate.call_args[0][0])

    async def test_daily_tips(self):
        await self.service.generate_daily_wellness_tips(today=date(2026, 1, 2))

        self.assert_preferred_gemini()
        self.assertIn('2026-01-02', self.router.generate.call_args[0][0])

    def test_default_router_configuration(self):
        """Default router walks OpenAI then Gemini with the fitness system prompt."""
        service = FitnessService()

        self.assertEqual(service.router.fallback_order, FALLBACK_ORDER)
        self.assertEqual(service.router.system_prompt, SYSTEM_PROMPT)
        self.assertEqual(
            service.router.build_chain(ProviderType.GEMINI), [ProviderType.GEMINI]
        )
