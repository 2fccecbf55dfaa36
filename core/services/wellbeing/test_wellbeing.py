"""
Tests for the Wellbeing Service
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

from django.test import SimpleTestCase

from core.services.ai import AIResult, ProviderType
from core.services.wellbeing import WellbeingService
from core.services.wellbeing import prompts
from core.services.wellbeing.service import FALLBACK_ORDER, SYSTEM_PROMPT


ASSESSMENT_DATA = {
    'age': 22,
    'gender': 'other',
    'stress_level': 8,
    'anxiety_level': 6,
    'current_mood': 'negative',
    'concerns': ['stress', 'insomnia'],
    'concern_details': '',
    'sleep_quality': 3,
    'sleep_duration': 5.5,
    'energy_level': 4,
    'concentration_level': 5,
    'social_connection': 6,
    'work_life_balance': 3,
    'current_practices': '',
    'previous_approaches': '',
    'has_physical_symptoms': True,
    'physical_symptoms': 'Headaches',
    'wellbeing_goals': 'Sleep better',
}

STRESS_DATA = {
    'age': 19,
    'gender': 'male',
    'stress_level': 9,
    'stress_sources': ['education', 'finances'],
    'stress_timing': ['night'],
    'physical_symptoms': '',
    'emotional_symptoms': 'Irritability',
    'cognitive_symptoms': '',
    'behavioral_symptoms': '',
    'current_coping_mechanisms': '',
    'previous_approaches': '',
    'stress_management_goals': 'Stay calm during exams',
}

SLEEP_DATA = {
    'age': 23,
    'gender': 'female',
    'sleep_quality': 4,
    'sleep_duration': 6.0,
    'bedtime': '01:30',
    'wake_time': '07:00',
    'time_to_fall_asleep': 45,
    'night_wakings': 2,
    'sleep_issues': ['falling_asleep'],
    'environment_issues': [],
    'uses_screens_before_bed': True,
    'screen_time_before_bed': 60,
    'consumes_caffeine_before_bed': False,
    'consumes_alcohol_before_bed': False,
    'pre_sleep_routine': '',
    'current_sleep_aids': '',
    'stress_level': 6,
    'exercise_frequency': 2,
    'sleep_goals': 'Fall asleep before midnight',
}

MINDFULNESS_DATA = {
    'age': 20,
    'gender': 'female',
    'stress_level': 5,
    'experience_level': 'beginner',
    'focus_areas': ['stress_reduction'],
    'preferred_practices': [],
    'available_time_per_day': 10,
    'preferred_time_of_day': '',
    'previous_practices': '',
    'challenges': '',
    'topics_of_interest': '',
    'environment': '',
    'guidance_preference': '',
}


class WellbeingPromptTestCase(SimpleTestCase):
    """Test prompt builders."""

    def test_assessment_prompt(self):
        prompt = prompts.build_mental_assessment_prompt(ASSESSMENT_DATA)

        self.assertIn('- Primary mental health concerns: stress, insomnia', prompt)
        self.assertIn('- Sleep duration: 5.5 hours', prompt)
        self.assertIn('- Physical symptoms: Yes - Headaches', prompt)
        self.assertIn('- Concern details: Not provided', prompt)

    def test_assessment_prompt_without_physical_symptoms(self):
        data = dict(ASSESSMENT_DATA, has_physical_symptoms=False)
        prompt = prompts.build_mental_assessment_prompt(data)

        self.assertIn('- Physical symptoms: None', prompt)

    def test_stress_prompt(self):
        prompt = prompts.build_stress_management_prompt(STRESS_DATA)

        self.assertIn('- Sources of stress: education, finances', prompt)
        self.assertIn('- Emotional symptoms: Irritability', prompt)
        self.assertIn('- Physical symptoms: None reported', prompt)
        self.assertIn('- Goals: Stay calm during exams', prompt)

    def test_sleep_prompt(self):
        prompt = prompts.build_sleep_improvement_prompt(SLEEP_DATA)

        self.assertIn('- Sleep duration: 6 hours', prompt)
        self.assertIn('- Uses screens before bed: Yes - 60 minutes before bed', prompt)
        self.assertIn('- Environment issues: None reported', prompt)
        self.assertIn('- Consumes caffeine before bed: No', prompt)

    def test_mindfulness_prompt(self):
        prompt = prompts.build_mindfulness_prompt(MINDFULNESS_DATA)

        self.assertIn('- Preferred practices: Open to all', prompt)
        self.assertIn('- Available time per day: 10 minutes', prompt)
        self.assertIn('- Guidance preference: Not specified', prompt)

    def test_coping_prompt_variants(self):
        self.assertIn(
            'coping strategies for various emotions in different situations',
            prompts.build_coping_strategies_prompt(),
        )
        self.assertIn(
            'coping strategies specifically for managing anger in academic situations',
            prompts.build_coping_strategies_prompt('anger', 'academic'),
        )

    def test_grounding_prompt_uses_duration(self):
        prompt = prompts.build_grounding_techniques_prompt(3)
        self.assertIn('3-minute grounding exercises', prompt)
        self.assertIn('completed in 3 minutes or less', prompt)


class WellbeingServiceTestCase(SimpleTestCase):
    """Test WellbeingService provider preferences."""

    def setUp(self):
        self.router = Mock()
        self.router.generate = AsyncMock(return_value=AIResult(
            success=True,
            message='Response generated successfully',
            response='guidance',
            model='Anthropic Claude',
        ))
        self.service = WellbeingService(router=self.router)

    def preferred(self):
        self.router.generate.assert_awaited_once()
        return self.router.generate.call_args.kwargs['preferred']

    def sent_prompt(self):
        return self.router.generate.call_args.args[0]

    async def test_assessment_prefers_anthropic(self):
        result = await self.service.generate_mental_assessment(ASSESSMENT_DATA)

        self.assertEqual(self.preferred(), ProviderType.ANTHROPIC)
        self.assertEqual(result.model, 'Anthropic Claude')

    async def test_stress_prefers_anthropic(self):
        await self.service.generate_stress_management(STRESS_DATA)
        self.assertEqual(self.preferred(), ProviderType.ANTHROPIC)

    async def test_sleep_prefers_openai(self):
        await self.service.generate_sleep_improvement(SLEEP_DATA)
        self.assertEqual(self.preferred(), ProviderType.OPENAI)

    async def test_mindfulness_prefers_openai(self):
        await self.service.generate_mindfulness_practices(MINDFULNESS_DATA)
        self.assertEqual(self.preferred(), ProviderType.OPENAI)

    async def test_daily_reflection_uses_gemini(self):
        await self.service.generate_daily_reflection(today=date(2026, 5, 1))

        self.assertEqual(self.preferred(), ProviderType.GEMINI)
        self.assertIn('2026-05-01', self.sent_prompt())

    async def test_grounding_defaults_to_five_minutes(self):
        await self.service.generate_grounding_techniques()

        self.assertEqual(self.preferred(), ProviderType.GEMINI)
        self.assertIn('5-minute grounding exercises', self.sent_prompt())

    async def test_cognitive_reframing_default_pattern(self):
        await self.service.generate_cognitive_reframing()
        self.assertIn('for general thinking patterns', self.sent_prompt())

    async def test_resources_default_type(self):
        await self.service.get_mental_health_resources()

        self.assertEqual(self.preferred(), ProviderType.GEMINI)
        self.assertIn('focusing on all support', self.sent_prompt())

    async def test_coping_strategies(self):
        await self.service.generate_coping_strategies(emotion='sadness')

        self.assertEqual(self.preferred(), ProviderType.GEMINI)
        self.assertIn('managing sadness', self.sent_prompt())

    def test_default_router_configuration(self):
        service = WellbeingService()

        self.assertEqual(service.router.fallback_order, FALLBACK_ORDER)
        self.assertEqual(service.router.system_prompt, SYSTEM_PROMPT)
        self.assertEqual(
            service.router.build_chain(ProviderType.OPENAI),
            [ProviderType.OPENAI, ProviderType.GEMINI],
        )
        self.assertEqual(
            service.router.build_chain(ProviderType.ANTHROPIC),
            [ProviderType.ANTHROPIC, ProviderType.OPENAI, ProviderType.GEMINI],
        )
