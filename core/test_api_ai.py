"""
Tests for the AI assistant, fitness and mental wellbeing API endpoints.

Service-level behaviour is covered beside the services; these tests check
request validation, parameter passing and the JSON contract of the views.
"""
import json
from unittest.mock import AsyncMock, Mock, patch

import httpx
import respx
from django.conf import settings
from django.test import SimpleTestCase, Client
from django.contrib.auth import get_user_model

from core.services.ai import AIResult
from core.services.auth_service import issue_token
from core.services.exceptions import AIServiceUnavailable

User = get_user_model()

RESULT = AIResult(
    success=True,
    message='Response generated successfully',
    response='Generated text',
    model='Gemini',
)

FITNESS_PAYLOAD = {
    'age': 21,
    'gender': 'male',
    'height': 172,
    'weight': 68,
    'fitness_level': 'intermediate',
    'goals': 'Gain strength',
    'preferred_duration': 60,
}

ASSESSMENT_PAYLOAD = {
    'age': 20,
    'gender': 'female',
    'stress_level': 7,
    'anxiety_level': 6,
    'current_mood': 'neutral',
    'concerns': ['stress', 'concentration'],
    'sleep_quality': 5,
    'sleep_duration': 6.5,
    'energy_level': 4,
    'concentration_level': 4,
    'social_connection': 6,
    'work_life_balance': 5,
    'has_physical_symptoms': False,
    'wellbeing_goals': 'Feel calmer',
}


def gemini_body(text):
    return {'candidates': [{'content': {'parts': [{'text': text}]}}]}


class AIAPITestBase(SimpleTestCase):

    def setUp(self):
        self.client = Client()
        user = User(id=42, email='student@example.edu', name='Student')
        self.headers = {'HTTP_AUTHORIZATION': f'Bearer {issue_token(user)}'}

    def post_json(self, path, payload):
        return self.client.post(
            path,
            data=json.dumps(payload),
            content_type='application/json',
            **self.headers
        )

    def mock_service(self, factory_name):
        service = Mock()
        for name in (
            'generate_response',
            'generate_workout_plan', 'generate_nutrition_advice', 'generate_wellbeing_advice',
            'get_exercise_library', 'generate_daily_wellness_tips',
            'generate_mental_assessment', 'generate_stress_management',
            'generate_sleep_improvement', 'generate_mindfulness_practices',
            'generate_daily_reflection', 'generate_coping_strategies',
            'generate_grounding_techniques', 'generate_cognitive_reframing',
            'get_mental_health_resources',
        ):
            setattr(service, name, AsyncMock(return_value=RESULT))
        patcher = patch(f'core.views_api.{factory_name}', return_value=service)
        patcher.start()
        self.addCleanup(patcher.stop)
        return service


class AssistantAPITest(AIAPITestBase):
    """Test POST /api/ai-assistant/ask."""

    def test_requires_token(self):
        response = self.client.post(
            '/api/ai-assistant/ask',
            data=json.dumps({'prompt': 'hi'}),
            content_type='application/json',
        )
        self.assertEqual(response.status_code, 401)

    def test_ask_returns_result(self):
        service = self.mock_service('get_assistant_service')

        response = self.post_json('/api/ai-assistant/ask', {'prompt': 'How do I apply for a gate pass?'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content), {
            'success': True,
            'message': 'Response generated successfully',
            'response': 'Generated text',
            'model': 'Gemini',
        })
        service.generate_response.assert_awaited_once_with('How do I apply for a gate pass?')

    def test_empty_prompt_rejected(self):
        service = self.mock_service('get_assistant_service')

        response = self.post_json('/api/ai-assistant/ask', {'prompt': ''})

        self.assertEqual(response.status_code, 400)
        self.assertIn('prompt', json.loads(response.content)['details'])
        service.generate_response.assert_not_awaited()

    def test_unavailable_returns_generic_500(self):
        service = self.mock_service('get_assistant_service')
        service.generate_response.side_effect = AIServiceUnavailable()

        response = self.post_json('/api/ai-assistant/ask', {'prompt': 'hi'})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {'error': 'Failed to generate AI response'})

    def test_end_to_end_through_router(self):
        """Real router and HTTP client with Gemini mocked at the transport."""
        with respx.mock(assert_all_called=False) as mock:
            route = mock.post(url__startswith=settings.GEMINI_API_URL).mock(
                return_value=httpx.Response(200, json=gemini_body('Visit the admin office.'))
            )

            response = self.post_json('/api/ai-assistant/ask', {'prompt': 'Where is the office?'})

        self.assertEqual(response.status_code, 200)
        data = json.loads(response.content)
        self.assertEqual(data['response'], 'Visit the admin office.')
        self.assertEqual(data['model'], 'Gemini')
        self.assertEqual(route.call_count, 1)
        sent = json.loads(route.calls[0].request.content)
        self.assertEqual(sent['contents'][0]['parts'][0]['text'], 'Where is the office?')

    def test_end_to_end_provider_error_is_not_leaked(self):
        with respx.mock(assert_all_called=False) as mock:
            mock.post(url__startswith=settings.GEMINI_API_URL).mock(
                return_value=httpx.Response(400, json={'error': {'message': 'API key not valid'}})
            )

            response = self.post_json('/api/ai-assistant/ask', {'prompt': 'hi'})

        self.assertEqual(response.status_code, 500)
        self.assertNotIn('API key', response.content.decode())


class FitnessAPITest(AIAPITestBase):
    """Test /api/ai-fitness endpoints."""

    def test_workout_plan(self):
        service = self.mock_service('get_fitness_service')

        response = self.post_json('/api/ai-fitness/workout-plan', FITNESS_PAYLOAD)

        self.assertEqual(response.status_code, 200)
        data = service.generate_workout_plan.call_args[0][0]
        self.assertEqual(data['age'], 21)
        self.assertEqual(data['fitness_level'], 'intermediate')
        self.assertEqual(data['medical_conditions'], '')

    def test_workout_plan_validation(self):
        service = self.mock_service('get_fitness_service')
        payload = dict(FITNESS_PAYLOAD, age=12, fitness_level='olympic')

        response = self.post_json('/api/ai-fitness/workout-plan', payload)

        self.assertEqual(response.status_code, 400)
        details = json.loads(response.content)['details']
        self.assertIn('age', details)
        self.assertIn('fitness_level', details)
        service.generate_workout_plan.assert_not_awaited()

    def test_nutrition_advice(self):
        service = self.mock_service('get_fitness_service')

        response = self.post_json('/api/ai-fitness/nutrition-advice', FITNESS_PAYLOAD)

        self.assertEqual(response.status_code, 200)
        service.generate_nutrition_advice.assert_awaited_once()

    def test_mental_wellbeing(self):
        service = self.mock_service('get_fitness_service')

        response = self.post_json('/api/ai-fitness/mental-wellbeing', {
            'age': 25,
            'gender': 'other',
            'mental_health_goals': 'Reduce stress',
            'stress_level': 6,
            'sleep_quality': 7,
            'sleep_issues': ['waking_early'],
        })

        self.assertEqual(response.status_code, 200)
        data = service.generate_wellbeing_advice.call_args[0][0]
        self.assertEqual(data['sleep_issues'], ['waking_early'])

    def test_exercise_library_query(self):
        service = self.mock_service('get_fitness_service')

        response = self.client.get(
            '/api/ai-fitness/exercise-library', {'type': 'cardio'}, **self.headers
        )

        self.assertEqual(response.status_code, 200)
        service.get_exercise_library.assert_awaited_once_with('cardio', None)

    def test_daily_wellness_tips(self):
        service = self.mock_service('get_fitness_service')

        response = self.client.get('/api/ai-fitness/daily-wellness-tips', **self.headers)

        self.assertEqual(response.status_code, 200)
        service.generate_daily_wellness_tips.assert_awaited_once_with()

    def test_wrong_method(self):
        response = self.client.get('/api/ai-fitness/workout-plan', **self.headers)
        self.assertEqual(response.status_code, 405)


class WellbeingAPITest(AIAPITestBase):
    """Test /api/mental-wellbeing endpoints."""

    def test_assessment(self):
        service = self.mock_service('get_wellbeing_service')

        response = self.post_json('/api/mental-wellbeing/assessment', ASSESSMENT_PAYLOAD)

        self.assertEqual(response.status_code, 200)
        data = service.generate_mental_assessment.call_args[0][0]
        self.assertEqual(data['concerns'], ['stress', 'concentration'])
        self.assertFalse(data['has_physical_symptoms'])

    def test_assessment_invalid_concern(self):
        self.mock_service('get_wellbeing_service')
        payload = dict(ASSESSMENT_PAYLOAD, concerns=['boredom'])

        response = self.post_json('/api/mental-wellbeing/assessment', payload)

        self.assertEqual(response.status_code, 400)
        self.assertIn('concerns', json.loads(response.content)['details'])

    def test_sleep_improvement_time_format(self):
        self.mock_service('get_wellbeing_service')

        response = self.post_json('/api/mental-wellbeing/sleep-improvement', {
            'age': 30,
            'gender': 'male',
            'sleep_quality': 4,
            'sleep_duration': 6,
            'bedtime': '11pm',
            'wake_time': '07:00',
            'time_to_fall_asleep': 30,
            'night_wakings': 1,
            'sleep_issues': ['snoring'],
            'stress_level': 5,
            'exercise_frequency': 3,
            'sleep_goals': 'Wake up rested',
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('bedtime', json.loads(response.content)['details'])

    def test_mindfulness(self):
        service = self.mock_service('get_wellbeing_service')

        response = self.post_json('/api/mental-wellbeing/mindfulness', {
            'age': 19,
            'gender': 'female',
            'stress_level': 6,
            'experience_level': 'none',
            'focus_areas': ['focus_improvement'],
            'available_time_per_day': 15,
        })

        self.assertEqual(response.status_code, 200)
        service.generate_mindfulness_practices.assert_awaited_once()

    def test_coping_strategies_query(self):
        service = self.mock_service('get_wellbeing_service')

        response = self.client.get(
            '/api/mental-wellbeing/coping-strategies',
            {'emotion': 'anxiety', 'situation': 'exam'},
            **self.headers
        )

        self.assertEqual(response.status_code, 200)
        service.generate_coping_strategies.assert_awaited_once_with('anxiety', 'exam')

    def test_grounding_default_and_explicit_duration(self):
        service = self.mock_service('get_wellbeing_service')

        self.client.get('/api/mental-wellbeing/grounding-techniques', **self.headers)
        service.generate_grounding_techniques.assert_awaited_with()

        self.client.get('/api/mental-wellbeing/grounding-techniques', {'duration': 10}, **self.headers)
        service.generate_grounding_techniques.assert_awaited_with(duration=10)

    def test_grounding_invalid_duration(self):
        self.mock_service('get_wellbeing_service')

        response = self.client.get(
            '/api/mental-wellbeing/grounding-techniques', {'duration': 'long'}, **self.headers
        )

        self.assertEqual(response.status_code, 400)

    def test_cognitive_reframing_and_resources(self):
        service = self.mock_service('get_wellbeing_service')

        self.client.get(
            '/api/mental-wellbeing/cognitive-reframing', {'thought_pattern': 'catastrophizing'}, **self.headers
        )
        self.client.get('/api/mental-wellbeing/resources', {'type': 'crisis'}, **self.headers)

        service.generate_cognitive_reframing.assert_awaited_once_with(thought_pattern='catastrophizing')
        service.get_mental_health_resources.assert_awaited_once_with(resource_type='crisis')

    def test_daily_reflection(self):
        service = self.mock_service('get_wellbeing_service')

        response = self.client.get('/api/mental-wellbeing/daily-reflection', **self.headers)

        self.assertEqual(response.status_code, 200)
        service.generate_daily_reflection.assert_awaited_once_with()

    def test_assessment_end_to_end_falls_back_to_gemini(self):
        """Anthropic and OpenAI have no keys in test settings, so Gemini answers."""
        with respx.mock(assert_all_called=False) as mock:
            anthropic = mock.post(url__startswith=settings.ANTHROPIC_API_URL)
            openai = mock.post(url__startswith=settings.OPENAI_API_URL)
            gemini = mock.post(url__startswith=settings.GEMINI_API_URL).mock(
                return_value=httpx.Response(200, json=gemini_body('Assessment text'))
            )

            response = self.post_json('/api/mental-wellbeing/assessment', ASSESSMENT_PAYLOAD)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content)['model'], 'Gemini')
        self.assertFalse(anthropic.called)
        self.assertFalse(openai.called)
        self.assertEqual(gemini.call_count, 1)
