"""
URL Configuration for the Arivu JSON API.

All endpoints are mounted under /api/ and, except auth/login, require a
bearer token (see core.middleware_api.JWTAuthMiddleware).
"""
from django.urls import path
from . import views_api

REFERENCE_KINDS = ('roles', 'quotas', 'departments', 'colleges', 'residence-types')

urlpatterns = [
    # Auth
    path('auth/login', views_api.api_login, name='api-login'),

    # AI assistant
    path('ai-assistant/ask', views_api.api_assistant_ask, name='api-assistant-ask'),

    # AI fitness
    path('ai-fitness/workout-plan', views_api.api_fitness_workout_plan, name='api-fitness-workout-plan'),
    path('ai-fitness/nutrition-advice', views_api.api_fitness_nutrition_advice, name='api-fitness-nutrition-advice'),
    path('ai-fitness/mental-wellbeing', views_api.api_fitness_mental_wellbeing, name='api-fitness-mental-wellbeing'),
    path('ai-fitness/exercise-library', views_api.api_fitness_exercise_library, name='api-fitness-exercise-library'),
    path('ai-fitness/daily-wellness-tips', views_api.api_fitness_daily_wellness_tips, name='api-fitness-daily-wellness-tips'),

    # Mental wellbeing
    path('mental-wellbeing/assessment', views_api.api_wellbeing_assessment, name='api-wellbeing-assessment'),
    path('mental-wellbeing/stress-management', views_api.api_wellbeing_stress_management, name='api-wellbeing-stress-management'),
    path('mental-wellbeing/sleep-improvement', views_api.api_wellbeing_sleep_improvement, name='api-wellbeing-sleep-improvement'),
    path('mental-wellbeing/mindfulness', views_api.api_wellbeing_mindfulness, name='api-wellbeing-mindfulness'),
    path('mental-wellbeing/daily-reflection', views_api.api_wellbeing_daily_reflection, name='api-wellbeing-daily-reflection'),
    path('mental-wellbeing/coping-strategies', views_api.api_wellbeing_coping_strategies, name='api-wellbeing-coping-strategies'),
    path('mental-wellbeing/grounding-techniques', views_api.api_wellbeing_grounding_techniques, name='api-wellbeing-grounding-techniques'),
    path('mental-wellbeing/cognitive-reframing', views_api.api_wellbeing_cognitive_reframing, name='api-wellbeing-cognitive-reframing'),
    path('mental-wellbeing/resources', views_api.api_wellbeing_resources, name='api-wellbeing-resources'),

    # Users
    path('users', views_api.api_users, name='api-users'),
    path('users/students', views_api.api_students, name='api-students'),
    path('users/<int:user_id>', views_api.api_user_detail, name='api-user-detail'),

    # Gate passes
    path('gate-passes', views_api.api_gate_passes, name='api-gate-passes'),
    path('gate-passes/<int:gate_pass_id>', views_api.api_gate_pass_detail, name='api-gate-pass-detail'),
    path('gate-passes/<int:gate_pass_id>/approve', views_api.api_gate_pass_approve, name='api-gate-pass-approve'),
    path('gate-passes/<int:gate_pass_id>/reject', views_api.api_gate_pass_reject, name='api-gate-pass-reject'),
    path('gate-passes/<int:gate_pass_id>/return', views_api.api_gate_pass_return, name='api-gate-pass-return'),
]

# Reference data
urlpatterns += [
    path(kind, views_api.api_reference_list, {'kind': kind}, name=f'api-{kind}')
    for kind in REFERENCE_KINDS
]
