"""
Arivu JSON API Views.

This module provides the HTTP endpoints of the campus backend: token login,
user and gate pass management, reference data and the AI assistant, fitness
and mental wellbeing endpoints. Everything except login requires a bearer
token (see core.middleware_api).

AI endpoints are async views; the ORM-backed endpoints are plain sync views.
"""
import logging
import json
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt

from core import forms
from core.services import auth_service
from core.services.assistant import AssistantService
from core.services.exceptions import (
    AIServiceUnavailable,
    AuthenticationFailed,
    InvalidStateTransition,
    ResourceConflict,
    ResourceNotFound,
)
from core.services.fitness import FitnessService
from core.services.gate_pass_service import GatePassService
from core.services.reference_service import ReferenceService
from core.services.user_service import DEFAULT_PAGE_SIZE, UserService
from core.services.wellbeing import WellbeingService

logger = logging.getLogger(__name__)

AI_ERROR_MESSAGE = AIServiceUnavailable.default_message


class InvalidPayload(Exception):
    pass


# Helpers

def _parse_json(request):
    """
    Decode the request body as a JSON object.

    Raises:
        InvalidPayload: If the body is not a JSON object
    """
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidPayload('Invalid JSON payload')
    if not isinstance(data, dict):
        raise InvalidPayload('JSON payload must be an object')
    return data


def _validation_error(form):
    return JsonResponse(
        {
            'error': 'Validation failed',
            'details': {field: list(errors) for field, errors in form.errors.items()},
        },
        status=400
    )


def _service_error(e):
    """Translate a service exception into a JSON error response."""
    if isinstance(e, ResourceNotFound):
        return JsonResponse({'error': str(e)}, status=404)
    if isinstance(e, ResourceConflict):
        return JsonResponse({'error': str(e)}, status=409)
    if isinstance(e, InvalidStateTransition):
        return JsonResponse({'error': str(e)}, status=400)
    if isinstance(e, AuthenticationFailed):
        return JsonResponse({'error': str(e)}, status=401)
    raise e


def _bind_body(request, form_class):
    """Return a bound form for the JSON body, or a 400 response."""
    try:
        data = _parse_json(request)
    except InvalidPayload as e:
        return None, JsonResponse({'error': str(e)}, status=400)

    form = form_class(data)
    if not form.is_valid():
        return None, _validation_error(form)
    return form, None


def _current_user_id(request):
    payload = getattr(request, 'jwt_payload', None) or {}
    try:
        return int(payload.get('sub'))
    except (TypeError, ValueError):
        return None


# Service factories (patched in tests)

def get_assistant_service():
    return AssistantService()


def get_fitness_service():
    return FitnessService()


def get_wellbeing_service():
    return WellbeingService()


# Auth

@csrf_exempt
@require_http_methods(["POST"])
def api_login(request):
    """
    POST /api/auth/login

    Request Body:
        {"email": ..., "password": ...}

    Returns:
        200: {"access_token", "token_type", "user"}
        400: Invalid payload
        401: Invalid credentials
    """
    form, error = _bind_body(request, forms.LoginForm)
    if error:
        return error

    try:
        result = auth_service.login(form.cleaned_data['email'], form.cleaned_data['password'])
    except AuthenticationFailed as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error during login: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)

    return JsonResponse(result)


# AI endpoints

async def _ai_response(operation, awaitable):
    """Await an orchestrator call and convert the outcome to a response."""
    try:
        result = await awaitable
    except AIServiceUnavailable as e:
        return JsonResponse({'error': str(e)}, status=500)
    except Exception as e:
        logger.error(f"Unexpected error in {operation}: {e}", exc_info=True)
        return JsonResponse({'error': AI_ERROR_MESSAGE}, status=500)
    return JsonResponse(result.to_dict())


async def _ai_form_view(request, form_class, operation, method_name, service_factory):
    form, error = _bind_body(request, form_class)
    if error:
        return error
    service = service_factory()
    return await _ai_response(operation, getattr(service, method_name)(form.cleaned_data))


def _bind_query(request, form_class):
    form = form_class(request.GET)
    if not form.is_valid():
        return None, _validation_error(form)
    return form, None


@csrf_exempt
@require_http_methods(["POST"])
async def api_assistant_ask(request):
    """
    POST /api/ai-assistant/ask

    Request Body:
        {"prompt": "..."}

    Returns:
        200: {"success", "message", "response", "model"}
        400: Invalid payload
        500: {"error": "Failed to generate AI response"}
    """
    form, error = _bind_body(request, forms.AssistantRequestForm)
    if error:
        return error
    service = get_assistant_service()
    return await _ai_response('assistant', service.generate_response(form.cleaned_data['prompt']))


@csrf_exempt
@require_http_methods(["POST"])
async def api_fitness_workout_plan(request):
    """POST /api/ai-fitness/workout-plan"""
    return await _ai_form_view(
        request, forms.FitnessRequestForm, 'workout plan',
        'generate_workout_plan', get_fitness_service,
    )


@csrf_exempt
@require_http_methods(["POST"])
async def api_fitness_nutrition_advice(request):
    """POST /api/ai-fitness/nutrition-advice"""
    return await _ai_form_view(
        request, forms.FitnessRequestForm, 'nutrition advice',
        'generate_nutrition_advice', get_fitness_service,
    )


@csrf_exempt
@require_http_methods(["POST"])
async def api_fitness_mental_wellbeing(request):
    """POST /api/ai-fitness/mental-wellbeing"""
    return await _ai_form_view(
        request, forms.WellbeingRequestForm, 'wellbeing advice',
        'generate_wellbeing_advice', get_fitness_service,
    )


@csrf_exempt
@require_http_methods(["GET"])
async def api_fitness_exercise_library(request):
    """
    GET /api/ai-fitness/exercise-library?type=&difficulty=

    Both parameters default to 'all'.
    """
    form, error = _bind_query(request, forms.ExerciseLibraryQueryForm)
    if error:
        return error
    service = get_fitness_service()
    return await _ai_response('exercise library', service.get_exercise_library(
        form.cleaned_data['type'] or None,
        form.cleaned_data['difficulty'] or None,
    ))


@csrf_exempt
@require_http_methods(["GET"])
async def api_fitness_daily_wellness_tips(request):
    """GET /api/ai-fitness/daily-wellness-tips"""
    service = get_fitness_service()
    return await _ai_response('daily wellness tips', service.generate_daily_wellness_tips())


@csrf_exempt
@require_http_methods(["POST"])
async def api_wellbeing_assessment(request):
    """POST /api/mental-wellbeing/assessment"""
    return await _ai_form_view(
        request, forms.MentalAssessmentForm, 'mental assessment',
        'generate_mental_assessment', get_wellbeing_service,
    )


@csrf_exempt
@require_http_methods(["POST"])
async def api_wellbeing_stress_management(request):
    """POST /api/mental-wellbeing/stress-management"""
    return await _ai_form_view(
        request, forms.StressManagementForm, 'stress management',
        'generate_stress_management', get_wellbeing_service,
    )


@csrf_exempt
@require_http_methods(["POST"])
async def api_wellbeing_sleep_improvement(request):
    """POST /api/mental-wellbeing/sleep-improvement"""
    return await _ai_form_view(
        request, forms.SleepImprovementForm, 'sleep improvement',
        'generate_sleep_improvement', get_wellbeing_service,
    )


@csrf_exempt
@require_http_methods(["POST"])
async def api_wellbeing_mindfulness(request):
    """POST /api/mental-wellbeing/mindfulness"""
    return await _ai_form_view(
        request, forms.MindfulnessForm, 'mindfulness',
        'generate_mindfulness_practices', get_wellbeing_service,
    )


@csrf_exempt
@require_http_methods(["GET"])
async def api_wellbeing_daily_reflection(request):
    """GET /api/mental-wellbeing/daily-reflection"""
    service = get_wellbeing_service()
    return await _ai_response('daily reflection', service.generate_daily_reflection())


@csrf_exempt
@require_http_methods(["GET"])
async def api_wellbeing_coping_strategies(request):
    """GET /api/mental-wellbeing/coping-strategies?emotion=&situation="""
    form, error = _bind_query(request, forms.CopingStrategiesQueryForm)
    if error:
        return error
    service = get_wellbeing_service()
    return await _ai_response('coping strategies', service.generate_coping_strategies(
        form.cleaned_data['emotion'] or None,
        form.cleaned_data['situation'] or None,
    ))


@csrf_exempt
@require_http_methods(["GET"])
async def api_wellbeing_grounding_techniques(request):
    """GET /api/mental-wellbeing/grounding-techniques?duration=5"""
    form, error = _bind_query(request, forms.GroundingQueryForm)
    if error:
        return error
    service = get_wellbeing_service()
    kwargs = {}
    if form.cleaned_data['duration']:
        kwargs['duration'] = form.cleaned_data['duration']
    return await _ai_response('grounding techniques', service.generate_grounding_techniques(**kwargs))


@csrf_exempt
@require_http_methods(["GET"])
async def api_wellbeing_cognitive_reframing(request):
    """GET /api/mental-wellbeing/cognitive-reframing?thought_pattern=general"""
    form, error = _bind_query(request, forms.CognitiveReframingQueryForm)
    if error:
        return error
    service = get_wellbeing_service()
    kwargs = {}
    if form.cleaned_data['thought_pattern']:
        kwargs['thought_pattern'] = form.cleaned_data['thought_pattern']
    return await _ai_response('cognitive reframing', service.generate_cognitive_reframing(**kwargs))


@csrf_exempt
@require_http_methods(["GET"])
async def api_wellbeing_resources(request):
    """GET /api/mental-wellbeing/resources?type=all"""
    form, error = _bind_query(request, forms.ResourcesQueryForm)
    if error:
        return error
    service = get_wellbeing_service()
    kwargs = {}
    if form.cleaned_data['type']:
        kwargs['resource_type'] = form.cleaned_data['type']
    return await _ai_response('mental health resources', service.get_mental_health_resources(**kwargs))


# Users

@csrf_exempt
@require_http_methods(["GET", "POST"])
def api_users(request):
    """
    GET  /api/users?page=1&limit=20  List users
    POST /api/users                  Create user

    Returns:
        200: {"users": [...], "total": n}
        201: Created user
        400: Invalid payload
        404: Referenced role/quota/department/college/residence type not found
        409: Email or SIN number already in use
    """
    service = UserService()
    try:
        if request.method == 'GET':
            form = forms.PaginationForm(request.GET)
            if not form.is_valid():
                return _validation_error(form)
            return JsonResponse(service.find_all(
                page=form.cleaned_data['page'] or 1,
                limit=form.cleaned_data['limit'] or DEFAULT_PAGE_SIZE,
            ))

        form, error = _bind_body(request, forms.UserCreateForm)
        if error:
            return error
        return JsonResponse(service.create(form.cleaned_data), status=201)

    except (ResourceNotFound, ResourceConflict) as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error handling {request.method} /api/users: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


@csrf_exempt
@require_http_methods(["GET"])
def api_students(request):
    """GET /api/users/students"""
    try:
        return JsonResponse({'users': UserService().find_all_students()})
    except ResourceNotFound as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error listing students: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


@csrf_exempt
@require_http_methods(["GET", "PATCH", "DELETE"])
def api_user_detail(request, user_id):
    """
    GET    /api/users/{user_id}
    PATCH  /api/users/{user_id}  Partial update
    DELETE /api/users/{user_id}

    Returns:
        200: User object
        204: Deleted
        404: User (or referenced row) not found
        409: Email or SIN number already in use
    """
    service = UserService()
    try:
        if request.method == 'GET':
            return JsonResponse(service.find_one(user_id))

        if request.method == 'DELETE':
            service.remove(user_id)
            return HttpResponse(status=204)

        form, error = _bind_body(request, forms.UserUpdateForm)
        if error:
            return error
        return JsonResponse(service.update(user_id, form.changed_values()))

    except (ResourceNotFound, ResourceConflict) as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error handling {request.method} /api/users/{user_id}: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


# Gate passes

@csrf_exempt
@require_http_methods(["GET", "POST"])
def api_gate_passes(request):
    """
    GET  /api/gate-passes?status=&student_id=
    POST /api/gate-passes
    """
    service = GatePassService()
    try:
        if request.method == 'GET':
            form = forms.GatePassListFilterForm(request.GET)
            if not form.is_valid():
                return _validation_error(form)
            gate_passes = service.list(
                status=form.cleaned_data['status'] or None,
                student_id=form.cleaned_data['student_id'],
            )
            return JsonResponse({'gate_passes': gate_passes})

        form, error = _bind_body(request, forms.GatePassForm)
        if error:
            return error
        return JsonResponse(service.create(form.cleaned_data), status=201)

    except ResourceNotFound as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error handling {request.method} /api/gate-passes: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


@csrf_exempt
@require_http_methods(["GET", "DELETE"])
def api_gate_pass_detail(request, gate_pass_id):
    """GET/DELETE /api/gate-passes/{gate_pass_id}"""
    service = GatePassService()
    try:
        if request.method == 'DELETE':
            service.delete(gate_pass_id)
            return HttpResponse(status=204)
        return JsonResponse(service.get(gate_pass_id))
    except ResourceNotFound as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error handling {request.method} gate pass {gate_pass_id}: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


def _gate_pass_decision(request, gate_pass_id, action):
    form, error = _bind_body(request, forms.GatePassDecisionForm)
    if error:
        return error

    service = GatePassService()
    decide = service.approve if action == 'approve' else service.reject
    try:
        return JsonResponse(decide(
            gate_pass_id,
            approver_id=_current_user_id(request),
            remarks=form.cleaned_data['remarks'],
        ))
    except (ResourceNotFound, InvalidStateTransition) as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error trying to {action} gate pass {gate_pass_id}: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


@csrf_exempt
@require_http_methods(["POST"])
def api_gate_pass_approve(request, gate_pass_id):
    """POST /api/gate-passes/{gate_pass_id}/approve  Body: {"remarks": "..."}"""
    return _gate_pass_decision(request, gate_pass_id, 'approve')


@csrf_exempt
@require_http_methods(["POST"])
def api_gate_pass_reject(request, gate_pass_id):
    """POST /api/gate-passes/{gate_pass_id}/reject  Body: {"remarks": "..."}"""
    return _gate_pass_decision(request, gate_pass_id, 'reject')


@csrf_exempt
@require_http_methods(["POST"])
def api_gate_pass_return(request, gate_pass_id):
    """POST /api/gate-passes/{gate_pass_id}/return"""
    try:
        return JsonResponse(GatePassService().mark_returned(gate_pass_id))
    except (ResourceNotFound, InvalidStateTransition) as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error returning gate pass {gate_pass_id}: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


# Reference data

@csrf_exempt
@require_http_methods(["GET", "POST"])
def api_reference_list(request, kind):
    """
    GET  /api/{kind}  List rows
    POST /api/{kind}  Create row, Body: {"name": "..."}

    kind is one of roles, quotas, departments, colleges, residence-types.
    """
    service = ReferenceService()
    try:
        if request.method == 'GET':
            return JsonResponse({kind: service.list(kind)})

        form, error = _bind_body(request, forms.ReferenceItemForm)
        if error:
            return error
        return JsonResponse(service.create(kind, form.cleaned_data['name']), status=201)

    except (ResourceNotFound, ResourceConflict) as e:
        return _service_error(e)
    except Exception as e:
        logger.error(f"Error handling {request.method} /api/{kind}: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)
