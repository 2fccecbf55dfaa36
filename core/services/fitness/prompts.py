"""
Prompt templates for the fitness endpoints.

Every builder takes the cleaned data of the matching form (see core.forms)
and returns the complete prompt text.
"""

from datetime import date
from typing import Any, Dict, Optional


def _or_none(value: Any) -> Any:
    return value or 'None'


def _number(value: Any) -> str:
    """Render 175.0 as '175' and 72.5 as '72.5'."""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def build_workout_plan_prompt(data: Dict[str, Any]) -> str:
    lines = [
        "You are an expert fitness trainer with years of experience in creating personalized workout plans.",
        "Generate a comprehensive workout plan based on the following information:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Height: {_number(data['height'])} cm",
        f"- Weight: {_number(data['weight'])} kg",
        f"- Fitness level: {data['fitness_level']}",
        f"- Goals: {data['goals']}",
        f"- Preferred workout duration: {data['preferred_duration']} minutes",
    ]
    if data.get('workouts_per_week'):
        lines.append(f"- Workouts per week: {data['workouts_per_week']}")
    lines += [
        f"- Medical conditions: {_or_none(data.get('medical_conditions'))}",
        f"- Injuries: {_or_none(data.get('injuries'))}",
        f"- Available equipment: {_or_none(data.get('available_equipment'))}",
    ]
    if data.get('workout_location'):
        lines.append(f"- Workout location: {data['workout_location']}")
    if data.get('fitness_experience'):
        lines.append(f"- Fitness experience: {data['fitness_experience']}")
    lines += [
        "",
        "Provide a structured 7-day program that includes:",
        "1. Daily workout routines with specific exercises",
        "2. Sets, reps, and rest periods for each exercise",
        "3. Warm-up and cool-down recommendations",
        "4. Progressive overload strategy",
        "5. Realistic expectations and timeline for achieving goals",
        "",
        "Format the response in a clear, organized manner that can be easily followed.",
    ]
    return "\n".join(lines)


def build_nutrition_advice_prompt(data: Dict[str, Any]) -> str:
    return "\n".join([
        "You are a certified nutritionist specializing in personalized meal planning.",
        "Generate detailed nutrition advice based on the following information:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Height: {_number(data['height'])} cm",
        f"- Weight: {_number(data['weight'])} kg",
        f"- Fitness level: {data['fitness_level']}",
        f"- Goals: {data['goals']}",
        f"- Dietary preferences: {_or_none(data.get('dietary_preferences'))}",
        f"- Allergies: {_or_none(data.get('allergies'))}",
        f"- Medical conditions: {_or_none(data.get('medical_conditions'))}",
        "",
        "Provide comprehensive nutrition guidance including:",
        "1. Recommended daily caloric intake and macronutrient breakdown",
        "2. A 7-day meal plan with specific meals and portion sizes",
        "3. Meal timing recommendations in relation to workouts",
        "4. Hydration guidelines",
        "5. Supplement recommendations if appropriate",
        "6. Foods to avoid or limit",
        "7. Tips for maintaining consistency with the nutrition plan",
        "",
        "Format the response in a clear, organized manner that can be easily followed.",
    ])


def build_wellbeing_advice_prompt(data: Dict[str, Any]) -> str:
    lines = [
        "You are an expert in mental health and wellness with years of experience helping individuals improve their wellbeing.",
        "Generate personalized mental wellbeing recommendations based on the following information:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Mental health goals: {data['mental_health_goals']}",
        f"- Stress level (1-10): {data['stress_level']}",
        f"- Sleep quality (1-10): {data['sleep_quality']}",
    ]
    if data.get('sleep_duration'):
        lines.append(f"- Sleep duration: {_number(data['sleep_duration'])} hours")
    if data.get('sleep_issues'):
        lines.append(f"- Sleep issues: {', '.join(data['sleep_issues'])}")
    if data.get('energy_level'):
        lines.append(f"- Energy level (1-10): {data['energy_level']}")
    if data.get('mood_patterns'):
        lines.append(f"- Mood patterns: {data['mood_patterns']}")
    if data.get('screen_time') is not None:
        lines.append(f"- Daily screen time: {_number(data['screen_time'])} hours")
    if data.get('social_connection'):
        lines.append(f"- Social connection (1-10): {data['social_connection']}")
    if data.get('work_life_balance'):
        lines.append(f"- Work-life balance (1-10): {data['work_life_balance']}")
    lines += [
        f"- Current mental wellness practices: {_or_none(data.get('current_practices'))}",
        f"- Previous approaches: {_or_none(data.get('previous_approaches'))}",
        "",
        "Provide comprehensive wellbeing guidance including:",
        "1. Daily mindfulness or meditation practices (with specific instructions)",
        "2. Stress management techniques tailored to their stress level",
        "3. Sleep hygiene recommendations to improve sleep quality",
        "4. Journaling prompts for self-reflection",
        "5. Physical activities that complement mental wellbeing",
        "6. Cognitive behavioral strategies for managing negative thoughts",
        "7. Recommended resources (apps, books, podcasts) for ongoing support",
        "",
        "Format the response in a clear, organized manner that emphasizes practical, actionable steps.",
    ]
    return "\n".join(lines)


def build_exercise_library_prompt(
    exercise_type: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> str:
    exercise_type = exercise_type or 'all'
    difficulty = difficulty or 'all'
    return "\n".join([
        f"As a fitness expert, provide detailed information about {exercise_type} exercises "
        f"at the {difficulty} difficulty level. For each exercise, include:",
        "1. Proper form and technique",
        "2. Muscles targeted",
        "3. Common mistakes to avoid",
        "4. Variations to make it easier or harder",
        "5. Recommended sets and reps",
        "6. Rest periods",
        "7. Equipment needed (if any)",
        "",
        "Present this information in a structured, easy-to-follow format suitable for a fitness application library.",
    ])


def build_daily_wellness_tips_prompt(today: date) -> str:
    return "\n".join([
        f"Generate 5 evidence-based daily wellness tips for {today.isoformat()} covering:",
        "1. Nutrition - A practical, science-backed nutrition tip",
        "2. Physical Activity - A quick, effective exercise that can be done anywhere",
        "3. Mental Wellbeing - A mindfulness practice or stress-relief technique",
        "4. Sleep - A tip for improving sleep quality",
        "5. Productivity - A strategy for maintaining focus and energy throughout the day",
        "",
        "Each tip should be concise (1-2 sentences), actionable, and based on scientific research.",
    ])
