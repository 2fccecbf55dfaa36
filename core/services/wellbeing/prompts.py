"""
Prompt templates for the mental wellbeing endpoints.
"""

from datetime import date
from typing import Any, Dict, Iterable, Optional


def _join(values: Optional[Iterable[str]], empty: str) -> str:
    values = list(values or [])
    return ', '.join(values) if values else empty


def _number(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def build_mental_assessment_prompt(data: Dict[str, Any]) -> str:
    if data.get('has_physical_symptoms'):
        physical = f"Yes - {data.get('physical_symptoms') or 'Not specified'}"
    else:
        physical = 'None'

    return "\n".join([
        "You are a compassionate mental health professional with expertise in psychological assessment.",
        "",
        "Based on the following information, provide a comprehensive mental wellbeing assessment:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Stress level (1-10): {data['stress_level']}",
        f"- Anxiety level (1-10): {data['anxiety_level']}",
        f"- Current mood: {data['current_mood']}",
        f"- Primary mental health concerns: {_join(data['concerns'], 'None')}",
        f"- Concern details: {data.get('concern_details') or 'Not provided'}",
        f"- Sleep quality (1-10): {data['sleep_quality']}",
        f"- Sleep duration: {_number(data['sleep_duration'])} hours",
        f"- Energy level (1-10): {data['energy_level']}",
        f"- Concentration level (1-10): {data['concentration_level']}",
        f"- Social connection level (1-10): {data['social_connection']}",
        f"- Work-life balance (1-10): {data['work_life_balance']}",
        f"- Current wellness practices: {data.get('current_practices') or 'None'}",
        f"- Previous approaches: {data.get('previous_approaches') or 'None'}",
        f"- Physical symptoms: {physical}",
        f"- Wellbeing goals: {data['wellbeing_goals']}",
        "",
        "Please provide:",
        "1. An overall assessment of current mental wellbeing",
        "2. Identified areas of concern and potential underlying factors",
        "3. Strengths and positive factors",
        "4. Personalized recommendations for improving mental wellbeing",
        "5. Suggested resources or professional support if appropriate",
        "",
        "Format the response in a compassionate, non-judgmental way that acknowledges the "
        "individual's experiences and provides hope and practical guidance.",
    ])


def build_stress_management_prompt(data: Dict[str, Any]) -> str:
    def reported(key):
        return data.get(key) or 'None reported'

    return "\n".join([
        "You are an expert in stress management and resilience building with years of "
        "experience helping individuals manage stress effectively.",
        "",
        "Based on the following information, create a personalized stress management plan:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Stress level (1-10): {data['stress_level']}",
        f"- Sources of stress: {_join(data['stress_sources'], 'None reported')}",
        f"- When stress peaks: {_join(data['stress_timing'], 'Not specified')}",
        f"- Physical symptoms: {reported('physical_symptoms')}",
        f"- Emotional symptoms: {reported('emotional_symptoms')}",
        f"- Cognitive symptoms: {reported('cognitive_symptoms')}",
        f"- Behavioral symptoms: {reported('behavioral_symptoms')}",
        f"- Current coping mechanisms: {reported('current_coping_mechanisms')}",
        f"- Previous approaches tried: {reported('previous_approaches')}",
        f"- Goals: {data['stress_management_goals']}",
        "",
        "Please provide a comprehensive stress management plan that includes:",
        "1. A brief explanation of how the reported stress pattern affects mental and physical health",
        "2. Immediate stress relief techniques (2-3 practices that can be done in 5 minutes or less)",
        "3. Daily stress management practices (3-5 evidence-based techniques)",
        "4. Weekly stress reduction activities (2-3 longer practices)",
        "5. Environmental and lifestyle changes to reduce overall stress levels",
        "6. Specific strategies for the identified stress sources",
        "7. A sample stress management schedule that can be realistically implemented",
        "8. Guidance on when to seek additional professional support",
        "",
        "Format the response in a supportive, practical manner that acknowledges the challenges "
        "of stress while emphasizing the individual's capacity for resilience and growth.",
    ])


def build_sleep_improvement_prompt(data: Dict[str, Any]) -> str:
    screens = 'No'
    if data.get('uses_screens_before_bed'):
        screens = 'Yes'
        if data.get('screen_time_before_bed'):
            screens += f" - {data['screen_time_before_bed']} minutes before bed"

    def yes_no(key):
        return 'Yes' if data.get(key) else 'No'

    return "\n".join([
        "You are a sleep specialist with expertise in behavioral sleep medicine and sleep hygiene practices.",
        "",
        "Based on the following information, create a personalized sleep improvement plan:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Sleep quality (1-10): {data['sleep_quality']}",
        f"- Sleep duration: {_number(data['sleep_duration'])} hours",
        f"- Typical bedtime: {data['bedtime']}",
        f"- Typical wake time: {data['wake_time']}",
        f"- Time to fall asleep: {data['time_to_fall_asleep']} minutes",
        f"- Number of night wakings: {data['night_wakings']}",
        f"- Sleep issues: {_join(data['sleep_issues'], 'None reported')}",
        f"- Environment issues: {_join(data.get('environment_issues'), 'None reported')}",
        f"- Uses screens before bed: {screens}",
        f"- Consumes caffeine before bed: {yes_no('consumes_caffeine_before_bed')}",
        f"- Consumes alcohol before bed: {yes_no('consumes_alcohol_before_bed')}",
        f"- Pre-sleep routine: {data.get('pre_sleep_routine') or 'None reported'}",
        f"- Current sleep aids: {data.get('current_sleep_aids') or 'None reported'}",
        f"- Stress level (1-10): {data['stress_level']}",
        f"- Exercise frequency per week: {data['exercise_frequency']}",
        f"- Sleep goals: {data['sleep_goals']}",
        "",
        "Please provide a comprehensive sleep improvement plan that includes:",
        "1. A brief assessment of current sleep patterns and potential issues",
        "2. Specific recommendations for sleep hygiene practices",
        "3. An optimal sleep schedule based on the provided information",
        "4. A detailed pre-sleep routine (30-60 minutes before bed)",
        "5. Environmental modifications for better sleep",
        "6. Behavioral strategies for addressing the specific sleep issues identified",
        "7. Guidance on the appropriate use of sleep aids (if any)",
        "8. Recommendations for daytime habits that promote better sleep",
        "9. A 7-day implementation plan to gradually improve sleep quality",
        "",
        "Format the response in a clear, structured manner that prioritizes evidence-based "
        "approaches and acknowledges the importance of consistency in improving sleep.",
    ])


def build_mindfulness_prompt(data: Dict[str, Any]) -> str:
    def specified(key):
        return data.get(key) or 'Not specified'

    return "\n".join([
        "You are a mindfulness teacher and meditation guide with extensive experience helping "
        "people develop personalized mindfulness practices.",
        "",
        "Based on the following information, create a tailored mindfulness program:",
        f"- Age: {data['age']}",
        f"- Gender: {data['gender']}",
        f"- Stress level (1-10): {data['stress_level']}",
        f"- Mindfulness experience level: {data['experience_level']}",
        f"- Focus areas: {_join(data['focus_areas'], 'Not specified')}",
        f"- Preferred practices: {_join(data.get('preferred_practices'), 'Open to all')}",
        f"- Available time per day: {data['available_time_per_day']} minutes",
        f"- Preferred time of day: {specified('preferred_time_of_day')}",
        f"- Previous practices tried: {data.get('previous_practices') or 'None'}",
        f"- Challenges experienced: {data.get('challenges') or 'None reported'}",
        f"- Topics of interest: {specified('topics_of_interest')}",
        f"- Practice environment: {specified('environment')}",
        f"- Guidance preference: {specified('guidance_preference')}",
        "",
        "Please provide a comprehensive mindfulness program that includes:",
        "1. A progressive 14-day mindfulness plan with specific practices for each day",
        "2. Detailed instructions for 3-5 core mindfulness practices tailored to their needs",
        "3. Recommendations for integrating mindfulness into daily life",
        "4. Strategies for overcoming the challenges they've identified",
        "5. Guidance for deepening practice over time",
        "6. Recommended resources (apps, books, videos) aligned with their interests and needs",
        "",
        "Format the response in a warm, encouraging tone that makes mindfulness accessible and "
        "emphasizes the benefits of consistent practice.",
    ])


def build_daily_reflection_prompt(today: date) -> str:
    return "\n".join([
        "You are a mental wellness coach specializing in daily reflection practices.",
        "",
        f"Create a set of daily reflection materials for {today.isoformat()} that includes:",
        "",
        "1. A thought-provoking quote related to mental wellbeing",
        "2. Three journal prompts that encourage self-reflection and emotional awareness",
        "3. A brief mindfulness exercise (2-3 minutes) to center the mind",
        "4. A simple mental wellness tip that can be applied throughout the day",
        "5. An affirmation to support positive thinking",
        "",
        "The materials should be concise, practical, and easily integrated into a busy day. "
        "The tone should be warm, supportive, and encouraging without being overly sentimental.",
    ])


def build_coping_strategies_prompt(
    emotion: Optional[str] = None,
    situation: Optional[str] = None,
) -> str:
    emotion_part = f"specifically for managing {emotion}" if emotion else "for various emotions"
    situation_part = f"in {situation} situations" if situation else "in different situations"

    return "\n".join([
        "You are a mental health expert specializing in emotional regulation and coping strategies.",
        "",
        f"Please provide evidence-based coping strategies {emotion_part} {situation_part}.",
        "",
        "Include:",
        "1. 5-7 practical, specific coping techniques that can be implemented immediately",
        "2. Brief explanations of why each strategy is effective",
        "3. Step-by-step instructions for implementing each technique",
        "4. Guidance on when each strategy is most appropriate to use",
        "5. How to tell if the strategy is working",
        "",
        "Format the response in a clear, actionable manner that makes these strategies "
        "accessible to someone who may be experiencing emotional distress.",
    ])


def build_grounding_techniques_prompt(duration: int) -> str:
    return "\n".join([
        "You are a trauma-informed mental health professional specializing in grounding "
        "techniques for managing overwhelm, anxiety, and stress.",
        "",
        f"Please provide {duration}-minute grounding exercises that can help someone quickly "
        "regain emotional balance.",
        "",
        "Include:",
        f"1. 3-5 different grounding techniques that can be completed in {duration} minutes or less",
        "2. Step-by-step instructions for each technique",
        "3. The specific sensory systems targeted by each technique (visual, auditory, tactile, etc.)",
        "4. How to modify each technique for different environments (public, workspace, home)",
        "5. Brief explanation of how these techniques help regulate the nervous system",
        "",
        "Format the response in a clear, calming manner appropriate for someone who may be "
        "experiencing heightened anxiety or emotional distress.",
    ])


def build_cognitive_reframing_prompt(thought_pattern: str) -> str:
    return "\n".join([
        "You are a cognitive behavioral therapist specializing in identifying and reframing "
        "negative thought patterns.",
        "",
        f"Please provide cognitive reframing exercises specifically for {thought_pattern} thinking patterns.",
        "",
        "Include:",
        f"1. A brief explanation of what {thought_pattern} thinking is and how it affects emotions and behavior",
        f"2. 3-5 examples of common {thought_pattern} thoughts",
        "3. Step-by-step guide to identifying these thoughts when they occur",
        "4. A structured framework for questioning and reframing these thoughts",
        "5. 3-5 examples of how to reframe the example thoughts",
        "6. A daily practice for building the skill of cognitive reframing",
        "",
        "Format the response in a supportive, educational manner that helps build "
        "self-awareness and cognitive flexibility.",
    ])


def build_resources_prompt(resource_type: str) -> str:
    return "\n".join([
        "You are a mental health advocate and resource specialist with extensive knowledge of "
        "mental health support options.",
        "",
        f"Please provide a curated list of mental health resources focusing on {resource_type} support.",
        "",
        "Include:",
        "1. A brief introduction to the types of resources being provided",
        "2. 5-10 specific resources with brief descriptions of each",
        "3. Information on accessibility, cost (if applicable), and who might benefit most",
        "4. How to determine which resources are most appropriate for different needs",
        "5. Guidance on when to seek professional help versus self-help resources",
        "",
        "Important: Only include widely recognized, reputable resources. For crisis resources, "
        "emphasize established hotlines and text lines. For therapy resources, focus on methods "
        "for finding qualified professionals rather than specific practitioners. For self-help "
        "resources, prioritize evidence-based approaches.",
        "",
        "Format the response in a clear, organized manner that makes the information easily "
        "accessible to someone who may be seeking support.",
    ])
