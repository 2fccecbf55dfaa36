"""
Request validation forms for the JSON API.

Each form is bound directly to a decoded JSON object. Field names use
snake_case; choice values match the values accepted by the mobile client.
"""

from django import forms
from django.core.validators import RegexValidator

from core.models import GatePassStatus


GENDER_CHOICES = [
    ('male', 'Male'),
    ('female', 'Female'),
    ('other', 'Other'),
]

FITNESS_LEVEL_CHOICES = [
    ('beginner', 'Beginner'),
    ('intermediate', 'Intermediate'),
    ('advanced', 'Advanced'),
]

BASIC_SLEEP_ISSUE_CHOICES = [
    ('falling_asleep', 'Falling asleep'),
    ('staying_asleep', 'Staying asleep'),
    ('waking_early', 'Waking early'),
    ('poor_quality', 'Poor quality'),
    ('oversleeping', 'Oversleeping'),
    ('none', 'None'),
]

MOOD_CHOICES = [
    ('very_negative', 'Very negative'),
    ('negative', 'Negative'),
    ('neutral', 'Neutral'),
    ('positive', 'Positive'),
    ('very_positive', 'Very positive'),
]

CONCERN_CHOICES = [
    ('stress', 'Stress'),
    ('anxiety', 'Anxiety'),
    ('depression', 'Depression'),
    ('burnout', 'Burnout'),
    ('insomnia', 'Insomnia'),
    ('concentration', 'Concentration'),
    ('loneliness', 'Loneliness'),
    ('self_esteem', 'Self-esteem'),
    ('trauma', 'Trauma'),
    ('other', 'Other'),
]

STRESS_SOURCE_CHOICES = [
    ('work', 'Work'),
    ('relationships', 'Relationships'),
    ('finances', 'Finances'),
    ('health', 'Health'),
    ('family', 'Family'),
    ('education', 'Education'),
    ('social', 'Social'),
    ('future_uncertainty', 'Future uncertainty'),
    ('environment', 'Environment'),
    ('other', 'Other'),
]

STRESS_TIMING_CHOICES = [
    ('morning', 'Morning'),
    ('afternoon', 'Afternoon'),
    ('evening', 'Evening'),
    ('night', 'Night'),
    ('all_day', 'All day'),
    ('intermittent', 'Intermittent'),
]

SLEEP_ISSUE_CHOICES = [
    ('falling_asleep', 'Falling asleep'),
    ('staying_asleep', 'Staying asleep'),
    ('waking_early', 'Waking early'),
    ('poor_quality', 'Poor quality'),
    ('oversleeping', 'Oversleeping'),
    ('nightmares', 'Nightmares'),
    ('sleep_apnea', 'Sleep apnea'),
    ('snoring', 'Snoring'),
    ('restless_legs', 'Restless legs'),
    ('teeth_grinding', 'Teeth grinding'),
    ('sleep_walking', 'Sleep walking'),
    ('other', 'Other'),
]

SLEEP_ENVIRONMENT_CHOICES = [
    ('too_warm', 'Too warm'),
    ('too_cold', 'Too cold'),
    ('too_bright', 'Too bright'),
    ('too_noisy', 'Too noisy'),
    ('uncomfortable_bed', 'Uncomfortable bed'),
    ('disturbances', 'Disturbances'),
    ('electronics', 'Electronics'),
    ('poor_air_quality', 'Poor air quality'),
    ('other', 'Other'),
]

MINDFULNESS_EXPERIENCE_CHOICES = [
    ('none', 'None'),
    ('beginner', 'Beginner'),
    ('intermediate', 'Intermediate'),
    ('advanced', 'Advanced'),
]

MINDFULNESS_FOCUS_CHOICES = [
    ('stress_reduction', 'Stress reduction'),
    ('anxiety_management', 'Anxiety management'),
    ('emotional_regulation', 'Emotional regulation'),
    ('focus_improvement', 'Focus improvement'),
    ('sleep_quality', 'Sleep quality'),
    ('self_awareness', 'Self-awareness'),
    ('compassion', 'Compassion'),
    ('spiritual_growth', 'Spiritual growth'),
    ('general_wellbeing', 'General wellbeing'),
    ('other', 'Other'),
]

PRACTICE_CHOICES = [
    ('meditation', 'Meditation'),
    ('breathwork', 'Breathwork'),
    ('body_scanning', 'Body scanning'),
    ('walking_meditation', 'Walking meditation'),
    ('mindful_movement', 'Mindful movement'),
    ('visualization', 'Visualization'),
    ('gratitude_practice', 'Gratitude practice'),
    ('mindful_eating', 'Mindful eating'),
    ('journaling', 'Journaling'),
    ('yoga', 'Yoga'),
    ('open_to_all', 'Open to all'),
]

# HH:MM in 24h format
time_of_day_validator = RegexValidator(
    r'^([01]\d|2[0-3]):[0-5]\d$',
    'Enter a time in HH:MM (24h) format.',
)


def age_field():
    return forms.IntegerField(min_value=13, max_value=100)


def scale_field(required=True):
    """A 1-10 self-assessment score."""
    return forms.IntegerField(min_value=1, max_value=10, required=required)


def optional_text():
    return forms.CharField(required=False)


class AssistantRequestForm(forms.Form):
    prompt = forms.CharField()


class FitnessRequestForm(forms.Form):
    age = age_field()
    gender = forms.ChoiceField(choices=GENDER_CHOICES)
    height = forms.FloatField(min_value=100, max_value=250, help_text='Height in cm')
    weight = forms.FloatField(min_value=30, max_value=300, help_text='Weight in kg')
    fitness_level = forms.ChoiceField(choices=FITNESS_LEVEL_CHOICES)
    goals = forms.CharField()
    preferred_duration = forms.IntegerField(min_value=10, max_value=180, help_text='Minutes')
    workouts_per_week = forms.IntegerField(min_value=1, max_value=7, required=False)
    medical_conditions = optional_text()
    available_equipment = optional_text()
    dietary_preferences = optional_text()
    allergies = optional_text()
    workout_location = optional_text()
    injuries = optional_text()
    fitness_experience = optional_text()


class WellbeingRequestForm(forms.Form):
    age = age_field()
    gender = forms.ChoiceField(choices=GENDER_CHOICES)
    mental_health_goals = forms.CharField()
    stress_level = scale_field()
    sleep_quality = scale_field()
    sleep_duration = forms.FloatField(min_value=1, max_value=14, required=False)
    sleep_issues = forms.MultipleChoiceField(choices=BASIC_SLEEP_ISSUE_CHOICES, required=False)
    current_practices = optional_text()
    energy_level = scale_field(required=False)
    mood_patterns = optional_text()
    screen_time = forms.FloatField(min_value=0, max_value=24, required=False)
    social_connection = scale_field(required=False)
    work_life_balance = scale_field(required=False)
    previous_approaches = optional_text()


class MentalAssessmentForm(forms.Form):
    age = age_field()
    gender = forms.ChoiceField(choices=GENDER_CHOICES)
    stress_level = scale_field()
    anxiety_level = scale_field()
    current_mood = forms.ChoiceField(choices=MOOD_CHOICES)
    concerns = forms.MultipleChoiceField(choices=CONCERN_CHOICES)
    concern_details = optional_text()
    sleep_quality = scale_field()
    sleep_duration = forms.FloatField(min_value=1, max_value=14)
    energy_level = scale_field()
    concentration_level = scale_field()
    social_connection = scale_field()
    work_life_balance = scale_field()
    current_practices = optional_text()
    previous_approaches = optional_text()
    has_physical_symptoms = forms.BooleanField(required=False)
    physical_symptoms = optional_text()
    wellbeing_goals = forms.CharField()


class StressManagementForm(forms.Form):
    age = age_field()
    gender = forms.ChoiceField(choices=GENDER_CHOICES)
    stress_level = scale_field()
    stress_sources = forms.MultipleChoiceField(choices=STRESS_SOURCE_CHOICES)
    stress_timing = forms.MultipleChoiceField(choices=STRESS_TIMING_CHOICES)
    physical_symptoms = optional_text()
    emotional_symptoms = optional_text()
    cognitive_symptoms = optional_text()
    behavioral_symptoms = optional_text()
    current_coping_mechanisms = optional_text()
    previous_approaches = optional_text()
    stress_management_goals = forms.CharField()


class SleepImprovementForm(forms.Form):
    age = age_field()
    gender = forms.ChoiceField(choices=GENDER_CHOICES)
    sleep_quality = scale_field()
    sleep_duration = forms.FloatField(min_value=1, max_value=14)
    bedtime = forms.CharField(validators=[time_of_day_validator])
    wake_time = forms.CharField(validators=[time_of_day_validator])
    time_to_fall_asleep = forms.IntegerField(min_value=0, max_value=240, help_text='Minutes')
    night_wakings = forms.IntegerField(min_value=0, max_value=20)
    sleep_issues = forms.MultipleChoiceField(choices=SLEEP_ISSUE_CHOICES)
    environment_issues = forms.MultipleChoiceField(choices=SLEEP_ENVIRONMENT_CHOICES, required=False)
    uses_screens_before_bed = forms.BooleanField(required=False)
    screen_time_before_bed = forms.IntegerField(min_value=0, max_value=240, required=False)
    consumes_caffeine_before_bed = forms.BooleanField(required=False)
    consumes_alcohol_before_bed = forms.BooleanField(required=False)
    pre_sleep_routine = optional_text()
    current_sleep_aids = optional_text()
    stress_level = scale_field()
    exercise_frequency = forms.IntegerField(min_value=0, max_value=14, help_text='Sessions per week')
    sleep_goals = forms.CharField()


class MindfulnessForm(forms.Form):
    age = age_field()
    gender = forms.ChoiceField(choices=GENDER_CHOICES)
    stress_level = scale_field()
    experience_level = forms.ChoiceField(choices=MINDFULNESS_EXPERIENCE_CHOICES)
    focus_areas = forms.MultipleChoiceField(choices=MINDFULNESS_FOCUS_CHOICES)
    preferred_practices = forms.MultipleChoiceField(choices=PRACTICE_CHOICES, required=False)
    available_time_per_day = forms.IntegerField(min_value=1, max_value=120, help_text='Minutes')
    preferred_time_of_day = optional_text()
    previous_practices = optional_text()
    challenges = optional_text()
    topics_of_interest = optional_text()
    environment = optional_text()
    guidance_preference = optional_text()


class UserForm(forms.Form):
    """Shared user fields; foreign keys are plain ids verified by the service."""
    sin_number = forms.CharField(max_length=50, required=False)
    name = forms.CharField(max_length=255)
    email = forms.EmailField()
    password = forms.CharField(min_length=8, required=False)
    father_name = forms.CharField(max_length=255, required=False)
    year = forms.IntegerField(min_value=1, max_value=6, required=False)
    batch = forms.CharField(max_length=20, required=False)
    phone = forms.CharField(max_length=20, required=False)
    role_id = forms.IntegerField(required=False)
    quota_id = forms.IntegerField(required=False)
    department_id = forms.IntegerField(required=False)
    college_id = forms.IntegerField(required=False)
    dayscholar_hosteller_id = forms.IntegerField(required=False)


class UserCreateForm(UserForm):
    password = forms.CharField(min_length=8)


class UserUpdateForm(UserForm):
    """Partial update: every field is optional, only submitted keys are applied."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.required = False

    def changed_values(self):
        """Return cleaned values for the keys present in the request body."""
        return {
            name: value
            for name, value in self.cleaned_data.items()
            if name in self.data
        }


class GatePassForm(forms.Form):
    student_id = forms.IntegerField()
    department_id = forms.IntegerField(required=False)
    reason = forms.CharField(max_length=500)
    destination = forms.CharField(max_length=255, required=False)
    out_time = forms.DateTimeField()
    expected_return_time = forms.DateTimeField(required=False)

    def clean(self):
        cleaned_data = super().clean()
        out_time = cleaned_data.get('out_time')
        expected_return_time = cleaned_data.get('expected_return_time')
        if out_time and expected_return_time and expected_return_time <= out_time:
            self.add_error('expected_return_time', 'Expected return must be after out time.')
        return cleaned_data


class GatePassDecisionForm(forms.Form):
    remarks = forms.CharField(max_length=500, required=False)


class GatePassListFilterForm(forms.Form):
    status = forms.ChoiceField(choices=GatePassStatus.choices, required=False)
    student_id = forms.IntegerField(required=False)


class ReferenceItemForm(forms.Form):
    name = forms.CharField(max_length=100)


class LoginForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField()


class PaginationForm(forms.Form):
    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, max_value=100, required=False)


class ExerciseLibraryQueryForm(forms.Form):
    type = forms.CharField(max_length=100, required=False)
    difficulty = forms.CharField(max_length=100, required=False)


class CopingStrategiesQueryForm(forms.Form):
    emotion = forms.CharField(max_length=100, required=False)
    situation = forms.CharField(max_length=100, required=False)


class GroundingQueryForm(forms.Form):
    duration = forms.IntegerField(min_value=1, max_value=60, required=False, help_text='Minutes')


class CognitiveReframingQueryForm(forms.Form):
    thought_pattern = forms.CharField(max_length=100, required=False)


class ResourcesQueryForm(forms.Form):
    type = forms.CharField(max_length=100, required=False)
