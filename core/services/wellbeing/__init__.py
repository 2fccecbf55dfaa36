"""
Wellbeing Service

Mental wellbeing guidance: assessments, stress, sleep, mindfulness and
short daily exercises.
"""

from .service import WellbeingService

__all__ = ['WellbeingService']
