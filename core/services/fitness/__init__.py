"""
Fitness Service

Builds workout, nutrition and wellness prompts from questionnaires and
sends them through the AI router.
"""

from .service import FitnessService

__all__ = ['FitnessService']
