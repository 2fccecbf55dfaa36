"""
Assistant Service

Forwards free-form questions from the Arivu AI Assistant to the AI router.
"""

from .service import AssistantService

__all__ = ['AssistantService']
