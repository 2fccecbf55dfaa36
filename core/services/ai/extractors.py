"""
Generated-text extraction from provider response bodies.

Each provider nests its text differently. The extractors walk the expected
path and return None as soon as a step is missing or has the wrong type;
they never raise.
"""

from typing import Any, Callable, Dict, Optional

from .schemas import ProviderType


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def extract_gemini_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text"""
    candidate = _first(_field(data, 'candidates'))
    part = _first(_field(_field(candidate, 'content'), 'parts'))
    return _text(_field(part, 'text'))


def extract_openai_text(data: Any) -> Optional[str]:
    """choices[0].message.content"""
    choice = _first(_field(data, 'choices'))
    return _text(_field(_field(choice, 'message'), 'content'))


def extract_anthropic_text(data: Any) -> Optional[str]:
    """content[0].text"""
    block = _first(_field(data, 'content'))
    return _text(_field(block, 'text'))


EXTRACTORS: Dict[str, Callable[[Any], Optional[str]]] = {
    ProviderType.GEMINI: extract_gemini_text,
    ProviderType.OPENAI: extract_openai_text,
    ProviderType.ANTHROPIC: extract_anthropic_text,
}


def extract_text(provider: ProviderType, data: Any) -> Optional[str]:
    """
    Extract generated text for the given provider.
    
    Args:
        provider: Provider that produced the response
        data: Decoded JSON body
        
    Returns:
        Generated text, or None if the body does not have the expected shape
    """
    return EXTRACTORS[provider](data)
