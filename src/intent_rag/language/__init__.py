"""Language detection and localization for intent_rag."""

from intent_rag.language.detector import NEUTRAL_CONFIDENCE, LanguageDetector
from intent_rag.language.messages import get_message, has_message
from intent_rag.language.patterns import LANGUAGE_PATTERNS

__all__ = [
    "LANGUAGE_PATTERNS",
    "NEUTRAL_CONFIDENCE",
    "LanguageDetector",
    "get_message",
    "has_message",
]
