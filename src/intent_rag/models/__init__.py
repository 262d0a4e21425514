"""Data models for intent_rag."""

from intent_rag.models.types import (
    IndexType,
    Intent,
    LanguageDetectionResult,
    QueryResult,
    QueryState,
    SupportedLanguage,
)

__all__ = [
    "IndexType",
    "Intent",
    "LanguageDetectionResult",
    "QueryResult",
    "QueryState",
    "SupportedLanguage",
]
