"""Multilingual intent retrieval: maps utterances to actions by embedding similarity."""

from intent_rag.actions import (
    ActionDispatcher,
    ActionRegistry,
    ActionSpec,
    InMemoryDeviceRepository,
    build_default_registry,
)
from intent_rag.catalog import DEFAULT_TEMPLATES, FlattenedIntent, IntentTemplate, TemplateCatalog
from intent_rag.config import RAGConfig
from intent_rag.embedding import EmbeddingProvider, SentenceTransformerProvider
from intent_rag.engine import RetrievalEngine, create_engine
from intent_rag.exceptions import (
    ActionError,
    CacheError,
    ConfigurationError,
    DimensionMismatchError,
    DuplicateIntentError,
    EmbeddingError,
    InitializationError,
    IntentRAGError,
    NotInitializedError,
    QueryError,
    SearchError,
)
from intent_rag.language import LanguageDetector
from intent_rag.models import (
    IndexType,
    Intent,
    LanguageDetectionResult,
    QueryResult,
    QueryState,
    SupportedLanguage,
)
from intent_rag.persistence import CachedEmbedding, CachedIntent, CacheMetadata, EmbeddingCache
from intent_rag.search import SearchResult, VectorIndex

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TEMPLATES",
    "ActionDispatcher",
    "ActionError",
    "ActionRegistry",
    "ActionSpec",
    "CacheError",
    "CacheMetadata",
    "CachedEmbedding",
    "CachedIntent",
    "ConfigurationError",
    "DimensionMismatchError",
    "DuplicateIntentError",
    "EmbeddingCache",
    "EmbeddingError",
    "EmbeddingProvider",
    "FlattenedIntent",
    "InMemoryDeviceRepository",
    "IndexType",
    "InitializationError",
    "Intent",
    "IntentRAGError",
    "IntentTemplate",
    "LanguageDetectionResult",
    "LanguageDetector",
    "NotInitializedError",
    "QueryError",
    "QueryResult",
    "QueryState",
    "RAGConfig",
    "RetrievalEngine",
    "SearchError",
    "SearchResult",
    "SentenceTransformerProvider",
    "SupportedLanguage",
    "TemplateCatalog",
    "VectorIndex",
    "build_default_registry",
    "create_engine",
]
