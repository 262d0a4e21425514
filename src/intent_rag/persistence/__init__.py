"""Embedding cache persistence for intent_rag."""

from intent_rag.persistence.cache import EmbeddingCache
from intent_rag.persistence.models import (
    CACHE_VERSION,
    CachedEmbedding,
    CachedIntent,
    CacheMetadata,
    CacheStats,
    text_hash,
)

__all__ = [
    "CACHE_VERSION",
    "CacheMetadata",
    "CacheStats",
    "CachedEmbedding",
    "CachedIntent",
    "EmbeddingCache",
    "text_hash",
]
