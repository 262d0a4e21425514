"""Embedding providers for intent_rag."""

from intent_rag.embedding.base import EmbeddingProvider
from intent_rag.embedding.sentence_transformer import SentenceTransformerProvider

__all__ = ["EmbeddingProvider", "SentenceTransformerProvider"]
