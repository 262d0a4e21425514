"""Mock implementations for intent_rag.

This module provides an in-memory stand-in for the embedding model for
testing and demos. The mocks are zero-dependency and use only the Python
standard library.
"""

from .embedding import HashingEmbeddingProvider, tokenize

__all__ = ["HashingEmbeddingProvider", "tokenize"]
