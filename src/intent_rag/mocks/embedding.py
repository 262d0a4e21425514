"""Deterministic embedding provider for tests and demos.

Vectors are signed feature hashes of the input tokens, so texts sharing words
score higher under cosine similarity. No model download is needed.
"""

import asyncio
import hashlib
import math
import re

from intent_rag.embedding.base import EmbeddingProvider
from intent_rag.exceptions import EmbeddingError

_CJK = r"\u3040-\u30ff\u4e00-\u9fff\uac00-\ud7af"
_TOKEN_PATTERN = re.compile(rf"[{_CJK}]|[^\W{_CJK}]+")


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens; CJK and Hangul characters are single tokens."""
    return _TOKEN_PATTERN.findall(text.lower())


class HashingEmbeddingProvider(EmbeddingProvider):
    """Feature-hashing embeddings with call accounting."""

    def __init__(self, dimension: int = 2048, model_path: str = "mock/hashing-embedding"):
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        self._dimension = dimension
        self._model_path = model_path
        self._initialized = False
        self.embed_calls = 0
        self.embedded_texts: list[str] = []

    @property
    def model_path(self) -> str:
        return self._model_path

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        self._initialized = True

    async def embed(self, text: str) -> list[float]:
        if not self._initialized:
            raise EmbeddingError("Embedding provider not initialized")
        if not text or not text.strip():
            raise EmbeddingError("Cannot embed empty text")

        self.embed_calls += 1
        self.embedded_texts.append(text)
        await asyncio.sleep(0)
        return self.vectorize(text)

    def vectorize(self, text: str) -> list[float]:
        """Compute the unit-length hashed vector for a text."""
        vector = [0.0] * self._dimension
        tokens = tokenize(text) or [text.strip().lower()]
        for token in tokens:
            digest = hashlib.blake2b(token.encode("utf-8"), digest_size=8).digest()
            bucket = int.from_bytes(digest[:7], "big") % self._dimension
            vector[bucket] += 1.0 if digest[7] & 1 else -1.0

        norm = math.sqrt(sum(v * v for v in vector))
        if norm == 0.0:
            # Opposite-sign collisions cancelled out; fall back to one bucket.
            vector[0] = 1.0
            return vector
        return [v / norm for v in vector]

    def reset_counters(self) -> None:
        self.embed_calls = 0
        self.embedded_texts.clear()

    async def dispose(self) -> None:
        self._initialized = False
