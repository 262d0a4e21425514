"""EmbeddingProvider backed by sentence-transformers."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from intent_rag.embedding.base import EmbeddingProvider
from intent_rag.exceptions import EmbeddingError, InitializationError

logger = logging.getLogger(__name__)


class SentenceTransformerProvider(EmbeddingProvider):
    """Computes embeddings with a local sentence-transformers model.

    The library is imported on initialize() so the rest of the package works
    without the ``embeddings`` extra installed.
    """

    def __init__(self, model_path: str, device: str | None = None):
        self._model_path = model_path
        self.device = device
        self._model: Any = None
        self._dimension: int | None = None

    @property
    def model_path(self) -> str:
        return self._model_path

    @property
    def dimension(self) -> int:
        if self._dimension is None:
            raise EmbeddingError("Embedding provider not initialized")
        return self._dimension

    @property
    def is_initialized(self) -> bool:
        return self._model is not None

    async def initialize(self) -> None:
        if self._model is not None:
            return

        try:
            from sentence_transformers import SentenceTransformer
        except ImportError as e:
            raise InitializationError(
                "sentence-transformers is not installed; install the 'embeddings' extra"
            ) from e

        try:
            model = await asyncio.to_thread(SentenceTransformer, self._model_path, device=self.device)
        except Exception as e:
            raise InitializationError(f"Failed to load model {self._model_path}: {e}") from e

        self._dimension = int(model.get_sentence_embedding_dimension())
        self._model = model
        logger.info("Loaded embedding model %s (dimension %d)", self._model_path, self._dimension)

    async def embed(self, text: str) -> list[float]:
        if self._model is None:
            raise EmbeddingError("Embedding provider not initialized")
        if not text or not text.strip():
            raise EmbeddingError("Cannot embed empty text")

        try:
            vector = await asyncio.to_thread(self._model.encode, text, convert_to_numpy=True)
        except Exception as e:
            raise EmbeddingError(f"Failed to embed text: {e}") from e

        return [float(v) for v in vector]

    async def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        if self._model is None:
            raise EmbeddingError("Embedding provider not initialized")
        if any(not text or not text.strip() for text in texts):
            raise EmbeddingError("Cannot embed empty text")
        if not texts:
            return []

        try:
            vectors = await asyncio.to_thread(self._model.encode, list(texts), convert_to_numpy=True)
        except Exception as e:
            raise EmbeddingError(f"Failed to embed texts: {e}") from e

        return [[float(v) for v in vector] for vector in vectors]

    async def dispose(self) -> None:
        if self._model is None:
            return
        self._model = None
        logger.info("Released embedding model %s", self._model_path)
