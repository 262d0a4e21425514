"""VectorIndex: an intent-aware wrapper around a flat FAISS index."""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

import faiss
import numpy as np

from intent_rag.exceptions import (
    DimensionMismatchError,
    DuplicateIntentError,
    NotInitializedError,
    SearchError,
)
from intent_rag.models.types import Intent, IndexType
from intent_rag.search.models import SearchResult

logger = logging.getLogger(__name__)

DEFAULT_EUCLIDEAN_SCALE = 1000.0


class VectorIndex:
    """Exact nearest-neighbor search over intent embeddings.

    Labels are assigned sequentially from 0 in insertion order and are never
    reused until ``clear()``. Scores are higher-is-better for every metric:

    - ``L2``: ``exp(-d / euclidean_scale)`` where ``d`` is the squared
      Euclidean distance reported by ``IndexFlatL2``.
    - ``IP`` and ``COSINE``: the raw inner product. ``COSINE`` always
      normalizes vectors, so its score is the cosine similarity.
    """

    def __init__(
        self,
        dimension: int,
        index_type: IndexType = IndexType.COSINE,
        euclidean_scale: float = DEFAULT_EUCLIDEAN_SCALE,
        normalize_vectors: bool | None = None,
    ):
        """Initialize the index.

        Args:
            dimension: Fixed vector dimension
            index_type: Similarity metric
            euclidean_scale: Distance scale for L2 scores
            normalize_vectors: Normalize vectors to unit length (always on for COSINE)
        """
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        if euclidean_scale <= 0:
            raise ValueError("euclidean_scale must be positive")

        self.dimension = dimension
        self.index_type = IndexType(index_type)
        self.euclidean_scale = euclidean_scale
        self.normalize_vectors = self.index_type == IndexType.COSINE or bool(normalize_vectors)

        self._index: faiss.Index | None = None
        self._intents: dict[int, Intent] = {}
        self._labels_by_id: dict[int, int] = {}

    @property
    def is_initialized(self) -> bool:
        """Check if the underlying FAISS index exists."""
        return self._index is not None

    @property
    def size(self) -> int:
        """Number of stored vectors."""
        return len(self._intents)

    def initialize(self) -> None:
        """Create the underlying FAISS index. Idempotent."""
        if self._index is not None:
            return

        if self.index_type == IndexType.L2:
            self._index = faiss.IndexFlatL2(self.dimension)
        else:
            self._index = faiss.IndexFlatIP(self.dimension)

        logger.info(
            "Vector index initialized (type=%s, dimension=%d)",
            self.index_type.value, self.dimension
        )

    def _ensure_initialized(self) -> faiss.Index:
        if self._index is None:
            raise NotInitializedError("Vector index not initialized")
        return self._index

    def _prepare(self, vector: Sequence[float] | np.ndarray, context: str = "Vector") -> np.ndarray:
        array = np.asarray(vector, dtype=np.float32).reshape(-1)
        if array.shape[0] != self.dimension:
            raise DimensionMismatchError(self.dimension, array.shape[0], context)

        if self.normalize_vectors:
            norm = float(np.linalg.norm(array))
            if norm == 0.0:
                raise SearchError(f"{context} has zero norm and cannot be normalized")
            array = array / norm

        return np.ascontiguousarray(array.reshape(1, -1), dtype=np.float32)

    def _score(self, distance: float) -> float:
        if self.index_type == IndexType.L2:
            return math.exp(-distance / self.euclidean_scale)
        return float(distance)

    def add(self, intent: Intent, vector: Sequence[float] | np.ndarray) -> int:
        """Add one intent with its embedding.

        Args:
            intent: Intent to store
            vector: Embedding of the intent text

        Returns:
            Label assigned to the vector

        Raises:
            NotInitializedError: If initialize() was not called
            DimensionMismatchError: If the vector has the wrong dimension
            DuplicateIntentError: If the intent id is already stored
        """
        index = self._ensure_initialized()
        if intent.id in self._labels_by_id:
            raise DuplicateIntentError(intent.id)

        array = self._prepare(vector)
        label = index.ntotal
        index.add(array)
        self._intents[label] = intent
        self._labels_by_id[intent.id] = label

        logger.debug("Added intent %d as label %d", intent.id, label)
        return label

    def add_batch(self, items: Iterable[tuple[Intent, Sequence[float] | np.ndarray]]) -> list[int]:
        """Add many intents at once.

        Every item is validated before anything is added, so a failing batch
        leaves the index unchanged.

        Returns:
            Labels assigned in input order
        """
        index = self._ensure_initialized()
        items = list(items)
        if not items:
            return []

        seen: set[int] = set()
        rows = []
        for intent, vector in items:
            if intent.id in self._labels_by_id or intent.id in seen:
                raise DuplicateIntentError(intent.id)
            seen.add(intent.id)
            rows.append(self._prepare(vector))

        start = index.ntotal
        index.add(np.vstack(rows))

        labels = list(range(start, start + len(items)))
        for label, (intent, _) in zip(labels, items):
            self._intents[label] = intent
            self._labels_by_id[intent.id] = label

        logger.info("Added %d intents to vector index", len(items))
        return labels

    def search(
        self,
        query: Sequence[float] | np.ndarray,
        k: int,
        score_threshold: float | None = None,
    ) -> list[SearchResult]:
        """Find the k most similar intents.

        Args:
            query: Query embedding
            k: Maximum number of results
            score_threshold: Exclude results scoring below this value

        Returns:
            Results ordered by descending score, ties by ascending label
        """
        index = self._ensure_initialized()
        if k < 1:
            raise ValueError("k must be at least 1")

        total = index.ntotal
        if total == 0:
            return []

        array = self._prepare(query, "Query vector")

        # Fetch one extra hit so ties at the k-th position can be detected,
        # widening until the boundary is unambiguous.
        fetch = min(k + 1, total)
        while True:
            distances, labels = index.search(array, fetch)
            hits = [
                (self._score(float(distance)), int(label), float(distance))
                for distance, label in zip(distances[0], labels[0])
                if label >= 0
            ]
            hits.sort(key=lambda hit: (-hit[0], hit[1]))
            if fetch >= total or len(hits) <= k or hits[k - 1][0] != hits[-1][0]:
                break
            fetch = min(fetch * 2, total)

        results = []
        for score, label, distance in hits[:k]:
            if score_threshold is not None and score < score_threshold:
                continue
            results.append(
                SearchResult(intent=self._intents[label], score=score, distance=distance, label=label)
            )
        return results

    def find_best_match(
        self,
        query: Sequence[float] | np.ndarray,
        score_threshold: float | None = None,
    ) -> Intent | None:
        """Return the single best intent, or None."""
        results = self.search(query, 1, score_threshold)
        return results[0].intent if results else None

    def get_all_intents(self) -> list[Intent]:
        """All stored intents in label order."""
        return [self._intents[label] for label in sorted(self._intents)]

    def get_intent_by_id(self, intent_id: int) -> Intent | None:
        label = self._labels_by_id.get(intent_id)
        return self._intents[label] if label is not None else None

    def get_intents_by_category(self, category: str) -> list[Intent]:
        return [intent for intent in self.get_all_intents() if intent.category == category]

    def get_stats(self) -> dict[str, Any]:
        """Index statistics."""
        return {
            "initialized": self.is_initialized,
            "index_type": self.index_type.value,
            "dimension": self.dimension,
            "total_vectors": self.size,
            "normalize_vectors": self.normalize_vectors,
            "euclidean_scale": self.euclidean_scale,
        }

    def clear(self) -> None:
        """Remove every vector and intent."""
        if self._index is not None:
            self._index.reset()
        self._intents.clear()
        self._labels_by_id.clear()
        logger.info("Vector index cleared")

    def dispose(self) -> None:
        """Release the underlying index. Safe to call repeatedly."""
        if self._index is None:
            return
        self._index.reset()
        self._index = None
        self._intents.clear()
        self._labels_by_id.clear()
        logger.info("Vector index disposed")
