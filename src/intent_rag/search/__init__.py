"""Vector search for intent_rag."""

from intent_rag.models.types import IndexType
from intent_rag.search.index import DEFAULT_EUCLIDEAN_SCALE, VectorIndex
from intent_rag.search.models import SearchResult

__all__ = ["DEFAULT_EUCLIDEAN_SCALE", "IndexType", "SearchResult", "VectorIndex"]
