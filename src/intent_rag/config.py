"""Configuration management for intent_rag."""

import os
from dataclasses import dataclass, field

from .exceptions import ConfigurationError
from .models.types import IndexType, SupportedLanguage

SEVEN_DAYS_MS = 7 * 24 * 60 * 60 * 1000


def _env_optional_int(name: str) -> int | None:
    value = os.getenv(name)
    return int(value) if value else None


@dataclass
class RAGConfig:
    """Configuration for the retrieval engine."""

    # Embedding model
    model_path: str = field(
        default_factory=lambda: os.getenv(
            "INTENT_RAG_MODEL_PATH",
            "sentence-transformers/paraphrase-multilingual-MiniLM-L12-v2"
        )
    )
    embedding_dimension: int | None = field(
        default_factory=lambda: _env_optional_int("INTENT_RAG_EMBEDDING_DIMENSION")
    )
    device: str | None = field(default_factory=lambda: os.getenv("INTENT_RAG_DEVICE"))

    # Vector index
    index_type: IndexType = field(
        default_factory=lambda: os.getenv("INTENT_RAG_INDEX_TYPE", "cosine")
    )
    euclidean_scale: float = field(
        default_factory=lambda: float(os.getenv("INTENT_RAG_EUCLIDEAN_SCALE", "1000.0"))
    )

    # Thresholds (scores live on different scales per metric)
    cosine_similarity_threshold: float = field(
        default_factory=lambda: float(os.getenv("INTENT_RAG_COSINE_THRESHOLD", "0.65"))
    )
    euclidean_similarity_threshold: float = field(
        default_factory=lambda: float(os.getenv("INTENT_RAG_EUCLIDEAN_THRESHOLD", "0.3"))
    )
    cosine_fuzzy_threshold: float = field(
        default_factory=lambda: float(os.getenv("INTENT_RAG_COSINE_FUZZY_THRESHOLD", "0.1"))
    )
    euclidean_fuzzy_threshold: float = field(
        default_factory=lambda: float(os.getenv("INTENT_RAG_EUCLIDEAN_FUZZY_THRESHOLD", "0.05"))
    )
    top_k: int = field(default_factory=lambda: int(os.getenv("INTENT_RAG_TOP_K", "3")))
    enable_fuzzy_matching: bool = field(
        default_factory=lambda: os.getenv("INTENT_RAG_ENABLE_FUZZY", "true").lower() == "true"
    )

    # Persistence
    enable_persistence: bool = field(
        default_factory=lambda: os.getenv("INTENT_RAG_ENABLE_PERSISTENCE", "true").lower() == "true"
    )
    data_directory: str = field(
        default_factory=lambda: os.getenv("INTENT_RAG_DATA_DIR", "./data")
    )
    max_cache_age_ms: int = field(
        default_factory=lambda: int(os.getenv("INTENT_RAG_MAX_CACHE_AGE_MS", str(SEVEN_DAYS_MS)))
    )

    # Language
    language_cache_size: int = field(
        default_factory=lambda: int(os.getenv("INTENT_RAG_LANGUAGE_CACHE_SIZE", "1024"))
    )
    default_language: str = field(
        default_factory=lambda: os.getenv("INTENT_RAG_DEFAULT_LANGUAGE", "en")
    )
    preferred_languages: list[str] = field(default_factory=lambda: ["zh", "en"])

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.index_type, str):
            try:
                self.index_type = IndexType(self.index_type.lower())
            except ValueError as e:
                raise ConfigurationError(f"Unsupported index_type: {self.index_type}") from e
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not self.model_path:
            raise ConfigurationError("model_path cannot be empty")

        if self.embedding_dimension is not None and self.embedding_dimension < 1:
            raise ConfigurationError("embedding_dimension must be at least 1")

        if self.euclidean_scale <= 0:
            raise ConfigurationError("euclidean_scale must be positive")

        if not 0.0 <= self.euclidean_similarity_threshold <= 1.0:
            raise ConfigurationError("euclidean_similarity_threshold must be between 0.0 and 1.0")

        if not 0.0 <= self.euclidean_fuzzy_threshold <= 1.0:
            raise ConfigurationError("euclidean_fuzzy_threshold must be between 0.0 and 1.0")

        if not -1.0 <= self.cosine_similarity_threshold <= 1.0:
            raise ConfigurationError("cosine_similarity_threshold must be between -1.0 and 1.0")

        if not -1.0 <= self.cosine_fuzzy_threshold <= 1.0:
            raise ConfigurationError("cosine_fuzzy_threshold must be between -1.0 and 1.0")

        if self.top_k < 1:
            raise ConfigurationError("top_k must be at least 1")

        if self.max_cache_age_ms < 0:
            raise ConfigurationError("max_cache_age_ms must be non-negative")

        if self.language_cache_size < 0:
            raise ConfigurationError("language_cache_size must be non-negative")

        if not self.data_directory:
            raise ConfigurationError("data_directory cannot be empty")

        supported = {lang.value for lang in SupportedLanguage}
        if self.default_language not in supported:
            raise ConfigurationError(f"Unsupported default_language: {self.default_language}")

        unknown = [lang for lang in self.preferred_languages if lang not in supported]
        if unknown:
            raise ConfigurationError(f"Unsupported preferred_languages: {', '.join(unknown)}")

    @property
    def similarity_threshold(self) -> float:
        """Primary match threshold for the configured metric."""
        if self.index_type == IndexType.L2:
            return self.euclidean_similarity_threshold
        return self.cosine_similarity_threshold

    @property
    def fuzzy_threshold(self) -> float:
        """Relaxed fallback threshold for the configured metric."""
        if self.index_type == IndexType.L2:
            return self.euclidean_fuzzy_threshold
        return self.cosine_fuzzy_threshold

    def to_dict(self) -> dict:
        """Return configuration as a plain dictionary."""
        return {
            "model_path": self.model_path,
            "embedding_dimension": self.embedding_dimension,
            "device": self.device,
            "index_type": self.index_type.value,
            "euclidean_scale": self.euclidean_scale,
            "similarity_threshold": self.similarity_threshold,
            "fuzzy_threshold": self.fuzzy_threshold,
            "top_k": self.top_k,
            "enable_fuzzy_matching": self.enable_fuzzy_matching,
            "enable_persistence": self.enable_persistence,
            "data_directory": self.data_directory,
            "max_cache_age_ms": self.max_cache_age_ms,
            "language_cache_size": self.language_cache_size,
            "default_language": self.default_language,
            "preferred_languages": list(self.preferred_languages),
        }
