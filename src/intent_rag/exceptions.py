"""Custom exceptions for intent_rag."""


class IntentRAGError(Exception):
    """Base exception for all intent_rag exceptions."""


class ConfigurationError(IntentRAGError):
    """Raised when configuration is invalid."""


class InitializationError(IntentRAGError):
    """Raised when the engine or one of its providers fails to initialize."""


class CacheError(IntentRAGError):
    """Raised when embedding cache I/O fails."""


class SearchError(IntentRAGError):
    """Raised when vector index operations fail."""


class NotInitializedError(SearchError):
    """Raised when a component is used before initialize() was called."""


class DimensionMismatchError(SearchError):
    """Raised when a vector length differs from the index dimension."""

    def __init__(self, expected: int, actual: int, context: str = "Vector"):
        super().__init__(
            f"{context} dimension mismatch: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class DuplicateIntentError(SearchError):
    """Raised when an intent id is already present in the index."""

    def __init__(self, intent_id: int):
        super().__init__(f"Intent with ID {intent_id} already exists")
        self.intent_id = intent_id


class EmbeddingError(IntentRAGError):
    """Raised when an embedding cannot be computed."""


class QueryError(IntentRAGError):
    """Raised when a single query fails inside the retrieval pipeline."""

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage


class ActionError(IntentRAGError):
    """Raised when an action handler fails."""
