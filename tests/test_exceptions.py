"""Tests for custom exceptions."""

import pytest

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


class TestExceptions:
    """Test cases for the exception hierarchy."""

    @pytest.mark.parametrize("exc_class", [
        ConfigurationError,
        InitializationError,
        CacheError,
        SearchError,
        NotInitializedError,
        EmbeddingError,
        QueryError,
        ActionError,
    ])
    def test_base_inheritance(self, exc_class):
        """Test that every exception derives from IntentRAGError."""
        error = exc_class("boom")
        assert isinstance(error, IntentRAGError)
        assert str(error) == "boom"

    def test_search_errors(self):
        """Test that index errors share SearchError."""
        assert issubclass(NotInitializedError, SearchError)
        assert issubclass(DimensionMismatchError, SearchError)
        assert issubclass(DuplicateIntentError, SearchError)

    def test_dimension_mismatch_error(self):
        """Test DimensionMismatchError attributes and message."""
        error = DimensionMismatchError(384, 768)

        assert error.expected == 384
        assert error.actual == 768
        assert str(error) == "Vector dimension mismatch: expected 384, got 768"

    def test_dimension_mismatch_error_context(self):
        """Test DimensionMismatchError with a custom context."""
        error = DimensionMismatchError(3, 2, "Query vector")
        assert str(error) == "Query vector dimension mismatch: expected 3, got 2"

    def test_duplicate_intent_error(self):
        """Test DuplicateIntentError attributes and message."""
        error = DuplicateIntentError(7)

        assert error.intent_id == 7
        assert str(error) == "Intent with ID 7 already exists"

    def test_query_error_stage(self):
        """Test QueryError carries the failing stage."""
        error = QueryError("embedding failed", stage="embed")

        assert error.stage == "embed"
        assert QueryError("no stage").stage is None

    def test_exception_chaining(self):
        """Test wrapping with raise ... from."""
        original = OSError("disk full")
        try:
            try:
                raise original
            except OSError as e:
                raise CacheError("Failed to save embedding cache") from e
        except CacheError as wrapped:
            assert wrapped.__cause__ is original
