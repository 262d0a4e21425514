"""RetrievalEngine: maps utterances to catalog actions by vector similarity."""

import asyncio
import logging
import time
from typing import Any

from intent_rag.actions import ActionDispatcher, InMemoryDeviceRepository, build_default_registry
from intent_rag.catalog import IntentTemplate, TemplateCatalog
from intent_rag.config import RAGConfig
from intent_rag.embedding import EmbeddingProvider, SentenceTransformerProvider
from intent_rag.exceptions import (
    CacheError,
    ConfigurationError,
    InitializationError,
    NotInitializedError,
    QueryError,
)
from intent_rag.language import LanguageDetector, get_message
from intent_rag.models.types import Intent, QueryResult, QueryState, SupportedLanguage
from intent_rag.persistence import CachedIntent, EmbeddingCache
from intent_rag.search import SearchResult, VectorIndex

logger = logging.getLogger(__name__)


class RetrievalEngine:
    """Multilingual intent retrieval over a template catalog.

    Collaborators are passed in explicitly; anything omitted is built from
    the configuration. The engine owns the embedding provider and the vector
    index and releases both in dispose().
    """

    def __init__(
        self,
        config: RAGConfig | None = None,
        embedding_provider: EmbeddingProvider | None = None,
        catalog: TemplateCatalog | None = None,
        detector: LanguageDetector | None = None,
        dispatcher: ActionDispatcher | None = None,
        cache: EmbeddingCache | None = None,
        index: VectorIndex | None = None,
    ):
        """Initialize RetrievalEngine.

        Args:
            config: Engine configuration (uses defaults if None)
            embedding_provider: Embedding model (sentence-transformers if None)
            catalog: Template catalog (built-in templates if None)
            detector: Language detector
            dispatcher: Action dispatcher (demo handlers if None)
            cache: Embedding cache (built when persistence is enabled)
            index: Vector index (built on initialize() if None)

        Raises:
            ConfigurationError: If persistence is enabled and the data
                directory cannot be created
        """
        self.config = config or RAGConfig()

        if embedding_provider is None:
            embedding_provider = SentenceTransformerProvider(self.config.model_path, self.config.device)
        self.embedding_provider = embedding_provider

        self.catalog = catalog if catalog is not None else TemplateCatalog()
        self.detector = detector if detector is not None else LanguageDetector(
            cache_size=self.config.language_cache_size,
            default_language=SupportedLanguage(self.config.default_language),
        )

        if dispatcher is None:
            dispatcher = ActionDispatcher(build_default_registry(InMemoryDeviceRepository()))
        self.dispatcher = dispatcher

        if cache is None and self.config.enable_persistence:
            try:
                cache = EmbeddingCache(self.config.data_directory, self.config.max_cache_age_ms)
            except CacheError as e:
                raise ConfigurationError(f"Unusable data_directory: {e}") from e
        self.cache = cache

        self._index = index
        self._is_initialized = False
        self._detected_language = SupportedLanguage(self.config.default_language)

    @property
    def index(self) -> VectorIndex | None:
        """The vector index (None before initialize() unless injected)."""
        return self._index

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def __aenter__(self) -> "RetrievalEngine":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.dispose()

    async def initialize(self) -> None:
        """Load the model, then fill the index from cache or fresh embeddings.

        Raises:
            InitializationError: If any step fails; partially acquired
                resources are released first
        """
        if self._is_initialized:
            logger.warning("Engine already initialized")
            return

        logger.info("Initializing RetrievalEngine")
        start = time.perf_counter()

        try:
            await self.embedding_provider.initialize()
            dimension = self.embedding_provider.dimension

            expected = self.config.embedding_dimension
            if expected is not None and expected != dimension:
                raise InitializationError(
                    f"Configured embedding dimension {expected} does not match "
                    f"model dimension {dimension}"
                )

            if self._index is None:
                self._index = VectorIndex(
                    dimension,
                    index_type=self.config.index_type,
                    euclidean_scale=self.config.euclidean_scale,
                )
            elif self._index.dimension != dimension:
                raise InitializationError(
                    f"Vector index dimension {self._index.dimension} does not match "
                    f"model dimension {dimension}"
                )

            self._index.initialize()
            self._index.clear()

            pairs = await self._load_or_compute_embeddings(dimension)
            self._index.add_batch(pairs)
        except InitializationError:
            await self._release()
            raise
        except Exception as e:
            await self._release()
            raise InitializationError(f"Failed to initialize engine: {e}") from e

        self._is_initialized = True
        logger.info(
            "RetrievalEngine initialized with %d intents in %.1f ms",
            self._index.size, (time.perf_counter() - start) * 1000
        )

    async def _load_or_compute_embeddings(self, dimension: int) -> list[tuple[Intent, list[float]]]:
        model_path = self.embedding_provider.model_path
        flattened = self.catalog.get_all_flattened()

        if self.cache is not None:
            cached = await self.cache.load(model_path, dimension)
            if cached is not None:
                if [item.intent.text for item in cached] == [f.text for f in flattened]:
                    logger.info("Using %d cached embeddings", len(cached))
                    return [(item.intent, item.embedding.vector) for item in cached]
                logger.warning("Cached intents do not match the catalog; recomputing")

        logger.info("Computing embeddings for %d intents", len(flattened))
        pairs: list[tuple[Intent, list[float]]] = []
        items: list[CachedIntent] = []
        for intent_id, flat in enumerate(flattened):
            vector = await self.embedding_provider.embed(flat.text)
            intent = flat.to_intent(intent_id)
            pairs.append((intent, vector))
            if self.cache is not None:
                items.append(
                    CachedIntent(
                        intent=intent,
                        embedding=self.cache.create_cached_embedding(
                            flat.id, flat.text, vector, model_path, dimension
                        ),
                    )
                )

        if self.cache is not None:
            try:
                await self.cache.save(items, model_path, dimension)
            except CacheError as e:
                logger.error("Failed to save embedding cache: %s", e)

        return pairs

    async def query(self, text: str) -> QueryResult:
        """Resolve an utterance to an action and run it.

        Every outcome, including internal failures, is reported through the
        returned QueryResult.

        Args:
            text: User input

        Returns:
            Query result

        Raises:
            NotInitializedError: If initialize() has not completed
        """
        if not self._is_initialized or self._index is None:
            raise NotInitializedError("Engine not initialized. Call initialize() first.")

        start = time.perf_counter()
        states = [QueryState.IDLE]
        trimmed = (text or "").strip()

        if not trimmed:
            states.append(QueryState.RESPOND)
            return self._result(
                start, states,
                success=False,
                response=get_message("empty_input", self._detected_language),
            )

        language = self._detected_language
        try:
            states.append(QueryState.DETECT_LANGUAGE)
            detection = self.detector.detect(trimmed)
            language = self._detected_language = detection.language
            logger.debug(
                "Detected language: %s (confidence: %d%%)",
                language.value, round(detection.confidence * 100)
            )

            states.append(QueryState.EMBED)
            vector = await self.embedding_provider.embed(trimmed)

            states.append(QueryState.PRIMARY_SEARCH)
            results = await self._search(vector, self.config.top_k, self.config.similarity_threshold)

            if results:
                states.append(QueryState.MATCHED)
                best = results[0]
                logger.debug(
                    "Found %d matches, best match: %s (%.4f)",
                    len(results), best.intent.text, best.score
                )
                response = await self.dispatcher.dispatch(best.intent, trimmed, language)
                states.append(QueryState.RESPOND)
                return self._result(
                    start, states,
                    success=True,
                    response=response,
                    matched_intent=best.intent,
                    confidence=best.score,
                    language=language,
                )

            states.append(QueryState.NO_MATCH)
            if self.config.enable_fuzzy_matching:
                states.append(QueryState.FUZZY_SEARCH)
                fuzzy = await self._search(vector, 1, self.config.fuzzy_threshold)
                if fuzzy:
                    states.append(QueryState.FUZZY_MATCHED)
                    candidate = fuzzy[0]
                    states.append(QueryState.RESPOND)
                    return self._result(
                        start, states,
                        success=False,
                        response=get_message(
                            "fuzzy_suggestion", language,
                            text=candidate.intent.text, score=candidate.score
                        ),
                        matched_intent=candidate.intent,
                        confidence=candidate.score,
                        language=language,
                        suggestion=True,
                    )

            states.append(QueryState.UNMATCHED)
            states.append(QueryState.RESPOND)
            return self._result(
                start, states,
                success=False,
                response=get_message("not_understood", language),
                language=language,
            )

        except Exception as e:
            error = e if isinstance(e, QueryError) else QueryError(str(e), stage=states[-1].value)
            logger.error("Error processing query at %s: %s", error.stage, e)
            states.append(QueryState.RESPOND)
            return self._result(
                start, states,
                success=False,
                response=get_message("query_error", language, error=str(e)),
                language=language,
                error=error,
            )

    async def _search(self, vector: list[float], k: int, threshold: float) -> list[SearchResult]:
        return await asyncio.to_thread(self._index.search, vector, k, threshold)

    def _result(
        self,
        start: float,
        states: list[QueryState],
        *,
        success: bool,
        response: str,
        matched_intent: Intent | None = None,
        confidence: float | None = None,
        language: SupportedLanguage | None = None,
        suggestion: bool = False,
        error: QueryError | None = None,
    ) -> QueryResult:
        metadata: dict[str, Any] = {"states": [state.value for state in states]}
        if error is not None:
            metadata["error"] = str(error)
            metadata["error_stage"] = error.stage
        return QueryResult(
            success=success,
            response=response,
            matched_intent=matched_intent,
            confidence=confidence,
            execution_time_ms=(time.perf_counter() - start) * 1000,
            language=language or self._detected_language,
            suggestion=suggestion,
            metadata=metadata,
        )

    def add_template(self, template: IntentTemplate) -> None:
        """Add or replace a catalog template.

        The live index is not updated; call initialize() again after
        dispose() to make the new phrases matchable.
        """
        self.catalog.add_template(template)
        logger.info("Added intent template %s (reinitialize to index it)", template.id)

    def remove_template(self, template_id: str) -> bool:
        """Remove a catalog template. The live index is not updated."""
        return self.catalog.remove_template(template_id)

    async def _release(self) -> None:
        try:
            await self.embedding_provider.dispose()
        except Exception as e:
            logger.error("Error disposing embedding provider: %s", e)

        if self._index is not None:
            try:
                self._index.dispose()
            except Exception as e:
                logger.error("Error disposing vector index: %s", e)

    async def dispose(self) -> None:
        """Release the provider and the index. Never raises."""
        await self._release()
        self.detector.clear_cache()
        if self._is_initialized:
            logger.info("RetrievalEngine disposed")
        self._is_initialized = False

    def get_stats(self) -> dict[str, Any]:
        """Engine statistics."""
        index_stats = self._index.get_stats() if self._index is not None else None
        return {
            "initialized": self._is_initialized,
            "total_intents": self._index.size if self._index is not None else 0,
            "total_templates": len(self.catalog),
            "index": index_stats,
            "language": {
                **self.catalog.get_stats(),
                "detection_cache_size": self.detector.cache_len,
            },
            "config": self.config.to_dict(),
        }

    async def clear_cache(self) -> None:
        """Delete persisted embeddings; the next initialize() recomputes them."""
        if self.cache is None:
            logger.info("Persistence is disabled, no cache to clear")
            return
        await self.cache.clear_cache()

    async def get_cache_info(self) -> dict[str, Any]:
        """Cache statistics, or a note when persistence is disabled."""
        if self.cache is None:
            return {"message": "Persistence is disabled"}
        stats = await self.cache.get_cache_stats()
        return stats.to_dict()

    def get_detected_language(self) -> SupportedLanguage:
        """Language of the most recent non-empty query."""
        return self._detected_language

    def set_preferred_language(self, language: str | SupportedLanguage) -> None:
        """Set the language used until the next detection.

        Raises:
            ValueError: If the language is not supported
        """
        self._detected_language = SupportedLanguage(language)
        logger.info("Preferred language set to: %s", self._detected_language.value)

    def get_categories(self) -> list[str]:
        return self.catalog.get_categories()

    def get_templates_by_category(self, category: str) -> list[IntentTemplate]:
        return self.catalog.get_templates_by_category(category)

    def get_multi_language_stats(self) -> dict[str, Any]:
        return {
            **self.catalog.get_stats(),
            "detector": self.detector.get_stats(),
        }


async def create_engine(config: RAGConfig | None = None, **kwargs: Any) -> RetrievalEngine:
    """Create and initialize a RetrievalEngine.

    Args:
        config: Engine configuration
        **kwargs: Collaborators passed to RetrievalEngine

    Returns:
        Initialized engine
    """
    engine = RetrievalEngine(config, **kwargs)
    await engine.initialize()
    return engine
