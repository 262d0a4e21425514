"""Unit tests for RetrievalEngine."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import pytest_asyncio

from intent_rag import (
    ActionDispatcher,
    CacheError,
    ConfigurationError,
    EmbeddingCache,
    EmbeddingProvider,
    InitializationError,
    IntentTemplate,
    NotInitializedError,
    QueryState,
    RAGConfig,
    RetrievalEngine,
    SupportedLanguage,
    TemplateCatalog,
    build_default_registry,
    create_engine,
)
from intent_rag.actions import InMemoryDeviceRepository
from intent_rag.exceptions import EmbeddingError
from intent_rag.mocks import HashingEmbeddingProvider


class StaticEmbeddingProvider(EmbeddingProvider):
    """Provider returning fixed vectors for known texts."""

    def __init__(self, vectors: dict[str, list[float]], model_path: str = "test/static"):
        self.vectors = vectors
        self._model_path = model_path
        self._initialized = False
        self.embed_calls = 0
        self.dispose_calls = 0

    @property
    def model_path(self) -> str:
        return self._model_path

    @property
    def dimension(self) -> int:
        return 3

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        self._initialized = True

    async def embed(self, text: str) -> list[float]:
        self.embed_calls += 1
        if text not in self.vectors:
            raise EmbeddingError(f"no vector for {text}")
        return self.vectors[text]

    async def dispose(self) -> None:
        self.dispose_calls += 1
        self._initialized = False


VECTORS = {
    "check points": [1.0, 0.0, 0.0],
    "help": [0.0, 1.0, 0.0],
    "kinda points": [0.6, 0.0, 0.8],
    "nothing here": [0.0, 0.0, 1.0],
    "什么东西": [0.0, 0.0, 1.0],
    "launch rocket": [0.0, 0.0, 1.0],
}


def small_catalog() -> TemplateCatalog:
    return TemplateCatalog([
        IntentTemplate(
            id="get_user_points", action="getUserPoints", category="user",
            description={"en": "Query points"}, templates={"en": ["check points"]},
        ),
        IntentTemplate(
            id="get_help", action="getHelp", category="utility",
            description={"en": "Help"}, templates={"en": ["help"]},
        ),
    ])


@pytest.fixture
def config():
    """Create a configuration without persistence."""
    return RAGConfig(model_path="test/static", enable_persistence=False)


@pytest.fixture
def provider():
    """Create a static embedding provider."""
    return StaticEmbeddingProvider(dict(VECTORS))


@pytest.fixture
def engine(config, provider):
    """Create an engine over the small catalog."""
    return RetrievalEngine(config, embedding_provider=provider, catalog=small_catalog())


class TestRetrievalEngineLifecycle:
    """Test cases for initialization and disposal."""

    @pytest.mark.asyncio
    async def test_initialize(self, engine, provider):
        """Test index population from fresh embeddings."""
        await engine.initialize()

        assert engine.is_initialized is True
        assert engine.index.size == 2
        assert provider.embed_calls == 2
        assert [i.text for i in engine.index.get_all_intents()] == ["check points", "help"]
        assert [i.id for i in engine.index.get_all_intents()] == [0, 1]

    @pytest.mark.asyncio
    async def test_initialize_twice(self, engine, provider, caplog):
        """Test that a repeated initialize() is a logged no-op."""
        await engine.initialize()
        with caplog.at_level(logging.WARNING):
            await engine.initialize()

        assert provider.embed_calls == 2
        assert "already initialized" in caplog.text

    @pytest.mark.asyncio
    async def test_initialize_dimension_mismatch(self, provider):
        """Test that a configured dimension must match the provider."""
        config = RAGConfig(model_path="test/static", enable_persistence=False, embedding_dimension=384)
        engine = RetrievalEngine(config, embedding_provider=provider, catalog=small_catalog())

        with pytest.raises(InitializationError, match="384"):
            await engine.initialize()
        assert engine.is_initialized is False
        assert provider.dispose_calls == 1

    @pytest.mark.asyncio
    async def test_initialize_embedding_failure(self, config):
        """Test that provider failures are wrapped and resources released."""
        provider = StaticEmbeddingProvider({})
        engine = RetrievalEngine(config, embedding_provider=provider, catalog=small_catalog())

        with pytest.raises(InitializationError, match="no vector for check points") as exc_info:
            await engine.initialize()
        assert isinstance(exc_info.value.__cause__, EmbeddingError)
        assert provider.dispose_calls == 1
        assert engine.index.is_initialized is False

    @pytest.mark.asyncio
    async def test_query_before_initialize(self, engine):
        """Test that querying requires initialization."""
        with pytest.raises(NotInitializedError):
            await engine.query("help")

    @pytest.mark.asyncio
    async def test_dispose(self, engine, provider):
        """Test disposal is idempotent and blocks queries."""
        await engine.initialize()
        await engine.dispose()
        await engine.dispose()

        assert engine.is_initialized is False
        assert provider.is_initialized is False
        assert engine.index.is_initialized is False
        with pytest.raises(NotInitializedError):
            await engine.query("help")

    @pytest.mark.asyncio
    async def test_dispose_without_initialize(self, engine):
        """Test disposal before initialization never raises."""
        await engine.dispose()
        assert engine.is_initialized is False

    @pytest.mark.asyncio
    async def test_dispose_swallows_provider_errors(self, engine, provider, caplog):
        """Test that disposal logs and continues on provider failure."""
        await engine.initialize()
        with patch.object(provider, "dispose", side_effect=RuntimeError("stuck")):
            with caplog.at_level(logging.ERROR):
                await engine.dispose()

        assert engine.index.is_initialized is False
        assert "stuck" in caplog.text

    @pytest.mark.asyncio
    async def test_reinitialize_after_dispose(self, engine):
        """Test that an engine can be initialized again."""
        await engine.initialize()
        await engine.dispose()
        await engine.initialize()

        assert engine.index.size == 2
        assert (await engine.query("help")).success is True

    @pytest.mark.asyncio
    async def test_context_manager(self, config, provider):
        """Test async with support."""
        async with RetrievalEngine(config, embedding_provider=provider, catalog=small_catalog()) as engine:
            assert engine.is_initialized is True
        assert engine.is_initialized is False

    @pytest.mark.asyncio
    async def test_create_engine(self, config, provider):
        """Test the factory."""
        engine = await create_engine(config, embedding_provider=provider, catalog=small_catalog())

        assert engine.is_initialized is True
        await engine.dispose()


class TestRetrievalEngineQuery:
    """Test cases for query resolution."""

    @pytest.mark.asyncio
    async def test_primary_match(self, engine):
        """Test a direct match dispatches the action."""
        await engine.initialize()

        result = await engine.query("  check points  ")

        assert result.success is True
        assert result.response == "您的积分是 1280 分"
        assert result.matched_intent.action == "getUserPoints"
        assert result.confidence == pytest.approx(1.0)
        assert result.suggestion is False
        assert result.execution_time_ms >= 0
        assert result.metadata["states"] == [
            QueryState.IDLE.value,
            QueryState.DETECT_LANGUAGE.value,
            QueryState.EMBED.value,
            QueryState.PRIMARY_SEARCH.value,
            QueryState.MATCHED.value,
            QueryState.RESPOND.value,
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_empty_input(self, engine, provider, text):
        """Test that empty input never embeds or searches."""
        await engine.initialize()
        provider.embed_calls = 0

        with patch.object(engine.index, "search", wraps=engine.index.search) as search:
            result = await engine.query(text)

        assert result.success is False
        assert result.response == "Please enter your question or command."
        assert provider.embed_calls == 0
        search.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_input_uses_last_language(self, engine):
        """Test the empty-input reply follows the previous query language."""
        await engine.initialize()
        await engine.query("什么东西")

        result = await engine.query("")

        assert result.response == "请输入您的问题或指令。"

    @pytest.mark.asyncio
    async def test_fuzzy_fallback(self, engine, provider):
        """Test the relaxed re-search reuses the query vector."""
        await engine.initialize()
        provider.embed_calls = 0

        with patch.object(engine.index, "search", wraps=engine.index.search) as search:
            result = await engine.query("kinda points")

        assert result.success is False
        assert result.suggestion is True
        assert result.matched_intent.text == "check points"
        assert result.confidence == pytest.approx(0.6, abs=1e-6)
        assert '"check points"(0.6000)' in result.response
        assert provider.embed_calls == 1
        assert search.call_count == 2
        primary, fuzzy = search.call_args_list
        assert primary.args[1:] == (3, 0.65)
        assert fuzzy.args[1:] == (1, 0.1)
        assert fuzzy.args[0] is primary.args[0]
        assert QueryState.FUZZY_MATCHED.value in result.metadata["states"]

    @pytest.mark.asyncio
    async def test_fuzzy_disabled(self, provider):
        """Test that disabling fuzzy matching skips the second search."""
        config = RAGConfig(model_path="test/static", enable_persistence=False, enable_fuzzy_matching=False)
        engine = RetrievalEngine(config, embedding_provider=provider, catalog=small_catalog())
        await engine.initialize()

        with patch.object(engine.index, "search", wraps=engine.index.search) as search:
            result = await engine.query("kinda points")

        assert result.success is False
        assert result.suggestion is False
        assert result.matched_intent is None
        assert result.response.startswith("Sorry, I did not understand")
        assert search.call_count == 1

    @pytest.mark.asyncio
    async def test_unmatched(self, engine):
        """Test the not-understood reply when nothing is close."""
        await engine.initialize()

        result = await engine.query("nothing here")

        assert result.success is False
        assert result.matched_intent is None
        assert result.confidence is None
        assert result.response.startswith("Sorry, I did not understand")
        assert result.metadata["states"][-2:] == [QueryState.UNMATCHED.value, QueryState.RESPOND.value]

    @pytest.mark.asyncio
    async def test_unmatched_is_localized(self, engine):
        """Test the reply language follows detection."""
        await engine.initialize()

        result = await engine.query("什么东西")

        assert result.language == SupportedLanguage.ZH
        assert result.response == '抱歉，我没有理解您的问题。请输入 "帮助" 查看可用功能。'
        assert engine.get_detected_language() == SupportedLanguage.ZH

    @pytest.mark.asyncio
    async def test_errors_become_results(self, engine):
        """Test that pipeline failures never escape query()."""
        await engine.initialize()

        result = await engine.query("unknown words")

        assert result.success is False
        assert result.response == "Error processing query: no vector for unknown words"
        assert result.metadata["error_stage"] == QueryState.EMBED.value

    @pytest.mark.asyncio
    async def test_add_template_requires_reinitialize(self, engine):
        """Test that catalog changes reach the index only on re-initialization."""
        await engine.initialize()
        engine.add_template(IntentTemplate(
            id="launch", action="launchRocket", category="fun",
            description={"en": "Launch"}, templates={"en": ["launch rocket"]},
        ))

        before = await engine.query("launch rocket")
        assert before.matched_intent is None
        assert engine.index.size == 2

        await engine.dispose()
        await engine.initialize()
        after = await engine.query("launch rocket")

        assert after.success is True
        assert after.matched_intent.action == "launchRocket"
        assert after.response == 'Action "launchRocket" is not implemented yet.'

    @pytest.mark.asyncio
    async def test_remove_template(self, engine):
        """Test catalog-only removal."""
        await engine.initialize()

        assert engine.remove_template("get_help") is True
        assert engine.remove_template("get_help") is False
        assert engine.index.size == 2

    @pytest.mark.asyncio
    async def test_set_preferred_language(self, engine):
        """Test overriding the reply language."""
        await engine.initialize()
        engine.set_preferred_language("de")

        result = await engine.query("")

        assert result.response == "Bitte geben Sie Ihre Frage oder Ihren Befehl ein."
        with pytest.raises(ValueError):
            engine.set_preferred_language("it")


class TestRetrievalEngineDefaultCatalog:
    """Test cases against the built-in catalog and demo actions."""

    @pytest.fixture
    def repository(self):
        return InMemoryDeviceRepository()

    @pytest_asyncio.fixture
    async def default_engine(self, config, repository):
        """Create an engine over the built-in catalog with hashing embeddings."""
        engine = RetrievalEngine(
            config,
            embedding_provider=HashingEmbeddingProvider(),
            dispatcher=ActionDispatcher(build_default_registry(repository)),
        )
        await engine.initialize()
        yield engine
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_check_my_points(self, default_engine):
        """Test a paraphrase resolves to the points action."""
        result = await default_engine.query("check my points")

        assert result.success is True
        assert result.matched_intent.action == "getUserPoints"
        assert result.confidence >= 0.65
        assert result.response == "您的积分是 1280 分"
        assert result.language == SupportedLanguage.EN

    @pytest.mark.asyncio
    async def test_add_device_without_name(self, default_engine, repository):
        """Test the prompt for a missing device name."""
        result = await default_engine.query("add device")

        assert result.matched_intent.action == "addDevice"
        assert result.response == 'Please specify a device name. For example: "add device iPhone-16"'
        assert len(repository.devices) == 4

    @pytest.mark.asyncio
    async def test_stats(self, default_engine):
        """Test engine statistics."""
        stats = default_engine.get_stats()

        assert stats["initialized"] is True
        assert stats["total_templates"] == 13
        assert stats["total_intents"] == stats["language"]["total_intents"]
        assert stats["index"]["index_type"] == "cosine"
        assert stats["config"]["top_k"] == 3

    @pytest.mark.asyncio
    async def test_catalog_views(self, default_engine):
        """Test category and multi-language views."""
        assert default_engine.get_categories() == ["user", "device", "utility"]
        assert len(default_engine.get_templates_by_category("device")) == 5

        stats = default_engine.get_multi_language_stats()
        assert stats["total_templates"] == 13
        assert set(stats["language_distribution"]) == {"zh", "en", "ja", "ko", "es", "fr", "de"}
        assert "detector" in stats


class TestRetrievalEnginePersistence:
    """Test cases for the embedding cache integration."""

    @pytest.fixture
    def persistent_config(self, tmp_path):
        return RAGConfig(model_path="test/static", data_directory=str(tmp_path / "data"))

    @pytest.mark.asyncio
    async def test_second_start_uses_cache(self, persistent_config):
        """Test that a valid cache skips embedding."""
        first_provider = StaticEmbeddingProvider(dict(VECTORS))
        first = RetrievalEngine(persistent_config, embedding_provider=first_provider, catalog=small_catalog())
        await first.initialize()
        await first.dispose()
        assert first_provider.embed_calls == 2

        second_provider = StaticEmbeddingProvider(dict(VECTORS))
        second = RetrievalEngine(persistent_config, embedding_provider=second_provider, catalog=small_catalog())
        await second.initialize()

        assert second_provider.embed_calls == 0
        assert second.index.size == 2
        assert (await second.query("help")).matched_intent.action == "getHelp"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("corrupt", [
        lambda payload: {**payload, "metadata": []},
        lambda payload: {**payload, "embeddings": list(reversed(payload["embeddings"]))},
    ], ids=["metadata-list", "reordered-embeddings"])
    async def test_corrupt_cache_recomputes(self, persistent_config, corrupt):
        """Test that a damaged cache is rebuilt instead of failing start-up."""
        await (await create_engine(
            persistent_config,
            embedding_provider=StaticEmbeddingProvider(dict(VECTORS)),
            catalog=small_catalog(),
        )).dispose()
        path = Path(persistent_config.data_directory) / "embeddings.json"
        payload = json.loads(path.read_text(encoding="utf-8"))
        path.write_text(json.dumps(corrupt(payload)), encoding="utf-8")

        provider = StaticEmbeddingProvider(dict(VECTORS))
        engine = RetrievalEngine(persistent_config, embedding_provider=provider, catalog=small_catalog())
        await engine.initialize()

        assert provider.embed_calls == 2
        assert (await engine.query("check points")).matched_intent.action == "getUserPoints"
        assert (await engine.query("help")).matched_intent.action == "getHelp"

    def test_unusable_data_directory(self, tmp_path, provider):
        """Test that a data directory that cannot be created is a configuration error."""
        blocker = tmp_path / "file"
        blocker.write_text("x")
        config = RAGConfig(model_path="test/static", data_directory=str(blocker / "data"))

        with pytest.raises(ConfigurationError, match="data_directory") as exc_info:
            RetrievalEngine(config, embedding_provider=provider, catalog=small_catalog())
        assert isinstance(exc_info.value.__cause__, CacheError)

    @pytest.mark.asyncio
    async def test_model_change_recomputes(self, persistent_config):
        """Test that a different model ignores the cache."""
        await (await create_engine(
            persistent_config,
            embedding_provider=StaticEmbeddingProvider(dict(VECTORS)),
            catalog=small_catalog(),
        )).dispose()

        provider = StaticEmbeddingProvider(dict(VECTORS), model_path="test/other")
        engine = RetrievalEngine(persistent_config, embedding_provider=provider, catalog=small_catalog())
        await engine.initialize()

        assert provider.embed_calls == 2

    @pytest.mark.asyncio
    async def test_catalog_change_recomputes(self, persistent_config):
        """Test that a cache built for another catalog is not reused."""
        await (await create_engine(
            persistent_config,
            embedding_provider=StaticEmbeddingProvider(dict(VECTORS)),
            catalog=small_catalog(),
        )).dispose()

        catalog = small_catalog()
        catalog.remove_template("get_help")
        provider = StaticEmbeddingProvider(dict(VECTORS))
        engine = RetrievalEngine(persistent_config, embedding_provider=provider, catalog=catalog)
        await engine.initialize()

        assert provider.embed_calls == 1
        assert engine.index.size == 1

    @pytest.mark.asyncio
    async def test_save_failure_is_not_fatal(self, persistent_config, provider, caplog):
        """Test that the engine starts even if the cache cannot be written."""
        engine = RetrievalEngine(persistent_config, embedding_provider=provider, catalog=small_catalog())

        with patch.object(EmbeddingCache, "_write_json", side_effect=OSError("read-only")):
            with caplog.at_level(logging.ERROR):
                await engine.initialize()

        assert engine.is_initialized is True
        assert "read-only" in caplog.text

    @pytest.mark.asyncio
    async def test_cache_info_and_clear(self, persistent_config, provider):
        """Test cache diagnostics through the engine."""
        engine = RetrievalEngine(persistent_config, embedding_provider=provider, catalog=small_catalog())
        await engine.initialize()

        info = await engine.get_cache_info()
        assert info["exists"] is True
        assert info["total_intents"] == 2

        await engine.clear_cache()
        assert (await engine.get_cache_info())["exists"] is False

    @pytest.mark.asyncio
    async def test_persistence_disabled(self, engine):
        """Test cache operations without persistence."""
        assert engine.cache is None
        assert await engine.get_cache_info() == {"message": "Persistence is disabled"}
        await engine.clear_cache()
