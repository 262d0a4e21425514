"""Fixtures for tests against a real sentence-transformers model."""
import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from intent_rag import RAGConfig, RetrievalEngine


def load_test_env():
    """Load .env.test file if it exists"""
    env_file = Path(__file__).parent.parent.parent / ".env.test"
    if env_file.exists():
        with open(env_file) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    os.environ[key] = value


# Load test environment variables at module import
load_test_env()


@pytest.fixture(scope="session")
def model_path() -> str:
    """Model to load; the suite is skipped unless one is configured."""
    path = os.getenv("INTENT_RAG_MODEL_PATH")
    if not path:
        pytest.skip("INTENT_RAG_MODEL_PATH is not set")
    pytest.importorskip("sentence_transformers")
    return path


def make_config(model_path: str, data_directory: Path) -> RAGConfig:
    """Build the configuration for a test engine."""
    return RAGConfig(
        model_path=model_path,
        data_directory=str(data_directory),
        device=os.getenv("INTENT_RAG_DEVICE", "cpu"),
    )


@pytest_asyncio.fixture
async def engine(model_path: str, tmp_path: Path) -> AsyncGenerator[RetrievalEngine, None]:
    """An initialized engine backed by the configured model."""
    async with RetrievalEngine(make_config(model_path, tmp_path / "data")) as engine:
        yield engine


@pytest.fixture
def config_factory(model_path: str):
    """Build configurations for additional engines."""
    def factory(data_directory: Path) -> RAGConfig:
        return make_config(model_path, data_directory)
    return factory
