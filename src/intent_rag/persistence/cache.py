"""EmbeddingCache implementation for persisting computed embeddings."""

import asyncio
import hashlib
import json
import logging
import os
import time
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from intent_rag.catalog.models import IntentTemplate
from intent_rag.config import SEVEN_DAYS_MS
from intent_rag.exceptions import CacheError
from intent_rag.models.types import Intent
from intent_rag.persistence.models import (
    CACHE_VERSION,
    CachedEmbedding,
    CachedIntent,
    CacheMetadata,
    CacheStats,
    text_hash,
)

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDINGS_FILE = "embeddings.json"
DEFAULT_METADATA_FILE = "metadata.json"
DEFAULT_TEMPLATES_FILE = "templates.json"


# Malformed files surface as any of these while parsing.
_PARSE_ERRORS = (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError)


def _now_ms() -> int:
    return int(time.time() * 1000)


class EmbeddingCache:
    """Stores intent embeddings on disk and validates them on reload.

    A cache generation is two JSON files: a payload holding metadata, vectors
    and intents, and a standalone copy of the metadata. A generation is only
    reused when the model, the dimension, the age and the checksum all agree
    with the caller; anything else is treated as a miss and never repaired.
    """

    def __init__(
        self,
        data_directory: str | os.PathLike,
        max_cache_age_ms: int = SEVEN_DAYS_MS,
        embeddings_file: str = DEFAULT_EMBEDDINGS_FILE,
        metadata_file: str = DEFAULT_METADATA_FILE,
        templates_file: str = DEFAULT_TEMPLATES_FILE,
    ):
        """Initialize the cache and create its directory.

        Args:
            data_directory: Directory holding the cache files
            max_cache_age_ms: Maximum age of a reusable generation
            embeddings_file: Payload file name
            metadata_file: Standalone metadata file name
            templates_file: Default template backup file name

        Raises:
            CacheError: If the directory cannot be created
        """
        self.data_directory = Path(data_directory)
        self.max_cache_age_ms = max_cache_age_ms
        self.embeddings_path = self.data_directory / embeddings_file
        self.metadata_path = self.data_directory / metadata_file
        self.templates_file = templates_file

        try:
            self.data_directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(f"Cannot create cache directory {self.data_directory}: {e}") from e

    @staticmethod
    def compute_checksum(embeddings: Iterable[CachedEmbedding]) -> str:
        """Checksum over the identity of every stored embedding.

        Order independent: entries are sorted before hashing.
        """
        entries = sorted(f"{e.id}:{e.hash}:{e.timestamp}" for e in embeddings)
        return hashlib.sha256("|".join(entries).encode("utf-8")).hexdigest()

    def create_cached_embedding(
        self,
        embedding_id: str,
        text: str,
        vector: Sequence[float],
        model_path: str | None = None,
        dimension: int | None = None,
    ) -> CachedEmbedding:
        """Wrap a freshly computed vector for persistence.

        Args:
            embedding_id: Identifier of the embedded intent
            text: Embedded text
            vector: Embedding vector (copied)
            model_path: Model that produced the vector
            dimension: Vector dimension

        Returns:
            Cached embedding stamped with the current time
        """
        model_info = None
        if model_path is not None or dimension is not None:
            model_info = {"model_path": model_path, "dimension": dimension}
        return CachedEmbedding(
            id=str(embedding_id),
            text=text,
            vector=[float(v) for v in vector],
            hash=text_hash(text),
            timestamp=_now_ms(),
            model_info=model_info,
        )

    async def save(
        self,
        items: Sequence[CachedIntent],
        model_path: str,
        dimension: int,
    ) -> CacheMetadata:
        """Persist a cache generation.

        Args:
            items: Intents with their embeddings
            model_path: Model that produced the vectors
            dimension: Vector dimension

        Returns:
            Metadata written for this generation

        Raises:
            CacheError: If writing fails
        """
        embeddings = [item.embedding for item in items]
        now = _now_ms()
        metadata = CacheMetadata(
            model_path=model_path,
            embedding_dimension=dimension,
            total_intents=len(items),
            checksum=self.compute_checksum(embeddings),
            created_at=now,
            updated_at=now,
        )
        payload = {
            "metadata": metadata.to_dict(),
            "embeddings": [e.to_dict() for e in embeddings],
            "intents": [item.intent.to_dict() for item in items],
        }

        try:
            await asyncio.to_thread(self._write_json, self.embeddings_path, payload)
            await asyncio.to_thread(self._write_json, self.metadata_path, metadata.to_dict())
        except (OSError, TypeError, ValueError) as e:
            raise CacheError(f"Failed to save embedding cache: {e}") from e

        logger.info("Saved %d cached embeddings to %s", len(items), self.embeddings_path)
        return metadata

    async def load(self, model_path: str, dimension: int) -> list[CachedIntent] | None:
        """Load a cache generation if it is valid for the given model.

        Args:
            model_path: Currently configured model
            dimension: Currently configured vector dimension

        Returns:
            Cached intents in stored order, or None on any validation failure
        """
        return await asyncio.to_thread(self._load_sync, model_path, dimension)

    def _load_sync(self, model_path: str, dimension: int) -> list[CachedIntent] | None:
        if not self.embeddings_path.exists():
            logger.info("No embedding cache found at %s", self.embeddings_path)
            return None

        try:
            raw_metadata, metadata, embeddings, intents = self._parse_payload(
                self._read_json(self.embeddings_path)
            )
        except _PARSE_ERRORS as e:
            logger.warning("Embedding cache is unreadable: %s", e)
            return None

        if metadata.model_path != model_path:
            logger.warning(
                "Embedding cache model mismatch: cached %s, current %s",
                metadata.model_path, model_path
            )
            return None

        if metadata.embedding_dimension != dimension:
            logger.warning(
                "Embedding cache dimension mismatch: cached %d, current %d",
                metadata.embedding_dimension, dimension
            )
            return None

        age = _now_ms() - metadata.updated_at
        if age > self.max_cache_age_ms:
            logger.info("Embedding cache expired (age %d ms)", age)
            return None

        if self.compute_checksum(embeddings) != metadata.checksum:
            logger.warning("Embedding cache checksum mismatch")
            return None

        try:
            standalone = self._read_json(self.metadata_path)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Embedding cache metadata file is unreadable: %s", e)
            return None

        if standalone != raw_metadata:
            logger.warning("Embedding cache metadata files diverge")
            return None

        if len(embeddings) != metadata.total_intents or len(intents) != metadata.total_intents:
            logger.warning(
                "Embedding cache count mismatch: expected %d, got %d embeddings and %d intents",
                metadata.total_intents, len(embeddings), len(intents)
            )
            return None

        if any(len(e.vector) != dimension for e in embeddings):
            logger.warning("Embedding cache contains vectors of the wrong dimension")
            return None

        for intent, embedding in zip(intents, embeddings):
            if embedding.text != intent.text or embedding.hash != text_hash(embedding.text):
                logger.warning(
                    "Embedding cache entry %s does not belong to intent %d", embedding.id, intent.id
                )
                return None

        logger.info("Loaded %d cached embeddings from %s", len(embeddings), self.embeddings_path)
        return [
            CachedIntent(intent=intent, embedding=embedding)
            for intent, embedding in zip(intents, embeddings)
        ]

    async def clear_cache(self) -> None:
        """Delete every cache artifact. Safe to call repeatedly."""
        paths = [self.embeddings_path, self.metadata_path, self.data_directory / self.templates_file]
        try:
            await asyncio.to_thread(self._unlink_all, paths)
        except OSError as e:
            raise CacheError(f"Failed to clear embedding cache: {e}") from e
        logger.info("Embedding cache cleared")

    async def validate_cache(self) -> dict[str, Any]:
        """Inspect the cache without loading it into an index.

        Returns:
            Dictionary with ``is_valid`` and a list of ``issues``
        """
        return await asyncio.to_thread(self._validate_sync)

    def _validate_sync(self) -> dict[str, Any]:
        issues: list[str] = []

        if not self.embeddings_path.exists():
            issues.append("Embeddings file does not exist")
        if not self.metadata_path.exists():
            issues.append("Metadata file does not exist")
        if issues:
            return {"is_valid": False, "issues": issues}

        try:
            raw_metadata, metadata, embeddings, intents = self._parse_payload(
                self._read_json(self.embeddings_path)
            )
            standalone = self._read_json(self.metadata_path)
        except _PARSE_ERRORS as e:
            return {"is_valid": False, "issues": [f"Cache file is unreadable: {e}"]}

        if standalone != raw_metadata:
            issues.append("Metadata file does not match embeddings file")
        if metadata.version != CACHE_VERSION:
            issues.append(f"Unsupported cache version: {metadata.version}")
        if self.compute_checksum(embeddings) != metadata.checksum:
            issues.append("Checksum mismatch")
        if len(embeddings) != metadata.total_intents:
            issues.append(
                f"Embedding count mismatch: expected {metadata.total_intents}, got {len(embeddings)}"
            )
        if len(intents) != metadata.total_intents:
            issues.append(
                f"Intent count mismatch: expected {metadata.total_intents}, got {len(intents)}"
            )
        if any(len(e.vector) != metadata.embedding_dimension for e in embeddings):
            issues.append("Vector dimension mismatch")
        if any(
            e.text != i.text or e.hash != text_hash(e.text) for i, e in zip(intents, embeddings)
        ):
            issues.append("Embeddings do not match intents")
        if _now_ms() - metadata.updated_at > self.max_cache_age_ms:
            issues.append("Cache expired")

        return {"is_valid": not issues, "issues": issues}

    async def get_cache_stats(self) -> CacheStats:
        """Summarize the cache directory."""
        return await asyncio.to_thread(self._stats_sync)

    def _stats_sync(self) -> CacheStats:
        files = [p for p in (self.embeddings_path, self.metadata_path) if p.exists()]
        stats = CacheStats(
            exists=self.embeddings_path.exists(),
            size_bytes=sum(p.stat().st_size for p in files),
            files=[p.name for p in files],
        )
        if not self.metadata_path.exists():
            return stats

        try:
            raw_metadata = self._read_json(self.metadata_path)
            if not isinstance(raw_metadata, dict):
                raise TypeError("metadata must be an object")
            metadata = CacheMetadata.from_dict(raw_metadata)
        except _PARSE_ERRORS as e:
            logger.warning("Cannot read cache metadata: %s", e)
            return stats

        stats.total_intents = metadata.total_intents
        stats.model_path = metadata.model_path
        stats.embedding_dimension = metadata.embedding_dimension
        stats.age_ms = _now_ms() - metadata.updated_at
        return stats

    async def save_templates(
        self,
        templates: Sequence[IntentTemplate],
        filename: str | None = None,
    ) -> Path:
        """Write a backup of the template catalog.

        Raises:
            CacheError: If writing fails
        """
        path = self.data_directory / (filename or self.templates_file)
        data = {
            "version": CACHE_VERSION,
            "timestamp": _now_ms(),
            "templates": [t.to_dict() for t in templates],
        }
        try:
            await asyncio.to_thread(self._write_json, path, data)
        except (OSError, TypeError, ValueError) as e:
            raise CacheError(f"Failed to save templates: {e}") from e
        logger.info("Saved %d templates to %s", len(templates), path)
        return path

    async def load_templates(self, filename: str | None = None) -> list[IntentTemplate] | None:
        """Read a template backup, or None if absent or unreadable."""
        path = self.data_directory / (filename or self.templates_file)
        if not path.exists():
            return None
        try:
            data = await asyncio.to_thread(self._read_json, path)
            return [IntentTemplate.from_dict(t) for t in data["templates"]]
        except _PARSE_ERRORS as e:
            logger.warning("Failed to load templates from %s: %s", path, e)
            return None

    @staticmethod
    def _parse_payload(
        payload: Any,
    ) -> tuple[dict[str, Any], CacheMetadata, list[CachedEmbedding], list[Intent]]:
        """Parse a payload file, rejecting anything that is not the expected shape.

        Raises:
            KeyError, TypeError, ValueError: If the payload is malformed
        """
        if not isinstance(payload, dict):
            raise TypeError("cache payload must be an object")

        raw_metadata = payload["metadata"]
        raw_embeddings = payload["embeddings"]
        raw_intents = payload["intents"]
        if not isinstance(raw_metadata, dict):
            raise TypeError("metadata must be an object")
        for name, entries in (("embeddings", raw_embeddings), ("intents", raw_intents)):
            if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
                raise TypeError(f"{name} must be a list of objects")

        return (
            raw_metadata,
            CacheMetadata.from_dict(raw_metadata),
            [CachedEmbedding.from_dict(e) for e in raw_embeddings],
            [Intent.from_dict(i) for i in raw_intents],
        )

    @staticmethod
    def _read_json(path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _write_json(path: Path, data: Any) -> None:
        tmp_path = path.with_name(path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)

    @staticmethod
    def _unlink_all(paths: Iterable[Path]) -> None:
        for path in paths:
            path.unlink(missing_ok=True)
