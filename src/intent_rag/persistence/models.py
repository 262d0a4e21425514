"""Models for the on-disk embedding cache."""

import hashlib
from dataclasses import dataclass, field
from typing import Any

from intent_rag.models.types import Intent

CACHE_VERSION = "1.0.0"


def text_hash(text: str) -> str:
    """SHA-256 hex digest of a text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass
class CachedEmbedding:
    """A stored vector plus the provenance needed to validate it."""
    id: str
    text: str
    vector: list[float]
    hash: str
    timestamp: int
    model_info: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "embedding": list(self.vector),
            "hash": self.hash,
            "timestamp": self.timestamp,
        }
        if self.model_info is not None:
            data["modelInfo"] = {
                "modelPath": self.model_info.get("model_path"),
                "dimension": self.model_info.get("dimension"),
            }
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CachedEmbedding":
        model_info = data.get("modelInfo")
        if model_info is not None and not isinstance(model_info, dict):
            raise TypeError("modelInfo must be an object")
        if not isinstance(data["text"], str):
            raise TypeError("text must be a string")
        return cls(
            id=str(data["id"]),
            text=data["text"],
            vector=[float(v) for v in data["embedding"]],
            hash=data["hash"],
            timestamp=int(data["timestamp"]),
            model_info=(
                {"model_path": model_info.get("modelPath"), "dimension": model_info.get("dimension")}
                if model_info else None
            ),
        )


@dataclass
class CachedIntent:
    """An intent paired with its cached embedding."""
    intent: Intent
    embedding: CachedEmbedding


@dataclass
class CacheMetadata:
    """Header describing a cache generation."""
    model_path: str
    embedding_dimension: int
    total_intents: int
    checksum: str
    created_at: int
    updated_at: int
    version: str = CACHE_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "modelPath": self.model_path,
            "embeddingDimension": self.embedding_dimension,
            "totalIntents": self.total_intents,
            "checksum": self.checksum,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CacheMetadata":
        return cls(
            version=data.get("version", CACHE_VERSION),
            created_at=int(data["createdAt"]),
            updated_at=int(data["updatedAt"]),
            model_path=data["modelPath"],
            embedding_dimension=int(data["embeddingDimension"]),
            total_intents=int(data["totalIntents"]),
            checksum=data["checksum"],
        )


@dataclass
class CacheStats:
    """Read-only view of the cache directory."""
    exists: bool
    total_intents: int = 0
    model_path: str | None = None
    embedding_dimension: int | None = None
    age_ms: int | None = None
    size_bytes: int = 0
    files: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "exists": self.exists,
            "total_intents": self.total_intents,
            "model_path": self.model_path,
            "embedding_dimension": self.embedding_dimension,
            "age_ms": self.age_ms,
            "size_bytes": self.size_bytes,
            "files": list(self.files),
        }
