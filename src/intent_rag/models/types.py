"""Type definitions for intent_rag."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SupportedLanguage(str, Enum):
    """Languages the catalog and the detector understand."""
    ZH = "zh"
    EN = "en"
    JA = "ja"
    KO = "ko"
    ES = "es"
    FR = "fr"
    DE = "de"


class IndexType(str, Enum):
    """Vector index metric."""
    L2 = "l2"
    IP = "ip"
    COSINE = "cosine"


class QueryState(Enum):
    """Pipeline states a single query passes through."""
    IDLE = "idle"
    DETECT_LANGUAGE = "detect_language"
    EMBED = "embed"
    PRIMARY_SEARCH = "primary_search"
    MATCHED = "matched"
    NO_MATCH = "no_match"
    FUZZY_SEARCH = "fuzzy_search"
    FUZZY_MATCHED = "fuzzy_matched"
    UNMATCHED = "unmatched"
    RESPOND = "respond"


@dataclass(frozen=True)
class Intent:
    """A recognizable (text, action) pair stored in the vector index."""

    id: int
    text: str
    action: str
    description: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        data: dict[str, Any] = {"id": self.id, "text": self.text, "action": self.action}
        if self.description is not None:
            data["description"] = self.description
        if self.category is not None:
            data["category"] = self.category
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Intent":
        """Create from a dictionary produced by to_dict()."""
        return cls(
            id=int(data["id"]),
            text=data["text"],
            action=data["action"],
            description=data.get("description"),
            category=data.get("category"),
        )


@dataclass(frozen=True)
class LanguageDetectionResult:
    """Outcome of language detection for one input string."""

    language: SupportedLanguage
    confidence: float
    detected_patterns: tuple[str, ...] = ()


@dataclass
class QueryResult:
    """Uniform result returned by every terminal state of a query."""

    success: bool
    response: str
    matched_intent: Intent | None = None
    confidence: float | None = None
    execution_time_ms: float = 0.0
    language: SupportedLanguage = SupportedLanguage.EN
    suggestion: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for front-ends."""
        data: dict[str, Any] = {
            "success": self.success,
            "response": self.response,
            "executionTimeMs": self.execution_time_ms,
        }
        if self.matched_intent is not None:
            data["matchedIntent"] = self.matched_intent.to_dict()
        if self.confidence is not None:
            data["confidence"] = self.confidence
        return data
