"""Models for vector search."""

from dataclasses import dataclass
from typing import Any

from intent_rag.models.types import Intent


@dataclass(frozen=True)
class SearchResult:
    """One nearest-neighbor hit."""
    intent: Intent
    score: float
    distance: float
    label: int

    def __post_init__(self):
        """Validate result values."""
        if self.label < 0:
            raise ValueError("label must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "intent": self.intent.to_dict(),
            "score": self.score,
            "distance": self.distance,
            "label": self.label,
        }
