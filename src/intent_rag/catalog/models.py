"""Catalog data models."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from intent_rag.models.types import Intent, SupportedLanguage


@dataclass(frozen=True)
class IntentTemplate:
    """A language-indexed bundle of example phrases mapped to one action."""

    id: str
    action: str
    category: str
    description: Mapping[str, str]
    templates: Mapping[str, Sequence[str]]
    parameters: tuple[str, ...] = ()
    priority: int = 1

    def __post_init__(self):
        """Freeze nested containers and validate."""
        if not self.id:
            raise ValueError("Template id is required")
        if not self.action:
            raise ValueError("Template action is required")

        supported = {lang.value for lang in SupportedLanguage}
        unknown = [lang for lang in self.templates if lang not in supported]
        if unknown:
            raise ValueError(f"Unsupported template languages: {', '.join(unknown)}")

        object.__setattr__(self, "description", MappingProxyType(dict(self.description)))
        object.__setattr__(
            self,
            "templates",
            MappingProxyType({lang: tuple(texts) for lang, texts in self.templates.items()}),
        )
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def description_for(self, language: str) -> str:
        """Localized description, falling back to English."""
        return self.description.get(language) or self.description.get("en", "")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        data: dict[str, Any] = {
            "id": self.id,
            "action": self.action,
            "category": self.category,
            "description": dict(self.description),
            "templates": {lang: list(texts) for lang, texts in self.templates.items()},
            "priority": self.priority,
        }
        if self.parameters:
            data["parameters"] = list(self.parameters)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IntentTemplate":
        """Create from a dictionary produced by to_dict()."""
        return cls(
            id=data["id"],
            action=data["action"],
            category=data.get("category", ""),
            description=data.get("description", {}),
            templates=data.get("templates", {}),
            parameters=tuple(data.get("parameters", ())),
            priority=int(data.get("priority", 1)),
        )


@dataclass(frozen=True)
class FlattenedIntent:
    """One (template, language, example phrase) triple."""

    id: str
    text: str
    action: str
    description: str
    category: str
    language: str
    priority: int = 1
    parameters: tuple[str, ...] = field(default_factory=tuple)

    def to_intent(self, intent_id: int) -> Intent:
        """Convert to an indexable Intent with a numeric id."""
        return Intent(
            id=intent_id,
            text=self.text,
            action=self.action,
            description=self.description,
            category=self.category,
        )
