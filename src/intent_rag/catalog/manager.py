"""Template catalog management."""

import logging
from collections.abc import Iterable
from typing import Any

from intent_rag.catalog.defaults import DEFAULT_TEMPLATES
from intent_rag.catalog.models import FlattenedIntent, IntentTemplate
from intent_rag.models.types import SupportedLanguage

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """Language-indexed catalog of intent templates.

    Each instance owns its own template map, so tests and engines can build
    isolated catalogs instead of sharing module state.
    """

    def __init__(self, templates: Iterable[IntentTemplate] | None = None):
        """Initialize the catalog.

        Args:
            templates: Initial templates (uses the built-in set if None)
        """
        self._templates: dict[str, IntentTemplate] = {}
        for template in DEFAULT_TEMPLATES if templates is None else templates:
            self._templates[template.id] = template

        logger.debug("TemplateCatalog initialized with %d templates", len(self._templates))

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    @property
    def templates(self) -> list[IntentTemplate]:
        """Templates in insertion order."""
        return list(self._templates.values())

    def get_all_flattened(self) -> list[FlattenedIntent]:
        """Flatten every (template, language, example) triple.

        Returns:
            Flattened intents sorted by descending priority; equal priorities
            keep insertion order
        """
        results: list[FlattenedIntent] = []

        for template in self._templates.values():
            for language, texts in template.templates.items():
                description = template.description_for(language)
                for text in texts:
                    results.append(
                        FlattenedIntent(
                            id=f"{template.id}_{language}_{len(results)}",
                            text=text,
                            action=template.action,
                            description=description,
                            category=template.category,
                            language=language,
                            priority=template.priority,
                            parameters=template.parameters,
                        )
                    )

        results.sort(key=lambda item: item.priority, reverse=True)
        return results

    def get_for_language(self, language: str | SupportedLanguage) -> list[FlattenedIntent]:
        """Flatten templates for a single language.

        Args:
            language: Target language code

        Returns:
            Flattened intents for that language, same ordering rules as
            get_all_flattened()
        """
        language = SupportedLanguage(language).value
        results: list[FlattenedIntent] = []

        for template in self._templates.values():
            texts = template.templates.get(language, ())
            description = template.description_for(language)
            for text in texts:
                results.append(
                    FlattenedIntent(
                        id=f"{template.id}_{language}_{len(results)}",
                        text=text,
                        action=template.action,
                        description=description,
                        category=template.category,
                        language=language,
                        priority=template.priority,
                        parameters=template.parameters,
                    )
                )

        results.sort(key=lambda item: item.priority, reverse=True)
        return results

    def add_template(self, template: IntentTemplate) -> None:
        """Add a template, replacing any existing template with the same id."""
        replaced = template.id in self._templates
        self._templates[template.id] = template
        logger.info("%s template: %s", "Replaced" if replaced else "Added", template.id)

    def remove_template(self, template_id: str) -> bool:
        """Remove a template by id.

        Returns:
            True if a template was removed
        """
        removed = self._templates.pop(template_id, None) is not None
        if removed:
            logger.info("Removed template: %s", template_id)
        return removed

    def get_template(self, template_id: str) -> IntentTemplate | None:
        """Get a template by id."""
        return self._templates.get(template_id)

    def get_categories(self) -> list[str]:
        """Unique categories in first-seen order."""
        return list(dict.fromkeys(t.category for t in self._templates.values()))

    def get_templates_by_category(self, category: str) -> list[IntentTemplate]:
        """Templates belonging to a category."""
        return [t for t in self._templates.values() if t.category == category]

    def get_parameters(self, action: str) -> tuple[str, ...]:
        """Declared parameters for an action (empty if unknown)."""
        for template in self._templates.values():
            if template.action == action:
                return template.parameters
        return ()

    def get_stats(self) -> dict[str, Any]:
        """Catalog statistics.

        Returns:
            Dictionary with template count, flattened intent count and
            per-language phrase distribution
        """
        distribution = {lang.value: 0 for lang in SupportedLanguage}
        for template in self._templates.values():
            for language, texts in template.templates.items():
                distribution[language] += len(texts)

        return {
            "total_templates": len(self._templates),
            "total_intents": sum(distribution.values()),
            "language_distribution": distribution,
        }
