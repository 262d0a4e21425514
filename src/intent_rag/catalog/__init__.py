"""Intent template catalog for intent_rag."""

from intent_rag.catalog.defaults import DEFAULT_TEMPLATES
from intent_rag.catalog.manager import TemplateCatalog
from intent_rag.catalog.models import FlattenedIntent, IntentTemplate

__all__ = ["DEFAULT_TEMPLATES", "FlattenedIntent", "IntentTemplate", "TemplateCatalog"]
