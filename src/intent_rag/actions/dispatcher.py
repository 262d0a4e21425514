"""ActionDispatcher: invokes the handler behind a matched intent."""

import logging
import re

from intent_rag.actions.registry import ActionRegistry
from intent_rag.language.messages import get_message, has_message
from intent_rag.models.types import Intent, SupportedLanguage

logger = logging.getLogger(__name__)

_NAME = r"[a-zA-Z0-9\u4e00-\u9fa5\-_]"
_VERBS = (
    r"添加|删除|绑定|解绑|移除|add|remove|delete|bind|unbind|"
    r"agregar|añadir|eliminar|ajouter|supprimer|hinzufügen|entfernen|追加|削除|추가|제거"
)
_NOUNS = r"设备|device|dispositivo|appareil|gerät|デバイス|장치"

# Tried in order; the first candidate longer than one character wins.
PARAMETER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"(?:{_NOUNS})\s*[：:]\s*([a-zA-Z0-9\u4e00-\u9fa5\-_\s]+)", re.IGNORECASE),
    re.compile(rf"(?:{_VERBS})\s*(?:{_NOUNS})?\s*({_NAME}+)", re.IGNORECASE),
    re.compile(r"[\"'“”「」]([a-zA-Z0-9\u4e00-\u9fa5\-_\s]+)[\"'“”「」]"),
    re.compile(
        rf"(iPhone|iPad|MacBook|iMac|Android|Samsung|Huawei|Pixel)[\-_\s]*({_NAME}*)",
        re.IGNORECASE,
    ),
    re.compile(rf"\b({_NAME}{{2,}})\s*(?:设备|在线|离线|状态)?$", re.IGNORECASE | re.ASCII),
)

# Command words that can never be a parameter value on their own.
STOPWORDS = frozenset(
    word.lower()
    for word in (_VERBS + "|" + _NOUNS + "|devices|设备名|设备名称|名称|name").split("|")
)


class ActionDispatcher:
    """Maps a matched intent to its handler and extracts its parameter."""

    def __init__(self, registry: ActionRegistry):
        self.registry = registry

    def extract_parameter(self, raw_text: str) -> str | None:
        """Extract a single parameter value from free text.

        Args:
            raw_text: User input

        Returns:
            The extracted value, or None when no heuristic produced one
        """
        for pattern in PARAMETER_PATTERNS:
            match = pattern.search(raw_text)
            if not match:
                continue

            parts = [group.strip() for group in match.groups() if group and group.strip()]
            candidate = "-".join(parts)
            if len(candidate) > 1 and candidate.lower() not in STOPWORDS:
                return candidate

        return None

    async def dispatch(
        self,
        intent: Intent,
        raw_text: str,
        language: str | SupportedLanguage = SupportedLanguage.EN,
    ) -> str:
        """Run the action behind an intent.

        Handler failures are reported as localized text, never raised.

        Args:
            intent: Matched intent
            raw_text: Original user input
            language: Language for framework messages

        Returns:
            Response text
        """
        spec = self.registry.get(intent.action)
        if spec is None:
            logger.warning("No handler registered for action %s", intent.action)
            return get_message("not_implemented", language, action=intent.action)

        try:
            if spec.pass_raw_text:
                result = await spec.handler(raw_text)
            elif not spec.parameters:
                result = await spec.handler()
            else:
                parameter = spec.parameters[0]
                value = self.extract_parameter(raw_text)
                if value is None:
                    logger.debug("No %s found in input for %s", parameter, intent.action)
                    key = f"missing_parameter.{parameter}"
                    if has_message(key):
                        return get_message(key, language)
                    return get_message("missing_parameter", language, parameter=parameter)
                result = await spec.handler(value)
        except Exception as e:
            logger.error("Error executing action %s: %s", intent.action, e)
            return get_message("action_error", language, error=str(e))

        return str(result)
