"""Pattern-scoring language detection."""

import logging
import re
from collections import OrderedDict
from collections.abc import Mapping, Sequence

from intent_rag.language.patterns import LANGUAGE_PATTERNS
from intent_rag.models.types import LanguageDetectionResult, SupportedLanguage

logger = logging.getLogger(__name__)

NEUTRAL_CONFIDENCE = 0.5
DEFAULT_CACHE_SIZE = 1024


class LanguageDetector:
    """Selects the most likely language of an input string.

    Detection is a pure function of the text. Results are memoized in a
    bounded LRU; a cache size of 0 disables memoization.
    """

    def __init__(
        self,
        cache_size: int = DEFAULT_CACHE_SIZE,
        patterns: Mapping[SupportedLanguage, Sequence[re.Pattern[str]]] | None = None,
        default_language: SupportedLanguage = SupportedLanguage.EN,
    ):
        """Initialize the detector.

        Args:
            cache_size: Maximum number of memoized results (0 disables)
            patterns: Per-language pattern lists (uses built-ins if None)
            default_language: Language chosen for ties and unscored input
        """
        if cache_size < 0:
            raise ValueError("cache_size must be non-negative")
        self.cache_size = cache_size
        self.patterns = patterns or LANGUAGE_PATTERNS
        self.default_language = SupportedLanguage(default_language)
        self._cache: OrderedDict[str, LanguageDetectionResult] = OrderedDict()
        self._hits = 0
        self._misses = 0

    @property
    def cache_len(self) -> int:
        """Number of memoized results."""
        return len(self._cache)

    def detect(self, text: str) -> LanguageDetectionResult:
        """Detect the language of the input text.

        Args:
            text: Input text

        Returns:
            Detection result with language, confidence and matched patterns
        """
        cached = self._cache.get(text)
        if cached is not None:
            self._cache.move_to_end(text)
            self._hits += 1
            return cached

        self._misses += 1
        result = self._score(text)

        if self.cache_size > 0:
            self._cache[text] = result
            if len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)

        return result

    def _score(self, text: str) -> LanguageDetectionResult:
        scores: dict[SupportedLanguage, int] = {}
        detected_patterns: list[str] = []

        for language, patterns in self.patterns.items():
            scores[language] = 0
            for pattern in patterns:
                count = sum(1 for _ in pattern.finditer(text))
                if count:
                    scores[language] += count
                    detected_patterns.append(f"{language.value}:{pattern.pattern}")

        best_score = max(scores.values(), default=0)
        total = sum(scores.values())

        if best_score == 0:
            language = self.default_language
        else:
            leaders = [lang for lang, value in scores.items() if value == best_score]
            language = self.default_language if self.default_language in leaders else leaders[0]

        confidence = best_score / total if total > 0 else NEUTRAL_CONFIDENCE

        logger.debug("Detected language %s (confidence %.2f)", language.value, confidence)
        return LanguageDetectionResult(
            language=language,
            confidence=confidence,
            detected_patterns=tuple(detected_patterns),
        )

    def clear_cache(self) -> None:
        """Clear memoized results."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
        logger.info("Language detection cache cleared")

    def get_stats(self) -> dict[str, int]:
        """Memoization statistics."""
        return {
            "cache_size": len(self._cache),
            "cache_capacity": self.cache_size,
            "hits": self._hits,
            "misses": self._misses,
        }
