"""
Ordering and selection over a normalized confidence distribution.

The ranker never scores anything itself: it only sorts and filters the
output of the ConfidenceNormalizer.
"""

import numbers
from dataclasses import dataclass
from typing import Dict, List, Optional

from lingodetect.errors import InvalidInputError


@dataclass(frozen=True)
class LanguageResult:
    """
    A detected language and its confidence.

    Attributes:
        language: Canonical language name (e.g. 'English')
        confidence: Confidence between 0.0 and 1.0
    """
    language: str
    confidence: float

    def __str__(self):
        return f"{self.language}:{self.confidence:.3f}"


class Ranker:

    def __init__(self, catalog):
        """
        Args:
            catalog: LanguageCatalog whose order breaks confidence ties.
        """
        self.catalog = catalog

    def _sort_key(self, item):
        language, confidence = item
        return (-confidence, self.catalog.position(language))

    def rank(self, distribution: Dict) -> List[LanguageResult]:
        """
        All languages of a distribution, by descending confidence.
        Equal confidences keep catalog order.
        """
        ordered = sorted(distribution.items(), key=self._sort_key)
        return [LanguageResult(language.name, confidence) for language, confidence in ordered]

    def above_threshold(self, distribution: Dict, threshold: float) -> List[LanguageResult]:
        """
        Languages with confidence >= threshold, by descending confidence.

        An empty list means no language reached the threshold; it is not an error.

        Raises:
            InvalidInputError: if threshold is not in (0, 1].
        """
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real) or not 0.0 < threshold <= 1.0:
            raise InvalidInputError(f"threshold must be in (0, 1], got {threshold!r}")
        return [result for result in self.rank(distribution) if result.confidence >= threshold]

    def top(self, distribution: Dict, n: int) -> List[LanguageResult]:
        """
        The n most confident languages. Fewer are returned when fewer
        languages have a confidence above zero; the list is never padded.

        Raises:
            InvalidInputError: if n is not an integer >= 1.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            raise InvalidInputError(f"n must be an integer >= 1, got {n!r}")
        return [result for result in self.rank(distribution) if result.confidence > 0.0][:n]

    def best(self, distribution: Dict) -> Optional[LanguageResult]:
        """The most confident language, or None for an empty distribution."""
        if not distribution:
            return None
        language, confidence = min(distribution.items(), key=self._sort_key)
        return LanguageResult(language.name, confidence)
