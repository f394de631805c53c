"""
Public API for LingoDetect.

This module defines the stable, user-facing interface.
Internal components (alphabet filter, scorer, normalizer, etc.)
must NOT be imported directly by users.
"""

import logging
import threading
from typing import Iterable, List, Optional, Tuple, Union

from lingodetect.constants import (
    CONFIDENCE_SHARPNESS,
    DISTINCTIVE_CHARACTER_WEIGHT,
    LOG_FORMAT,
    MAX_TEXT_LENGTH,
    UNKNOWN_LANGUAGE,
)
from lingodetect.errors import InvalidInputError
from lingodetect.ranking.ranker import LanguageResult

Text = Union[str, bytes]


class LanguageDetector:
    """
    LingoDetect public API.

    Example:
        detector = LanguageDetector()
        detector.detect_language("Hola, ¿cómo estás hoy?")  # 'Spanish'
    """

    def __init__(
        self,
        *,
        languages: Optional[Iterable[str]] = None,
        catalog=None,
        max_text_length: int = MAX_TEXT_LENGTH,
        confidence_sharpness: float = CONFIDENCE_SHARPNESS,
        distinctive_character_weight: float = DISTINCTIVE_CHARACTER_WEIGHT,
        verbose: bool = False,
    ):
        """
        Initialize a detector.

        Parameters
        ----------
        languages:
            Names or ISO codes of the languages to detect (e.g. ["English", "es"]).
            None (default) keeps every language of the catalog.
        catalog:
            LanguageCatalog to use instead of the packaged one (mostly for tests).
        max_text_length:
            Longest accepted text in characters; longer input raises InvalidInputError
        confidence_sharpness:
            Soft-max scale used to turn raw scores into confidences
        distinctive_character_weight:
            Weight of the distinctive character rules (0 disables them)
        verbose:
            Log catalog loading and detection details

        Raises
        ------
        ModelLoadError:
            if the packaged language models cannot be loaded
        InvalidInputError:
            if `languages` names a language the catalog does not hold
        """
        if verbose:
            _enable_verbose_logging()

        # Lazy imports to keep API lightweight
        from lingodetect.models.catalog import get_default_catalog
        from lingodetect.pipeline import DetectionPipeline
        from lingodetect.ranking.ranker import Ranker
        from lingodetect.scoring.candidate_scorer import CandidateScorer
        from lingodetect.scoring.confidence_normalizer import ConfidenceNormalizer

        catalog = catalog if catalog is not None else get_default_catalog()
        if languages is not None:
            if isinstance(languages, str):
                languages = [languages]
            languages = list(languages)
            if not languages:
                raise InvalidInputError("languages must name at least one language")
            catalog = catalog.subset(languages)

        self.catalog = catalog
        self._pipeline = DetectionPipeline(
            catalog,
            scorer=CandidateScorer(distinctive_character_weight=distinctive_character_weight),
            normalizer=ConfidenceNormalizer(sharpness=confidence_sharpness),
            max_text_length=max_text_length,
        )
        self._ranker = Ranker(catalog)

    @property
    def languages(self) -> List[str]:
        """Names of the languages this detector can report, in catalog order."""
        return [language.name for language in self.catalog]

    # -------------------------------------------------
    # Detection
    # -------------------------------------------------

    def detect_language(self, text: Text) -> str:
        """
        Most likely language of a text.

        Returns "Unknown" for empty, whitespace-only or letter-free text.
        """
        best = self._ranker.best(self._pipeline.distribution(text))
        return best.language if best is not None else UNKNOWN_LANGUAGE

    def detect_language_with_confidence(self, text: Text) -> Tuple[str, float]:
        """
        Most likely language of a text and its confidence.

        Returns ("Unknown", 0.0) when no language can be detected.
        """
        best = self._ranker.best(self._pipeline.distribution(text))
        if best is None:
            return UNKNOWN_LANGUAGE, 0.0
        return best.language, best.confidence

    def detect_multiple_languages(self, text: Text, threshold: float) -> List[LanguageResult]:
        """
        Every language whose confidence is at least `threshold` (in (0, 1]),
        most confident first. May be empty.
        """
        distribution = self._pipeline.distribution(text)
        return self._ranker.above_threshold(distribution, threshold)

    def detect_top_languages(self, text: Text, n: int) -> List[LanguageResult]:
        """
        The `n` most likely languages (n >= 1), most confident first.
        Holds fewer than n entries when fewer languages were scored.
        """
        distribution = self._pipeline.distribution(text)
        return self._ranker.top(distribution, n)

    def compute_language_confidence_values(self, text: Text) -> List[LanguageResult]:
        """Confidence of every candidate language, most confident first."""
        return self._ranker.rank(self._pipeline.distribution(text))

    def compute_language_confidence(self, text: Text, language: str) -> float:
        """
        Confidence of one language (name or ISO code) for a text.
        0.0 when the language was filtered out or nothing was detected.

        Raises
        ------
        InvalidInputError:
            if the detector does not know the language
        """
        target = self.catalog.get(language)
        if target is None:
            raise InvalidInputError(f"Unknown language: {language!r}")
        return self._pipeline.distribution(text).get(target, 0.0)


############################################
### Module-level shortcuts

_default_detector = None
_default_detector_lock = threading.Lock()


def get_default_detector() -> LanguageDetector:
    """Shared detector over the packaged catalog, created on first use."""
    global _default_detector
    if _default_detector is None:
        with _default_detector_lock:
            if _default_detector is None:
                _default_detector = LanguageDetector()
    return _default_detector


def detect_language(text: Text) -> str:
    return get_default_detector().detect_language(text)


def detect_language_with_confidence(text: Text) -> Tuple[str, float]:
    return get_default_detector().detect_language_with_confidence(text)


def detect_multiple_languages(text: Text, threshold: float) -> List[LanguageResult]:
    return get_default_detector().detect_multiple_languages(text, threshold)


def detect_top_languages(text: Text, n: int) -> List[LanguageResult]:
    return get_default_detector().detect_top_languages(text, n)


def _enable_verbose_logging():
    package_logger = logging.getLogger('lingodetect')
    package_logger.setLevel(logging.INFO)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
