from lingodetect.api import (
    LanguageDetector,
    detect_language,
    detect_language_with_confidence,
    detect_multiple_languages,
    detect_top_languages,
    get_default_detector,
)
from lingodetect.constants import UNKNOWN_LANGUAGE
from lingodetect.errors import InvalidInputError, LingoDetectError, ModelLoadError
from lingodetect.ranking.ranker import LanguageResult

__version__ = "0.1.0"

__all__ = [
    "LanguageDetector",
    "LanguageResult",
    "detect_language",
    "detect_language_with_confidence",
    "detect_multiple_languages",
    "detect_top_languages",
    "get_default_detector",
    "UNKNOWN_LANGUAGE",
    "LingoDetectError",
    "InvalidInputError",
    "ModelLoadError",
]
