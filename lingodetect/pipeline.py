"""
Internal detection pipeline for LingoDetect.

This module wires together the different stages:
- input validation
- alphabet (script) filtering
- n-gram scoring
- confidence normalization

Ranking of the resulting distribution is left to the caller.
This is NOT part of the public API.
"""

import logging
from typing import Dict

from lingodetect.alphabet.alphabet_classifier import AlphabetClassifier
from lingodetect.constants import MAX_TEXT_LENGTH
from lingodetect.errors import InvalidInputError
from lingodetect.scoring.candidate_scorer import CandidateScorer
from lingodetect.scoring.confidence_normalizer import ConfidenceNormalizer
from lingodetect.scoring.text_units import clean_whitespaces

logger = logging.getLogger(__name__)


def validate_text(text, max_text_length=MAX_TEXT_LENGTH):
    """
    Check and decode detection input.

    Args:
        text: str, or UTF-8 encoded bytes
        max_text_length (int): Longest accepted text, in characters

    Returns:
        str: The text to analyze

    Raises:
        InvalidInputError: for non-text values, invalid UTF-8, lone
            surrogates or text longer than max_text_length.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Text is not valid UTF-8: {e}") from e
    elif not isinstance(text, str):
        raise InvalidInputError(f"Text must be str or bytes, got {type(text).__name__}")

    if len(text) > max_text_length:
        raise InvalidInputError(
            f"Text has {len(text)} characters, more than the maximum of {max_text_length}"
        )

    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidInputError(f"Text contains characters that cannot be encoded: {e}") from e

    return text


class DetectionPipeline:
    """
    Runs alphabet filter -> scoring -> normalization for one text.

    The pipeline keeps no per-call state: every call works on fresh local
    values and only reads the shared catalog, so one instance can serve
    any number of threads.
    """

    def __init__(
        self,
        catalog,
        *,
        scorer=None,
        normalizer=None,
        max_text_length=MAX_TEXT_LENGTH,
    ):
        self.catalog = catalog
        self.alphabet_classifier = AlphabetClassifier(catalog)
        self.scorer = scorer if scorer is not None else CandidateScorer()
        self.normalizer = normalizer if normalizer is not None else ConfidenceNormalizer()
        self.max_text_length = max_text_length

    def raw_scores(self, text) -> Dict:
        """Raw score per candidate language (Language -> float)."""
        text = validate_text(text, self.max_text_length)
        if not text.strip():
            return {}

        # -------------------------------------------------
        # Alphabet filter
        # -------------------------------------------------
        candidates = self.alphabet_classifier.filter_candidates(text)

        # -------------------------------------------------
        # N-gram scoring
        # -------------------------------------------------
        scores = self.scorer.score(text, candidates)

        if logger.isEnabledFor(logging.DEBUG):
            preview = clean_whitespaces(text)[:60]
            logger.debug(f"'{preview}': {len(candidates)} candidates, {len(scores)} scored")
        return scores

    def distribution(self, text) -> Dict:
        """
        Confidence per candidate language (Language -> float), summing to 1.
        Empty for empty, whitespace-only or letter-free text.
        """
        scores = self.raw_scores(text)

        # -------------------------------------------------
        # Confidence normalization
        # -------------------------------------------------
        return self.normalizer.normalize(scores)
