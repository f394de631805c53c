from typing import Dict

import numpy as np

from lingodetect.constants import CONFIDENCE_SHARPNESS


class ConfidenceNormalizer:
    """
    Turns raw candidate scores into confidences that sum to 1.

    Uses a soft-max over the raw scores. Raising one language's raw score
    raises its confidence and scales every other confidence by the same
    factor, so the relative order of the other languages never changes and
    the most confident language is always the one with the best raw score.
    """

    def __init__(self, sharpness=CONFIDENCE_SHARPNESS):
        """
        Args:
            sharpness (float): Multiplier applied to raw scores before the
                soft-max. Larger values concentrate confidence on the best
                candidates.
        """
        if sharpness <= 0:
            raise ValueError("sharpness must be positive")
        self.sharpness = sharpness

    def normalize(self, raw_scores: Dict) -> Dict:
        """
        Args:
            raw_scores (dict): Language -> raw score

        Returns:
            dict: Language -> confidence in [0, 1], same keys and order as the
            input. Empty if and only if the input is empty.
        """
        if not raw_scores:
            return {}

        languages = list(raw_scores.keys())
        scores = np.array([raw_scores[language] for language in languages], dtype=np.float64)

        # Shift by the maximum so the best candidate maps to exp(0) = 1
        exponents = np.exp(self.sharpness * (scores - scores.max()))
        confidences = exponents / exponents.sum()

        return {language: float(confidence) for language, confidence in zip(languages, confidences)}
