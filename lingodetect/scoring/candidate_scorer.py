"""
Raw n-gram scoring of candidate languages.

Scores are weighted averages of n-gram log-probabilities, so texts of
different lengths land on the same scale. They are not probabilities:
turning them into a distribution is the job of the ConfidenceNormalizer.
"""

from collections import Counter, namedtuple
from typing import Dict, Iterable, List

from lingodetect.alphabet.character_rules import CharacterRules
from lingodetect.constants import (
    DISTINCTIVE_CHARACTER_WEIGHT,
    MAX_NGRAM_ORDER,
    ORDER_WEIGHTS,
)
from lingodetect.scoring.text_units import count_letters, extract_all_ngrams, split_text_units

DetectionCandidate = namedtuple('DetectionCandidate', ['language', 'raw_score'])


class CandidateScorer:

    def __init__(
        self,
        order_weights=None,
        distinctive_character_weight=DISTINCTIVE_CHARACTER_WEIGHT,
        character_rules=None,
    ):
        """
        Args:
            order_weights: Mapping n-gram order -> weight. Defaults to ORDER_WEIGHTS.
            distinctive_character_weight: Raw score bonus for a text made only of
                characters distinctive of a language. 0 disables the rule layer.
            character_rules: CharacterRules instance (default rules if None).
        """
        self.order_weights = dict(order_weights if order_weights is not None else ORDER_WEIGHTS)
        if any(weight <= 0 for weight in self.order_weights.values()):
            raise ValueError("Order weights must be positive")
        self.max_order = min(MAX_NGRAM_ORDER, max(self.order_weights))
        self.distinctive_character_weight = distinctive_character_weight
        self.character_rules = character_rules if character_rules is not None else CharacterRules()

    def score_candidates(self, text: str, candidate_languages: Iterable) -> List[DetectionCandidate]:
        """
        Score every candidate language for a text.

        Args:
            text (str): The text to analyze
            candidate_languages: Languages allowed by the alphabet filter

        Returns:
            list: DetectionCandidate per language, in the order given. Empty
            when the text holds no letters.
        """
        candidate_languages = list(candidate_languages)
        units = split_text_units(text)
        letter_count = count_letters(units)
        if not candidate_languages or letter_count == 0:
            return []

        ngram_counts = {
            order: Counter(ngrams)
            for order, ngrams in extract_all_ngrams(units, self.max_order).items()
            if order in self.order_weights
        }
        total_weight = sum(
            self.order_weights[order] * sum(counts.values())
            for order, counts in ngram_counts.items()
        )

        bonus_hits = {}
        if self.distinctive_character_weight:
            bonus_hits = self.character_rules.count_hits(text, candidate_languages)

        candidates = []
        for language in candidate_languages:
            weighted_sum = 0.0
            for order, counts in ngram_counts.items():
                log_probability = language.model.log_probability
                order_sum = sum(count * log_probability(ngram) for ngram, count in counts.items())
                weighted_sum += self.order_weights[order] * order_sum
            raw_score = weighted_sum / total_weight

            hits = bonus_hits.get(language, 0)
            if hits:
                raw_score += self.distinctive_character_weight * min(1.0, hits / letter_count)

            candidates.append(DetectionCandidate(language, raw_score))
        return candidates

    def score(self, text: str, candidate_languages: Iterable) -> Dict:
        """
        Raw score per candidate language; higher is more plausible.

        Returns:
            dict: Language -> raw score, empty for empty or letter-free text.
        """
        return {candidate.language: candidate.raw_score
                for candidate in self.score_candidates(text, candidate_languages)}
