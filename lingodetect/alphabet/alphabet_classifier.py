import unicodedata
from collections import Counter
from typing import List, Set

from lingodetect.alphabet.script_ranges import get_char_script


def is_letter(char):
    """True for characters of the Unicode letter categories (Lu, Ll, Lt, Lm, Lo)."""
    return unicodedata.category(char).startswith('L')


class AlphabetClassifier:
    """
    First-pass filter of the detection pipeline.

    Finds the writing systems present in a text and keeps the catalog
    languages written in any of them. Only letters carry script signal:
    whitespace, punctuation, digits, symbols and combining marks are skipped.
    """

    def __init__(self, catalog):
        self.catalog = catalog

    def script_counts(self, text: str) -> Counter:
        """
        Count letters per script.

        Args:
            text (str): The text to analyze

        Returns:
            Counter: script tag -> number of letters. Letters outside every
            known Unicode range are not counted.
        """
        counts = Counter()
        for char in unicodedata.normalize("NFC", text):
            if not is_letter(char):
                continue
            script = get_char_script(char)
            if script is not None:
                counts[script] += 1
        return counts

    def detect_scripts(self, text: str) -> Set[str]:
        """Set of scripts the letters of the text belong to."""
        return set(self.script_counts(text))

    def filter_candidates(self, text: str) -> List:
        """
        Candidate languages for a text, in catalog order.

        Mixed-script text keeps the languages of every script found. Text
        without letters, or whose scripts no catalog language uses, keeps
        the whole catalog and leaves the decision to n-gram scoring.
        """
        scripts = self.detect_scripts(text)
        return self.candidates_for_scripts(scripts)

    def candidates_for_scripts(self, scripts) -> List:
        if not scripts:
            return list(self.catalog)
        candidates = [language for language in self.catalog if language.uses_any_script(scripts)]
        if not candidates:
            return list(self.catalog)
        return candidates
