#!/usr/bin/env python3

import unicodedata
from collections import Counter

# Characters used by only a few languages of the catalog: a strong positive
# signal for those languages. Keys are lower case; values are ISO 639-1 codes.
DISTINCTIVE_CHARACTERS = {
    '¿': {'es'},
    '¡': {'es'},
    'ñ': {'es'},
    'ß': {'de'},
    'ä': {'de'},
    'ö': {'de'},
    'ü': {'de', 'es'},
    'ç': {'fr', 'pt'},
    'ã': {'pt', 'vi'},
    'õ': {'pt', 'vi'},
    'â': {'fr', 'pt', 'vi'},
    'ê': {'fr', 'pt', 'vi'},
    'ô': {'fr', 'pt', 'vi'},
    'î': {'fr'},
    'û': {'fr'},
    'ë': {'fr'},
    'ï': {'fr'},
    'ÿ': {'fr'},
    'œ': {'fr'},
    'æ': {'fr'},
    'à': {'fr', 'it', 'pt', 'vi'},
    'è': {'fr', 'it', 'vi'},
    'ù': {'fr', 'it', 'vi'},
    'ì': {'it', 'vi'},
    'ò': {'it', 'vi'},
    'á': {'es', 'pt', 'vi'},
    'é': {'es', 'fr', 'it', 'pt', 'vi'},
    'í': {'es', 'pt', 'vi'},
    'ó': {'es', 'it', 'pt', 'vi'},
    'ú': {'es', 'pt', 'vi'},
    'ý': {'vi'},
    'ă': {'vi'},
    'đ': {'vi'},
    'ơ': {'vi'},
    'ư': {'vi'},
    'ĩ': {'vi'},
    'ũ': {'vi'},
}

# Vietnamese letters with stacked tone marks (Latin Extended Additional)
for _char in 'ạảấầẩẫậắằẳẵặẹẻẽếềểễệỉịọỏốồổỗộớờởỡợụủứừửữựỳỵỷỹ':
    DISTINCTIVE_CHARACTERS[_char] = {'vi'}


class CharacterRules:
    """
    Rule layer on top of the n-gram statistics: counts the characters of a
    text that only a few candidate languages can account for.
    """

    def __init__(self, distinctive_characters=None):
        self.distinctive_characters = (
            distinctive_characters if distinctive_characters is not None else DISTINCTIVE_CHARACTERS
        )

    def count_hits(self, text, languages):
        """
        Count distinctive characters per candidate language.

        Args:
            text (str): The text to analyze.
            languages (iterable): Candidate Language objects.

        Returns:
            dict: Language -> number of characters of the text that are
            distinctive of that language. Languages without hits are omitted.
        """
        text = unicodedata.normalize("NFC", text).lower()
        char_counts = Counter(char for char in text if char in self.distinctive_characters)
        if not char_counts:
            return {}

        hits = {}
        for language in languages:
            count = sum(
                n for char, n in char_counts.items()
                if language.iso_code in self.distinctive_characters[char]
            )
            if count > 0:
                hits[language] = count
        return hits
