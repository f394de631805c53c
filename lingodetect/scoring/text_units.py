import re
import unicodedata

from lingodetect.constants import MAX_NGRAM_ORDER


def clean_whitespaces(text):
    """Clean extra whitespace from text."""
    return re.sub(r'\s+', ' ', str(text).strip())


def _is_unit_char(char):
    # Letters plus the combining marks that belong to them (Thai vowels, tone marks, ...)
    category = unicodedata.category(char)
    return category[0] == 'L' or category[0] == 'M'


def split_text_units(text):
    """
    Split text into text units: maximal runs of letters and combining marks.

    Whitespace, punctuation, digits and symbols separate units, so no n-gram
    spans two unrelated tokens. Units are NFC normalized and lower case.

    Args:
        text (str): The text to split

    Returns:
        list: Text units in order of appearance
    """
    text = unicodedata.normalize("NFC", text).lower()
    units = []
    current = []
    for char in text:
        if _is_unit_char(char):
            current.append(char)
        elif current:
            units.append(''.join(current))
            current = []
    if current:
        units.append(''.join(current))
    return units


def extract_ngrams(unit, n):
    """
    Extract the sliding-window n-grams of one text unit.

    Args:
        unit (str): A text unit
        n (int): Size of n-grams (1 for unigrams, 2 for bigrams, etc.)

    Returns:
        list: List of n-grams, empty if the unit is shorter than n
    """
    if n < 1 or len(unit) < n:
        return []
    return [unit[i:i + n] for i in range(len(unit) - n + 1)]


def extract_all_ngrams(units, max_order=MAX_NGRAM_ORDER):
    """
    Extract the n-grams of orders 1..max_order of every unit.

    Orders longer than a unit are skipped for that unit.

    Returns:
        dict: order -> list of n-grams (orders without n-grams are omitted)
    """
    ngrams = {}
    for unit in units:
        for order in range(1, min(max_order, len(unit)) + 1):
            ngrams.setdefault(order, []).extend(extract_ngrams(unit, order))
    return ngrams


def count_letters(units):
    """Number of letters (combining marks excluded) in the given units."""
    return sum(1 for unit in units for char in unit if unicodedata.category(char)[0] == 'L')
