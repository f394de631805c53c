#!/usr/bin/env python3

from bisect import bisect_right
from collections import namedtuple

# Script tags
LATIN = 'Latin'
GREEK = 'Greek'
CYRILLIC = 'Cyrillic'
ARMENIAN = 'Armenian'
HEBREW = 'Hebrew'
ARABIC = 'Arabic'
DEVANAGARI = 'Devanagari'
BENGALI = 'Bengali'
TAMIL = 'Tamil'
TELUGU = 'Telugu'
KANNADA = 'Kannada'
MALAYALAM = 'Malayalam'
THAI = 'Thai'
LAO = 'Lao'
MYANMAR = 'Myanmar'
GEORGIAN = 'Georgian'
ETHIOPIC = 'Ethiopic'
KHMER = 'Khmer'
HANGUL = 'Hangul'
HIRAGANA = 'Hiragana'
KATAKANA = 'Katakana'
HAN = 'Han'

ScriptRange = namedtuple('ScriptRange', ['start', 'end', 'script'])

# Unicode blocks (inclusive codepoint bounds) and the script of their letters.
# Combining marks and symbols inside these blocks are filtered out by the
# caller, which only classifies letters.
SCRIPT_RANGES = sorted([
    ScriptRange(0x0041, 0x005A, LATIN),    # Basic Latin, upper case
    ScriptRange(0x0061, 0x007A, LATIN),    # Basic Latin, lower case
    ScriptRange(0x00AA, 0x00AA, LATIN),    # Feminine ordinal indicator
    ScriptRange(0x00BA, 0x00BA, LATIN),    # Masculine ordinal indicator
    ScriptRange(0x00C0, 0x00FF, LATIN),    # Latin-1 Supplement
    ScriptRange(0x0100, 0x024F, LATIN),    # Latin Extended-A and B
    ScriptRange(0x0250, 0x02AF, LATIN),    # IPA Extensions
    ScriptRange(0x0370, 0x03FF, GREEK),    # Greek and Coptic
    ScriptRange(0x0400, 0x052F, CYRILLIC), # Cyrillic and Cyrillic Supplement
    ScriptRange(0x0530, 0x058F, ARMENIAN),
    ScriptRange(0x0590, 0x05FF, HEBREW),
    ScriptRange(0x0600, 0x06FF, ARABIC),
    ScriptRange(0x0750, 0x077F, ARABIC),   # Arabic Supplement
    ScriptRange(0x08A0, 0x08FF, ARABIC),   # Arabic Extended-A
    ScriptRange(0x0900, 0x097F, DEVANAGARI),
    ScriptRange(0x0980, 0x09FF, BENGALI),
    ScriptRange(0x0B80, 0x0BFF, TAMIL),
    ScriptRange(0x0C00, 0x0C7F, TELUGU),
    ScriptRange(0x0C80, 0x0CFF, KANNADA),
    ScriptRange(0x0D00, 0x0D7F, MALAYALAM),
    ScriptRange(0x0E00, 0x0E7F, THAI),
    ScriptRange(0x0E80, 0x0EFF, LAO),
    ScriptRange(0x1000, 0x109F, MYANMAR),
    ScriptRange(0x10A0, 0x10FF, GEORGIAN),
    ScriptRange(0x1100, 0x11FF, HANGUL),   # Hangul Jamo
    ScriptRange(0x1200, 0x137F, ETHIOPIC),
    ScriptRange(0x1780, 0x17FF, KHMER),
    ScriptRange(0x1C80, 0x1C8F, CYRILLIC), # Cyrillic Extended-C
    ScriptRange(0x1E00, 0x1EFF, LATIN),    # Latin Extended Additional (Vietnamese)
    ScriptRange(0x1F00, 0x1FFF, GREEK),    # Greek Extended
    ScriptRange(0x2C60, 0x2C7F, LATIN),    # Latin Extended-C
    ScriptRange(0x2DE0, 0x2DFF, CYRILLIC), # Cyrillic Extended-A
    ScriptRange(0x3005, 0x3006, HAN),      # Ideographic iteration and closing marks
    ScriptRange(0x3040, 0x309F, HIRAGANA),
    ScriptRange(0x30A0, 0x30FF, KATAKANA),
    ScriptRange(0x3130, 0x318F, HANGUL),   # Hangul Compatibility Jamo
    ScriptRange(0x31F0, 0x31FF, KATAKANA), # Katakana Phonetic Extensions
    ScriptRange(0x3400, 0x4DBF, HAN),      # CJK Unified Ideographs Extension A
    ScriptRange(0x4E00, 0x9FFF, HAN),      # CJK Unified Ideographs
    ScriptRange(0xA640, 0xA69F, CYRILLIC), # Cyrillic Extended-B
    ScriptRange(0xA720, 0xA7FF, LATIN),    # Latin Extended-D
    ScriptRange(0xA960, 0xA97F, HANGUL),   # Hangul Jamo Extended-A
    ScriptRange(0xA9E0, 0xA9FF, MYANMAR),  # Myanmar Extended-B
    ScriptRange(0xAA60, 0xAA7F, MYANMAR),  # Myanmar Extended-A
    ScriptRange(0xAC00, 0xD7AF, HANGUL),   # Hangul Syllables
    ScriptRange(0xD7B0, 0xD7FF, HANGUL),   # Hangul Jamo Extended-B
    ScriptRange(0xF900, 0xFAFF, HAN),      # CJK Compatibility Ideographs
    ScriptRange(0xFB50, 0xFDFF, ARABIC),   # Arabic Presentation Forms-A
    ScriptRange(0xFE70, 0xFEFF, ARABIC),   # Arabic Presentation Forms-B
    ScriptRange(0xFF21, 0xFF3A, LATIN),    # Fullwidth Latin, upper case
    ScriptRange(0xFF41, 0xFF5A, LATIN),    # Fullwidth Latin, lower case
    ScriptRange(0xFF66, 0xFF9F, KATAKANA), # Halfwidth Katakana
    ScriptRange(0x20000, 0x2A6DF, HAN),    # CJK Unified Ideographs Extension B
    ScriptRange(0x2A700, 0x2EBEF, HAN),    # CJK Unified Ideographs Extensions C-F
])

_RANGE_STARTS = [script_range.start for script_range in SCRIPT_RANGES]


def get_char_script(char):
    """
    Get the script of a single character.

    Args:
        char (str): A single character.

    Returns:
        str: Script tag, or None when the codepoint is outside every known range.
    """
    codepoint = ord(char)
    index = bisect_right(_RANGE_STARTS, codepoint) - 1
    if index < 0:
        return None
    script_range = SCRIPT_RANGES[index]
    if codepoint <= script_range.end:
        return script_range.script
    return None


def known_scripts():
    """Return the set of script tags the range table can produce."""
    return {script_range.script for script_range in SCRIPT_RANGES}
