from lingodetect.alphabet.alphabet_classifier import AlphabetClassifier, is_letter
from lingodetect.alphabet.character_rules import CharacterRules


def test_is_letter():
    assert is_letter("a")
    assert is_letter("ก")
    assert not is_letter("1")
    assert not is_letter("!")
    assert not is_letter("\u0301")


def test_detect_scripts_ignores_non_letters(small_catalog):
    classifier = AlphabetClassifier(small_catalog)

    assert classifier.detect_scripts("Hello мир 123!") == {"Latin", "Cyrillic"}
    assert classifier.detect_scripts("12345 !!!") == set()
    assert classifier.detect_scripts("\u0301\u0301") == set()


def test_script_counts(small_catalog):
    counts = AlphabetClassifier(small_catalog).script_counts("ab мир")
    assert counts["Latin"] == 2
    assert counts["Cyrillic"] == 3


def test_filter_candidates_keeps_catalog_order(small_catalog):
    classifier = AlphabetClassifier(small_catalog)

    assert [l.name for l in classifier.filter_candidates("Hello")] == ["English", "Spanish"]
    assert [l.name for l in classifier.filter_candidates("привет")] == ["Russian"]
    assert [l.name for l in classifier.filter_candidates("привет hello")] == ["English", "Spanish", "Russian"]


def test_filter_candidates_falls_back_to_whole_catalog(small_catalog):
    classifier = AlphabetClassifier(small_catalog)

    # No letters at all
    assert len(classifier.filter_candidates("12345")) == len(small_catalog)
    # Letters of a script no catalog language is written in
    assert len(classifier.filter_candidates("שלום")) == len(small_catalog)


def test_character_rules_count_hits(small_catalog):
    english = small_catalog.get("en")
    spanish = small_catalog.get("es")

    hits = CharacterRules().count_hits("¿Qué tal, señor?", [english, spanish])

    assert hits == {spanish: 3}


def test_character_rules_without_distinctive_characters(small_catalog):
    assert CharacterRules().count_hits("hello", list(small_catalog)) == {}
