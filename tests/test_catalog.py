import copy
import json
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from lingodetect.constants import CATALOG_LOAD_ATTEMPTS, DEFAULT_LANGUAGES
from lingodetect.errors import InvalidInputError, ModelLoadError
from lingodetect.models import catalog as catalog_module
from lingodetect.models.catalog import LanguageCatalog, get_default_catalog

from model_definitions import DEFINITIONS, ENGLISH, RUSSIAN, SPANISH


def test_lookup_by_name_and_iso_codes(small_catalog):
    english = small_catalog.get("English")

    assert english.iso_code == "en"
    assert english.iso_code_639_3 == "eng"
    assert small_catalog.get("en") is english
    assert small_catalog.get("ENG") is english
    assert small_catalog.get(" english ") is english
    assert small_catalog.get(english) is english


def test_lookup_of_unknown_language(small_catalog):
    assert small_catalog.get("fr") is None
    assert small_catalog.get("not a language") is None
    assert small_catalog.get(42) is None
    assert "ru" in small_catalog
    assert "de" not in small_catalog


def test_catalog_order_and_positions(small_catalog):
    assert [language.name for language in small_catalog] == ["English", "Spanish", "Russian"]
    assert len(small_catalog) == 3
    assert small_catalog.position(small_catalog.get("ru")) == 2


def test_subset_keeps_catalog_order(small_catalog):
    subset = small_catalog.subset(["Russian", "en"])

    assert [language.name for language in subset] == ["English", "Russian"]
    assert subset.position(subset.get("ru")) == 1


def test_subset_with_unknown_language(small_catalog):
    with pytest.raises(InvalidInputError):
        small_catalog.subset(["en", "xx"])


def test_duplicate_languages_are_rejected():
    with pytest.raises(ModelLoadError):
        LanguageCatalog.from_definitions([ENGLISH, SPANISH, ENGLISH])


def test_empty_catalog_is_rejected():
    with pytest.raises(ModelLoadError):
        LanguageCatalog([])


def test_unknown_iso_code_is_rejected():
    definition = copy.deepcopy(ENGLISH)
    definition["iso_code"] = "xx"
    with pytest.raises(ModelLoadError):
        LanguageCatalog.from_definitions([definition])


@pytest.mark.parametrize("field", ["name", "iso_code", "scripts", "ngrams"])
def test_missing_field_is_rejected(field):
    definition = copy.deepcopy(RUSSIAN)
    del definition[field]
    with pytest.raises(ModelLoadError):
        LanguageCatalog.from_definitions([definition])


def write_models(directory, definitions):
    for definition in definitions:
        path = directory / f"{definition['iso_code']}.json"
        path.write_text(json.dumps(definition, ensure_ascii=False), encoding="utf-8")


def test_from_directory(tmp_path):
    write_models(tmp_path, DEFINITIONS)

    catalog = LanguageCatalog.from_directory(str(tmp_path), ["ru", "en"])

    assert [language.iso_code for language in catalog] == ["ru", "en"]


def test_from_directory_with_missing_file(tmp_path):
    write_models(tmp_path, [ENGLISH])
    with pytest.raises(ModelLoadError):
        LanguageCatalog.from_directory(str(tmp_path), ["en", "es"])


def test_from_directory_with_corrupt_file(tmp_path):
    (tmp_path / "en.json").write_text("{ not json", encoding="utf-8")
    with pytest.raises(ModelLoadError):
        LanguageCatalog.from_directory(str(tmp_path), ["en"])


def test_from_directory_with_mismatched_iso_code(tmp_path):
    (tmp_path / "es.json").write_text(json.dumps(ENGLISH), encoding="utf-8")
    with pytest.raises(ModelLoadError):
        LanguageCatalog.from_directory(str(tmp_path), ["es"])


def test_default_catalog_holds_the_packaged_languages():
    catalog = get_default_catalog()

    assert [language.iso_code for language in catalog] == DEFAULT_LANGUAGES
    assert get_default_catalog() is catalog
    assert catalog.get("fre").name == "French"
    assert catalog.get("Burmese").scripts == frozenset({"Myanmar"})


def test_default_catalog_failure_is_retried_then_cached(monkeypatch):
    calls = []

    def failing_load(*args, **kwargs):
        calls.append(args)
        raise ModelLoadError("disk on fire")

    monkeypatch.setattr(catalog_module, "_default_catalog", None)
    monkeypatch.setattr(catalog_module, "_default_catalog_error", None)
    monkeypatch.setattr(catalog_module.LanguageCatalog, "from_directory", failing_load)

    with pytest.raises(ModelLoadError):
        get_default_catalog()
    assert len(calls) == CATALOG_LOAD_ATTEMPTS

    with pytest.raises(ModelLoadError, match="disk on fire"):
        get_default_catalog()
    assert len(calls) == CATALOG_LOAD_ATTEMPTS


def test_default_catalog_recovers_on_retry(monkeypatch):
    real_load = LanguageCatalog.from_directory
    calls = []

    def flaky_load(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            raise ModelLoadError("transient")
        return real_load(*args, **kwargs)

    monkeypatch.setattr(catalog_module, "_default_catalog", None)
    monkeypatch.setattr(catalog_module, "_default_catalog_error", None)
    monkeypatch.setattr(catalog_module.LanguageCatalog, "from_directory", flaky_load)

    catalog = get_default_catalog()

    assert len(calls) == 2
    assert len(catalog) == len(DEFAULT_LANGUAGES)


def test_concurrent_first_users_share_one_build(monkeypatch):
    real_load = LanguageCatalog.from_directory
    calls = []
    workers = 8
    barrier = threading.Barrier(workers)

    def counting_load(*args, **kwargs):
        calls.append(args)
        return real_load(*args, **kwargs)

    def first_use(_):
        barrier.wait(timeout=30)
        return get_default_catalog()

    monkeypatch.setattr(catalog_module, "_default_catalog", None)
    monkeypatch.setattr(catalog_module, "_default_catalog_error", None)
    monkeypatch.setattr(catalog_module.LanguageCatalog, "from_directory", counting_load)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        catalogs = list(executor.map(first_use, range(workers)))

    assert len(calls) == 1
    assert all(catalog is catalogs[0] for catalog in catalogs)
