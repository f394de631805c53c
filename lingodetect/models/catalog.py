# catalog.py
import json
import logging
import os
import threading
from typing import Dict, Iterable, List, Optional

from lingodetect.constants import (
    CATALOG_LOAD_ATTEMPTS,
    DEFAULT_LANGUAGES,
    MODEL_FILE_EXTENSION,
    MODELS_PATH,
)
from lingodetect.errors import InvalidInputError, ModelLoadError
from lingodetect.models.language import Language, lookup_iso_language
from lingodetect.models.ngram_model import NgramModel

logger = logging.getLogger(__name__)

# Required keys of a model file
MODEL_NAME_FIELD = 'name'
MODEL_ISO_CODE_FIELD = 'iso_code'
MODEL_SCRIPTS_FIELD = 'scripts'
MODEL_NGRAMS_FIELD = 'ngrams'


class LanguageCatalog:
    """
    Ordered, read-only collection of the languages a detector can report.

    The position of a language in the catalog is its tie-break rank when two
    languages end up with the same confidence.
    """

    def __init__(self, languages: Iterable[Language]):
        self._languages = tuple(languages)
        if not self._languages:
            raise ModelLoadError("A language catalog needs at least one language")

        self._by_key = {}
        for language in self._languages:
            for key in (language.name.lower(), language.iso_code, language.iso_code_639_3):
                if key in self._by_key:
                    raise ModelLoadError(f"Duplicate language in catalog: {key!r}")
                self._by_key[key] = language

        self._positions = {language: index for index, language in enumerate(self._languages)}

    # -------------------------------------------------
    # Construction
    # -------------------------------------------------

    @classmethod
    def from_definitions(cls, definitions: Iterable[Dict]) -> "LanguageCatalog":
        """
        Build a catalog from in-memory model definitions.

        Args:
            definitions: Dictionaries with the layout of a model file:
                {"name": ..., "iso_code": ..., "scripts": [...], "ngrams": {"1": {...}, ...}}

        Returns:
            LanguageCatalog
        """
        return cls(build_language(definition) for definition in definitions)

    @classmethod
    def from_directory(cls, models_path: str = MODELS_PATH, iso_codes: Optional[List[str]] = None) -> "LanguageCatalog":
        """
        Load a catalog from a directory of JSON model files named <iso_code>.json.

        Args:
            models_path: Directory holding the model files.
            iso_codes: Languages to load, in catalog order. Defaults to DEFAULT_LANGUAGES.

        Returns:
            LanguageCatalog
        """
        iso_codes = list(iso_codes) if iso_codes is not None else list(DEFAULT_LANGUAGES)
        languages = []
        for iso_code in iso_codes:
            path = os.path.join(models_path, f"{iso_code}{MODEL_FILE_EXTENSION}")
            definition = load_model_file(path)
            language = build_language(definition)
            if language.iso_code != iso_code:
                raise ModelLoadError(
                    f"Model file {path} declares ISO code {language.iso_code!r}, expected {iso_code!r}"
                )
            logger.debug(f"Loaded {language.name} model: {language.model!r}")
            languages.append(language)
        logger.info(f"Loaded {len(languages)} language models from {models_path}")
        return cls(languages)

    # -------------------------------------------------
    # Queries
    # -------------------------------------------------

    @property
    def languages(self):
        return self._languages

    def get(self, key: str) -> Optional[Language]:
        """
        Find a language by canonical name, ISO 639-1 or ISO 639-3 code
        (case insensitive). Returns None if the catalog does not hold it.
        """
        if isinstance(key, Language):
            return key if key in self._positions else None
        if not isinstance(key, str):
            return None
        key = key.strip().lower()
        language = self._by_key.get(key)
        if language is None:
            # Other spellings pycountry knows, e.g. 'fre' (ISO 639-2/B) or 'Malay (macrolanguage)'
            record = lookup_iso_language(key)
            if record is not None:
                language = self._by_key.get(getattr(record, 'alpha_2', '')) or self._by_key.get(record.alpha_3)
        return language

    def position(self, language: Language) -> int:
        """Catalog rank of a language, used to break ties deterministically."""
        return self._positions[language]

    def subset(self, keys: Iterable[str]) -> "LanguageCatalog":
        """
        New catalog restricted to the given languages, keeping catalog order.

        Raises:
            InvalidInputError: if a key does not match any language of this catalog.
        """
        selected = set()
        for key in keys:
            language = self.get(key)
            if language is None:
                raise InvalidInputError(f"Unknown language: {key!r}")
            selected.add(language)
        return LanguageCatalog(language for language in self._languages if language in selected)

    def __iter__(self):
        return iter(self._languages)

    def __len__(self):
        return len(self._languages)

    def __contains__(self, item):
        return self.get(item) is not None

    def __repr__(self):
        return f"LanguageCatalog({[language.name for language in self._languages]})"


def load_model_file(path: str) -> Dict:
    """Read one JSON model file, turning I/O and syntax errors into ModelLoadError."""
    if not os.path.exists(path):
        raise ModelLoadError(f"Model file not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise ModelLoadError(f"Could not read model file {path}: {e}") from e


def build_language(definition: Dict) -> Language:
    """Build a Language (with its n-gram model) from a model definition."""
    if not isinstance(definition, dict):
        raise ModelLoadError(f"Model definition must be an object, got {type(definition).__name__}")
    missing = [key for key in (MODEL_NAME_FIELD, MODEL_ISO_CODE_FIELD, MODEL_SCRIPTS_FIELD, MODEL_NGRAMS_FIELD)
               if key not in definition]
    if missing:
        raise ModelLoadError(f"Model definition is missing fields: {missing}")

    ngrams = definition[MODEL_NGRAMS_FIELD]
    if not isinstance(ngrams, dict):
        raise ModelLoadError(f"'{MODEL_NGRAMS_FIELD}' of {definition[MODEL_NAME_FIELD]!r} must be an object")

    model = NgramModel.from_frequencies(ngrams)
    return Language.create(
        name=definition[MODEL_NAME_FIELD],
        iso_code=definition[MODEL_ISO_CODE_FIELD],
        scripts=definition[MODEL_SCRIPTS_FIELD],
        model=model,
    )


############################################
### Process-wide default catalog

_default_catalog = None
_default_catalog_error = None
_default_catalog_lock = threading.Lock()


def get_default_catalog() -> LanguageCatalog:
    """
    Return the shared catalog built from the packaged model files.

    The catalog is built on first use, once per process. A failed build is
    retried up to CATALOG_LOAD_ATTEMPTS times; after that the failure is
    remembered and raised again without touching the model files.

    Raises:
        ModelLoadError: if the catalog cannot be built.
    """
    global _default_catalog, _default_catalog_error

    if _default_catalog is not None:
        return _default_catalog

    with _default_catalog_lock:
        if _default_catalog is not None:
            return _default_catalog
        if _default_catalog_error is not None:
            raise ModelLoadError(f"Default language catalog is unavailable: {_default_catalog_error}")

        last_error = None
        for attempt in range(1, CATALOG_LOAD_ATTEMPTS + 1):
            try:
                _default_catalog = LanguageCatalog.from_directory(MODELS_PATH)
                return _default_catalog
            except ModelLoadError as e:
                last_error = e
                logger.warning(f"Loading language models failed (attempt {attempt}/{CATALOG_LOAD_ATTEMPTS}): {e}")

        _default_catalog_error = last_error
        logger.error(f"Giving up on the default language catalog: {last_error}")
        raise ModelLoadError(f"Default language catalog is unavailable: {last_error}") from last_error
