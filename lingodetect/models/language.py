"""
Catalog entry for one detectable language.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

import pycountry

from lingodetect.errors import ModelLoadError
from lingodetect.models.ngram_model import NgramModel


@dataclass(frozen=True)
class Language:
    """
    A language the detector can report.

    Attributes:
        name: Canonical English name (e.g. 'English'), the value reported
            by detection results
        iso_code: ISO 639-1 code (e.g. 'en')
        iso_code_639_3: ISO 639-3 code (e.g. 'eng')
        scripts: Script tags of the writing systems the language is written in
        model: Character n-gram model of the language
    """
    name: str
    iso_code: str
    iso_code_639_3: str
    scripts: FrozenSet[str]
    model: NgramModel = field(repr=False, compare=False)

    @classmethod
    def create(cls, name, iso_code, scripts, model):
        """
        Build a language, resolving its ISO 639-3 code through pycountry.

        Raises:
            ModelLoadError: if the ISO 639-1 code is unknown or no script is given.
        """
        iso_code = (iso_code or '').strip().lower()
        record = lookup_iso_language(iso_code)
        if record is None or not hasattr(record, 'alpha_2'):
            raise ModelLoadError(f"Unknown ISO 639-1 code for {name!r}: {iso_code!r}")
        if not scripts:
            raise ModelLoadError(f"Language {name!r} declares no writing system")
        return cls(
            name=name,
            iso_code=record.alpha_2,
            iso_code_639_3=record.alpha_3,
            scripts=frozenset(scripts),
            model=model,
        )

    def uses_any_script(self, scripts) -> bool:
        return not self.scripts.isdisjoint(scripts)

    def __str__(self):
        return self.name


def lookup_iso_language(code: str) -> Optional[object]:
    """
    Look up an ISO 639 language record.

    Args:
        code (str): ISO 639-1, ISO 639-3 or bibliographic code, or a language
            name known to pycountry

    Returns:
        pycountry language record or None if not found
    """
    code = (code or '').strip()
    if not code:
        return None
    try:
        if len(code) == 2:
            return pycountry.languages.get(alpha_2=code.lower())
        return pycountry.languages.lookup(code)
    except (KeyError, LookupError):
        return None
