import pytest

from lingodetect.models.catalog import LanguageCatalog

from model_definitions import DEFINITIONS


@pytest.fixture
def small_catalog():
    return LanguageCatalog.from_definitions(DEFINITIONS)
