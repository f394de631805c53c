# constants.py
import math
import os

PACKAGE_PATH = os.path.dirname(os.path.abspath(__file__))
DATA_PATH = os.path.join(PACKAGE_PATH, 'data')
MODELS_PATH = os.path.join(DATA_PATH, 'models')

# Extension of the per-language frequency tables in MODELS_PATH.
MODEL_FILE_EXTENSION = '.json'

# Languages of the default catalog (ISO 639-1), in catalog order.
# The order is also the tie-break order of detection results.
DEFAULT_LANGUAGES = [
    'en',  # English
    'es',  # Spanish
    'fr',  # French
    'de',  # German
    'it',  # Italian
    'pt',  # Portuguese
    'ru',  # Russian
    'ja',  # Japanese
    'ko',  # Korean
    'zh',  # Chinese
    'id',  # Indonesian
    'ms',  # Malay
    'th',  # Thai
    'vi',  # Vietnamese
    'tl',  # Tagalog
    'my',  # Burmese
]

# N-gram orders covered by every model.
NGRAM_ORDERS = (1, 2, 3, 4, 5)
MAX_NGRAM_ORDER = max(NGRAM_ORDERS)

# Weight of each order in the raw score. Longer n-grams are more specific.
ORDER_WEIGHTS = {
    1: 1.0,
    2: 2.0,
    3: 3.0,
    4: 4.0,
    5: 5.0,
}

# Log-probability returned for n-grams absent from a model table.
# Must stay below every observed value.
UNSEEN_NGRAM_PROBABILITY = 1e-5
UNSEEN_NGRAM_LOG_PROBABILITY = math.log(UNSEEN_NGRAM_PROBABILITY)

# Scale applied to raw scores before the soft-max.
CONFIDENCE_SHARPNESS = 1.0

# Raw score bonus for text made entirely of characters distinctive of a language.
DISTINCTIVE_CHARACTER_WEIGHT = 4.0

# Longest text (in characters) accepted by a detection call.
MAX_TEXT_LENGTH = 100000

# Attempts to build the default catalog before giving up for the process.
CATALOG_LOAD_ATTEMPTS = 2

# Sentinel returned when no language can be detected.
UNKNOWN_LANGUAGE = 'Unknown'

# Log format used when a detector runs in verbose mode.
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
