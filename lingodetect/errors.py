"""
Exceptions raised by LingoDetect.

Empty or letter-free text is not an error: detection returns the
"Unknown" sentinel or an empty result list instead.
"""


class LingoDetectError(Exception):
    """Base class for all LingoDetect errors."""


class InvalidInputError(LingoDetectError, ValueError):
    """
    The caller passed something that cannot be analysed as text.

    Raised for text longer than the configured maximum, bytes that are not
    valid UTF-8, strings with lone surrogates, non-text values and
    out-of-range query parameters. Retrying without correcting the input
    fails the same way.
    """


class ModelLoadError(LingoDetectError, RuntimeError):
    """The language catalog or one of its n-gram models could not be built."""
