# article_analyzer/exceptions.py
"""
Error types raised by the bias annotator.
"""


class BiasScanError(Exception):
    """Base error for the bias scanning engine."""


class InvalidInputError(BiasScanError, TypeError):
    """Raised when the text to scan is missing or is not a string."""


class LexiconError(BiasScanError, ValueError):
    """Raised when a lexicon definition is malformed."""
