# docsim/text_processor/__init__.py
from collections import Counter

from .base import BaseTextProcessor
from .standard_processor import StandardTextProcessor, DEFAULT_STOPWORDS_FILE

_default_processors = {}


def get_default_processor(include_stopwords=False) -> StandardTextProcessor:
    """Return a shared processor using the bundled stopword list."""
    if include_stopwords not in _default_processors:
        _default_processors[include_stopwords] = StandardTextProcessor(include_stopwords=include_stopwords)
    return _default_processors[include_stopwords]


def tokenize(text: str, include_stopwords=False) -> Counter:
    return get_default_processor(include_stopwords).tokenize(text)


__all__ = [
    'BaseTextProcessor',
    'StandardTextProcessor',
    'DEFAULT_STOPWORDS_FILE',
    'get_default_processor',
    'tokenize'
]
