# docsim/text_processor/standard_processor.py
"""
Standard Text Processor

Turns raw document text into a token frequency map: lowercase, split into
runs of word characters, drop stopwords, count. No stemming is applied, so
"cats" and "cat" stay distinct terms.
"""
import os
import logging
from collections import Counter
from typing import List, Set

from nltk.tokenize import RegexpTokenizer

from docsim.text_processor.base import BaseTextProcessor

DEFAULT_STOPWORDS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'stopwords.txt')


class StandardTextProcessor(BaseTextProcessor):
    """
    Word-boundary tokenizer with an optional stopword filter.

    Attributes:
        stopwords (Set[str]): Lowercased stopwords loaded from the stopwords file
        tokenizer (RegexpTokenizer): Matches maximal runs of word characters
    """
    def __init__(self, stopwords_file=None, include_stopwords=False, profiler=None):
        super().__init__(stopwords_file or DEFAULT_STOPWORDS_FILE, include_stopwords, profiler)
        self.logger = logging.getLogger('docsim.text_processor')
        self.stopwords = self._load_stopwords(self.stopwords_file)
        # \w+ matches leave no empty tokens behind, unlike a split on \W+
        self.tokenizer = RegexpTokenizer(r'\w+')

    def _load_stopwords(self, filepath) -> Set[str]:
        with open(filepath, encoding="utf-8") as file:
            stopwords = {line.strip().lower() for line in file if line.strip()}
        self.logger.debug(f"Loaded {len(stopwords)} stopwords from {filepath}")
        return stopwords

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self.stopwords

    def _preprocess_text(self, text: str) -> List[str]:
        if not isinstance(text, str):
            raise TypeError(f"Document text must be a str, got {type(text).__name__}")

        tokens = self.tokenizer.tokenize(text.lower())
        tokens = [t for t in tokens if t.strip()]

        if not self.include_stopwords:
            tokens = [t for t in tokens if t not in self.stopwords]
        return tokens

    def tokenize(self, text: str) -> Counter:
        """
        Build the token frequency map of a text.

        Args:
            text (str): Raw document text

        Returns:
            Counter: word -> occurrence count; empty for empty or all-stopword text

        Raises:
            TypeError: If text is not a string
        """
        return Counter(self._preprocess_text(text))

    def vocabulary(self, text: str) -> Set[str]:
        return set(self._preprocess_text(text))
