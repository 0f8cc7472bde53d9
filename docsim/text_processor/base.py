# docsim/text_processor/base.py
from abc import ABC, abstractmethod
from collections import Counter
from typing import List


class BaseTextProcessor(ABC):
    def __init__(self, stopwords_file=None, include_stopwords=False, profiler=None):
        self.stopwords_file = stopwords_file
        self.include_stopwords = include_stopwords
        self.profiler = profiler

    @abstractmethod
    def _preprocess_text(self, text: str) -> List[str]: ...

    @abstractmethod
    def tokenize(self, text: str) -> Counter: ...
