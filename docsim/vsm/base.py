# docsim/vsm/base.py
"""
Base Vector Space Model Interface

This module defines the base class for the vector space models. A model is
built once for a fixed corpus and holds one weight vector per document for
each weighting scheme, so every pairwise comparison reuses the same vectors.
"""
from typing import List, Sequence, Tuple

from docsim.profiler import Profiler
from docsim.text_processor import get_default_processor

WEIGHTINGS = ('tf', 'tfidf')


class BaseVSM:
    """
    Base class for Vector Space Model implementations.

    Attributes:
        doc_ids (List[str]): Document identifiers in corpus order
        texts (List[str]): Raw document texts, index-aligned with doc_ids
        processor: Text processor used to tokenize the corpus
        profiler (Profiler): Performance monitoring utility for timing operations
    """
    def __init__(self, doc_ids: Sequence[str], texts: Sequence[str], processor=None, profiler: Profiler = None):
        """
        Initialize the base Vector Space Model.

        Args:
            doc_ids (Sequence[str]): Document identifiers
            texts (Sequence[str]): Raw texts, same length and order as doc_ids
            processor (optional): Text processor (default: shared stopword-filtering processor)
            profiler (Profiler, optional): Performance profiler for timing operations

        Raises:
            ValueError: If doc_ids and texts differ in length
            TypeError: If any text is not a string
        """
        if len(doc_ids) != len(texts):
            raise ValueError(f"Got {len(doc_ids)} document ids for {len(texts)} texts")
        for doc_id, text in zip(doc_ids, texts):
            if not isinstance(text, str):
                raise TypeError(f"Text of document {doc_id!r} must be a str, got {type(text).__name__}")

        self.doc_ids = list(doc_ids)
        self.texts = list(texts)
        self.processor = processor or get_default_processor()
        self.profiler = profiler or Profiler()

    @property
    def doc_count(self) -> int:
        return len(self.doc_ids)

    @staticmethod
    def _check_weighting(weighting: str):
        if weighting not in WEIGHTINGS:
            raise ValueError(f"Unknown weighting scheme: {weighting}")

    def similarity(self, doc1: int, doc2: int, weighting: str = 'tf') -> float:
        """
        Cosine similarity between two documents of the corpus.

        Args:
            doc1 (int): Index of the first document
            doc2 (int): Index of the second document
            weighting (str): Weighting scheme to use ('tf' or 'tfidf')

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement similarity()")

    def pairwise_similarities(self, weighting: str = 'tf') -> List[Tuple[str, str, float]]:
        """
        Score every unordered pair of distinct documents.

        Pairs are emitted for indices i < j in corpus order, each exactly once.

        Returns:
            List[Tuple[str, str, float]]: (doc1, doc2, similarity) tuples
        """
        self._check_weighting(weighting)
        with self.profiler.timer(f"Pairwise Similarity ({weighting})"):
            return [
                (self.doc_ids[i], self.doc_ids[j], self.similarity(i, j, weighting))
                for i in range(self.doc_count)
                for j in range(i + 1, self.doc_count)
            ]
