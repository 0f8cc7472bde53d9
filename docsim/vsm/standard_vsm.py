# docsim/vsm/standard_vsm.py
"""
Standard Vector Space Model

Single-threaded, dictionary-based model for small to medium corpora. Term
weights and magnitudes are computed once when the model is built; a pairwise
similarity is then a dot product over the shared terms of two documents.
"""
from typing import Sequence

from docsim.profiler import Profiler
from docsim.vsm.base import BaseVSM
from docsim.vsm.cosine import dot_product, magnitude, cosine_from_parts
from docsim.vsm.tfidf import compute_corpus_embeddings


class StandardVSM(BaseVSM):
    """
    Standard Vector Space Model implementation using sequential processing.

    Attributes:
        term_counts (List[Counter]): Token frequency map per document
        weights (Dict): {scheme: [per-document {term: weight}]}
        magnitudes (Dict): {scheme: [per-document magnitude]}
    """
    def __init__(self, doc_ids: Sequence[str], texts: Sequence[str], processor=None, profiler: Profiler = None):
        super().__init__(doc_ids, texts, processor, profiler)
        self.weights = {'tf': [], 'tfidf': []}
        self.magnitudes = {'tf': [], 'tfidf': []}
        self.build_model()

    def build_model(self):
        """
        Compute per-document weights and magnitudes for both schemes:
        - tf: raw term counts
        - tfidf: (count / document length) * ln(1 + N / (1 + df))
        """
        with self.profiler.timer("Tokenization"):
            self.term_counts = [self.processor.tokenize(text) for text in self.texts]

        with self.profiler.timer("TF-IDF Embeddings"):
            self.weights['tfidf'] = compute_corpus_embeddings(self.texts, self.processor)

        with self.profiler.timer("Weight Precomputation"):
            self.weights['tf'] = [dict(term_counts) for term_counts in self.term_counts]
            for scheme, vectors in self.weights.items():
                self.magnitudes[scheme] = [magnitude(vector) for vector in vectors]

    @property
    def embeddings(self):
        """TF-IDF vectors, index-aligned with the corpus."""
        return self.weights['tfidf']

    def similarity(self, doc1: int, doc2: int, weighting: str = 'tf') -> float:
        self._check_weighting(weighting)
        vec1 = self.weights[weighting][doc1]
        vec2 = self.weights[weighting][doc2]
        return cosine_from_parts(
            dot_product(vec1, vec2),
            self.magnitudes[weighting][doc1],
            self.magnitudes[weighting][doc2]
        )
