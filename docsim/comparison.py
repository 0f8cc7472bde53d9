# docsim/comparison.py
"""
Comparison Orchestrator

Scores every unordered pair of distinct documents in a corpus under one or
more metrics. Pairs are enumerated for indices i < j in corpus order, so a
document is never compared with itself and no pair appears twice.

Per-document artifacts (token maps, word sets, TF and TF-IDF vectors) are
computed once per comparator and shared by all pairs.
"""
import heapq
import logging
from typing import Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from docsim.edit_distance import levenshtein_distance, normalized_levenshtein
from docsim.jaccard import jaccard_from_sets
from docsim.profiler import Profiler
from docsim.text_processor import get_default_processor
from docsim.vsm.factory import VSMFactory

METRICS = ('cosine', 'levenshtein', 'normalized_levenshtein', 'jaccard', 'tfidf')
DEFAULT_METRICS = METRICS

# Metrics where a smaller score means more similar
DISTANCE_METRICS = frozenset({'levenshtein'})


class ComparisonResult(NamedTuple):
    doc1: str
    doc2: str
    metric: str
    score: Union[float, int]

    @property
    def pair_key(self) -> Tuple[str, str]:
        return (self.doc1, self.doc2)


def validate_metrics(metrics: Iterable[str]) -> List[str]:
    metrics = list(metrics)
    unknown = [m for m in metrics if m not in METRICS]
    if unknown:
        raise ValueError(f"Unknown metric(s): {', '.join(unknown)}. Choose from {', '.join(METRICS)}")
    return metrics


class DocumentComparator:
    """
    Pairwise document comparison over a fixed corpus.

    Attributes:
        doc_ids (List[str]): Document identifiers in corpus order
        texts (List[str]): Raw texts, index-aligned with doc_ids
        processor: Text processor used by the token-based metrics
        profiler (Profiler): Timing of each metric
        vsm_mode (str): Vector model used for 'cosine' and 'tfidf' ('auto', 'standard', 'sparse')
    """
    def __init__(self, documents: Union[Mapping[str, str], Sequence[Tuple[str, str]]],
                 processor=None, profiler: Profiler = None, vsm_mode: str = 'auto',
                 sparse_threshold: Optional[int] = None):
        """
        Args:
            documents: Mapping doc_id -> text (iteration order is corpus order),
                       or a sequence of (doc_id, text) pairs
            processor (optional): Text processor (default: shared stopword-filtering processor)
            profiler (Profiler, optional): Performance profiler
            vsm_mode (str): Vector model selection passed to VSMFactory
            sparse_threshold (int, optional): Document count at which 'auto' picks the sparse model

        Raises:
            TypeError: If any text is not a string
            ValueError: If a document id appears twice or vsm_mode is unknown
        """
        pairs = list(documents.items()) if isinstance(documents, Mapping) else list(documents)

        self.doc_ids = [doc_id for doc_id, _ in pairs]
        self.texts = [text for _, text in pairs]
        if len(set(self.doc_ids)) != len(self.doc_ids):
            raise ValueError("Document ids must be unique")
        for doc_id, text in pairs:
            if not isinstance(text, str):
                raise TypeError(f"Text of document {doc_id!r} must be a str, got {type(text).__name__}")

        self.processor = processor or get_default_processor()
        self.profiler = profiler or Profiler()
        self.vsm_mode = vsm_mode
        self.sparse_threshold = sparse_threshold
        # Raises ValueError for an unknown mode
        VSMFactory.select_mode(len(self.doc_ids), vsm_mode, sparse_threshold)

        self.logger = logging.getLogger('docsim.comparator')
        self._vsm = None
        self._vocabularies = None

    @property
    def doc_count(self) -> int:
        return len(self.doc_ids)

    @property
    def pair_count(self) -> int:
        return self.doc_count * (self.doc_count - 1) // 2

    def pairs(self):
        """Yield (i, j) index pairs with i < j in corpus order."""
        for i in range(self.doc_count):
            for j in range(i + 1, self.doc_count):
                yield i, j

    @property
    def vsm(self):
        """Vector model over the corpus, built on first use."""
        if self._vsm is None:
            self._vsm = VSMFactory.create_vsm(
                self.doc_ids, self.texts,
                mode=self.vsm_mode,
                processor=self.processor,
                profiler=self.profiler,
                sparse_threshold=self.sparse_threshold
            )
        return self._vsm

    def _vector_scores(self, metric: str) -> List[ComparisonResult]:
        weighting = 'tf' if metric == 'cosine' else 'tfidf'
        return [
            ComparisonResult(doc1, doc2, metric, score)
            for doc1, doc2, score in self.vsm.pairwise_similarities(weighting)
        ]

    def _jaccard_scores(self) -> List[ComparisonResult]:
        if self._vocabularies is None:
            self._vocabularies = [self.processor.vocabulary(text) for text in self.texts]
        vocabularies = self._vocabularies
        return [
            ComparisonResult(self.doc_ids[i], self.doc_ids[j], 'jaccard',
                             jaccard_from_sets(vocabularies[i], vocabularies[j]))
            for i, j in self.pairs()
        ]

    def _edit_scores(self, metric: str) -> List[ComparisonResult]:
        score_fn = levenshtein_distance if metric == 'levenshtein' else normalized_levenshtein
        return [
            ComparisonResult(self.doc_ids[i], self.doc_ids[j], metric,
                             score_fn(self.texts[i], self.texts[j]))
            for i, j in self.pairs()
        ]

    def compare_metric(self, metric: str) -> List[ComparisonResult]:
        """
        Score every pair under a single metric.

        Raises:
            ValueError: If metric is not recognized
        """
        validate_metrics([metric])
        if self.doc_count < 2:
            return []

        with self.profiler.timer(f"Metric: {metric}"):
            if metric in ('cosine', 'tfidf'):
                return self._vector_scores(metric)
            if metric == 'jaccard':
                return self._jaccard_scores()
            return self._edit_scores(metric)

    def compare(self, metrics: Iterable[str] = DEFAULT_METRICS) -> List[ComparisonResult]:
        """
        Score every pair under each requested metric.

        Args:
            metrics (Iterable[str]): Metric names, see METRICS

        Returns:
            List[ComparisonResult]: Results grouped by metric (in the order
                                    requested), pairs in corpus order

        Raises:
            ValueError: If any metric is not recognized
        """
        metrics = validate_metrics(metrics)
        self.logger.info(f"Comparing {self.doc_count} documents ({self.pair_count} pairs) "
                         f"with metrics: {', '.join(metrics)}")
        results = []
        for metric in metrics:
            results.extend(self.compare_metric(metric))
        return results


def compare_documents(documents, metrics: Iterable[str] = DEFAULT_METRICS, **kwargs) -> List[ComparisonResult]:
    """Build a DocumentComparator for documents and run compare(metrics)."""
    return DocumentComparator(documents, **kwargs).compare(metrics)


def top_pairs(results: Iterable[ComparisonResult], metric: str, k: int = 10) -> List[ComparisonResult]:
    """
    The k most similar pairs under one metric.

    For distance metrics (levenshtein) the smallest scores are the most
    similar. Ties keep their corpus order.
    """
    validate_metrics([metric])
    selected = [r for r in results if r.metric == metric]
    if metric in DISTANCE_METRICS:
        return heapq.nsmallest(k, selected, key=lambda r: r.score)
    return heapq.nlargest(k, selected, key=lambda r: r.score)
