"""
docsim: pairwise text similarity for a fixed corpus of documents.

Word-frequency cosine, Levenshtein distance and its normalized similarity,
Jaccard overlap, and corpus-aware TF-IDF cosine.
"""
from docsim.text_processor import StandardTextProcessor, tokenize
from docsim.vsm import (cosine_similarity, compute_tfidf, compute_corpus_embeddings,
                        embedding_similarity, VSMFactory, StandardVSM, SparseVSM)
from docsim.vsm.cosine import text_cosine_similarity
from docsim.edit_distance import levenshtein_distance, normalized_levenshtein
from docsim.jaccard import jaccard_similarity
from docsim.comparison import (DocumentComparator, ComparisonResult, compare_documents,
                               top_pairs, METRICS, DEFAULT_METRICS)
from docsim.profiler import Profiler

__version__ = "0.1.0"

__all__ = [
    'StandardTextProcessor',
    'tokenize',
    'cosine_similarity',
    'text_cosine_similarity',
    'compute_tfidf',
    'compute_corpus_embeddings',
    'embedding_similarity',
    'VSMFactory',
    'StandardVSM',
    'SparseVSM',
    'levenshtein_distance',
    'normalized_levenshtein',
    'jaccard_similarity',
    'DocumentComparator',
    'ComparisonResult',
    'compare_documents',
    'top_pairs',
    'METRICS',
    'DEFAULT_METRICS',
    'Profiler'
]
