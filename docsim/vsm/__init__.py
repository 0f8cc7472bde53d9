# docsim/vsm/__init__.py
from .base import BaseVSM, WEIGHTINGS
from .cosine import cosine_similarity
from .tfidf import (compute_tfidf, compute_corpus_embeddings, embedding_similarity,
                    document_frequency, build_document_frequencies, inverse_document_frequency)
from .standard_vsm import StandardVSM
from .sparse_vsm import SparseVSM
from .factory import VSMFactory
