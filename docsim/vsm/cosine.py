# docsim/vsm/cosine.py
"""
Cosine similarity over sparse term vectors.

A vector is any mapping term -> non-negative weight. Terms missing from a
mapping have weight 0. Raw counts (word-frequency cosine) and TF-IDF weights
go through the same function.
"""
import math
from typing import Mapping

from docsim.text_processor import get_default_processor


def magnitude(vector: Mapping[str, float]) -> float:
    return math.sqrt(sum(w * w for w in vector.values()))


def dot_product(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
    # Only shared terms contribute; iterate the smaller vector
    if len(vec_a) > len(vec_b):
        vec_a, vec_b = vec_b, vec_a
    return sum(weight * vec_b.get(term, 0) for term, weight in vec_a.items())


def cosine_similarity(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
    """
    Compute the cosine of the angle between two sparse vectors.

    Args:
        vec_a (Mapping[str, float]): First vector
        vec_b (Mapping[str, float]): Second vector

    Returns:
        float: Similarity in [0, 1]; 0.0 when either vector has zero magnitude
    """
    magnitude_a = magnitude(vec_a)
    magnitude_b = magnitude(vec_b)
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0
    return cosine_from_parts(dot_product(vec_a, vec_b), magnitude_a, magnitude_b)


def text_cosine_similarity(text1: str, text2: str, processor=None) -> float:
    """Word-frequency cosine of two raw texts (counts as weights)."""
    processor = processor or get_default_processor()
    return cosine_similarity(processor.tokenize(text1), processor.tokenize(text2))


def cosine_from_parts(dot: float, magnitude_a: float, magnitude_b: float) -> float:
    """Cosine from a precomputed dot product and magnitudes, clamped to [0, 1]."""
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0
    return min(1.0, dot / (magnitude_a * magnitude_b))
