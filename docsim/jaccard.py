# docsim/jaccard.py
"""Set-overlap similarity over the distinct (stopword-filtered) words of two texts."""
from typing import AbstractSet

from docsim.text_processor import get_default_processor


def jaccard_from_sets(words1: AbstractSet[str], words2: AbstractSet[str]) -> float:
    # Two empty sets carry nothing to tell them apart
    if not words1 and not words2:
        return 1.0
    return len(words1 & words2) / len(words1 | words2)


def jaccard_similarity(text1: str, text2: str, processor=None) -> float:
    """
    |intersection| / |union| of the word sets of two texts.

    Args:
        text1 (str): First text
        text2 (str): Second text
        processor (optional): Text processor (default: shared stopword-filtering processor)

    Returns:
        float: Similarity in [0, 1]; 1.0 when both texts have no words
    """
    processor = processor or get_default_processor()
    return jaccard_from_sets(processor.vocabulary(text1), processor.vocabulary(text2))
