# docsim/edit_distance.py
"""
Edit-Distance Engine

Levenshtein distance over raw text: case-sensitive, whitespace-sensitive,
no tokenization. Two documents that differ only in line wrapping are far
apart here while being identical to the token-based metrics.

The dynamic program is the classic (len(a) + 1) x (len(b) + 1) grid,

    d[i][j] = min(d[i-1][j] + 1, d[i][j-1] + 1, d[i-1][j-1] + (a[i-1] != b[j-1]))

filled one row at a time with NumPy. Within a row the insertion term is a
running minimum: d[i][j] = min over k <= j of (t[k] + j - k), where t is the
row before insertions are applied, which np.minimum.accumulate does in C.
Time is O(len(a) * len(b)); this is by far the most expensive metric on
page-sized documents.
"""
import numpy as np


def _check_text(text):
    if not isinstance(text, str):
        raise TypeError(f"Text must be a str, got {type(text).__name__}")


def _code_points(text: str) -> np.ndarray:
    return np.frombuffer(text.encode('utf-32-le', 'surrogatepass'), dtype=np.uint32)


def levenshtein_distance(text1: str, text2: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning text1 into text2.

    Args:
        text1 (str): First text
        text2 (str): Second text

    Returns:
        int: Distance in [0, max(len(text1), len(text2))]

    Raises:
        TypeError: If either argument is not a string
    """
    _check_text(text1)
    _check_text(text2)

    if not text1:
        return len(text2)
    if not text2:
        return len(text1)

    # Shorter text runs along the row
    if len(text2) > len(text1):
        text1, text2 = text2, text1

    chars1 = _code_points(text1)
    chars2 = _code_points(text2)
    offsets = np.arange(len(text2) + 1, dtype=np.int64)

    previous = offsets.copy()
    current = np.empty_like(previous)
    for i in range(1, len(text1) + 1):
        cost = (chars2 != chars1[i - 1]).astype(np.int64)
        current[0] = i
        np.minimum(previous[1:] + 1, previous[:-1] + cost, out=current[1:])
        # Apply insertions: running minimum of (current[k] - k), shifted back by j
        current = np.minimum.accumulate(current - offsets) + offsets
        previous, current = current, previous

    return int(previous[-1])


def normalized_levenshtein(text1: str, text2: str) -> float:
    """
    Levenshtein similarity scaled to [0, 1]: 1 - distance / max length.

    Two empty strings are identical and score 1.0.
    """
    _check_text(text1)
    _check_text(text2)

    max_length = max(len(text1), len(text2))
    if max_length == 0:
        return 1.0

    distance = levenshtein_distance(text1, text2)
    return 1.0 - distance / max_length
