import pytest

from docsim.edit_distance import levenshtein_distance, normalized_levenshtein


def reference_distance(a, b):
    grid = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        grid[i][0] = i
    for j in range(len(b) + 1):
        grid[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            grid[i][j] = min(grid[i - 1][j] + 1, grid[i][j - 1] + 1, grid[i - 1][j - 1] + cost)
    return grid[len(a)][len(b)]


def test_kitten_sitting():
    assert levenshtein_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("a, b, expected", [
    ("", "", 0),
    ("", "abc", 3),
    ("abc", "", 3),
    ("abc", "abc", 0),
    ("flaw", "lawn", 2),
    ("intention", "execution", 5),
    ("a", "b", 1),
])
def test_known_distances(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_case_and_whitespace_sensitive():
    assert levenshtein_distance("Cat", "cat") == 1
    assert levenshtein_distance("the cat", "the  cat") == 1
    assert levenshtein_distance("line one\nline two", "line one line two") == 1


@pytest.mark.parametrize("a, b", [
    ("gumbo", "gambol"),
    ("The quick brown fox", "the quick brown fox jumps"),
    ("abcdefghij", "jihgfedcba"),
    ("mississippi", "missouri"),
    ("café au lait", "cafe au lait"),
    ("aaaaab", "baaaaa"),
])
def test_matches_full_grid_dynamic_program(a, b):
    assert levenshtein_distance(a, b) == reference_distance(a, b)
    assert levenshtein_distance(b, a) == reference_distance(a, b)


def test_bounded_by_longer_length():
    a, b = "short", "a considerably longer string"
    assert 0 <= levenshtein_distance(a, b) <= max(len(a), len(b))


def test_rejects_none():
    with pytest.raises(TypeError):
        levenshtein_distance(None, "abc")
    with pytest.raises(TypeError):
        normalized_levenshtein("abc", None)


def test_normalized_empty_strings_are_identical():
    assert normalized_levenshtein("", "") == 1.0


@pytest.mark.parametrize("a, b, expected", [
    ("abc", "abc", 1.0),
    ("abc", "abd", 1 - 1 / 3),
    ("", "abcd", 0.0),
    ("kitten", "sitting", 1 - 3 / 7),
])
def test_normalized_values(a, b, expected):
    assert normalized_levenshtein(a, b) == pytest.approx(expected)
    assert normalized_levenshtein(b, a) == pytest.approx(expected)
