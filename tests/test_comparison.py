import pytest

from docsim.comparison import (DEFAULT_METRICS, ComparisonResult, DocumentComparator,
                               compare_documents, top_pairs)
from docsim.edit_distance import levenshtein_distance
from docsim.jaccard import jaccard_similarity
from docsim.vsm.tfidf import embedding_similarity


def scores(results, metric):
    return {r.pair_key: r.score for r in results if r.metric == metric}


def test_every_unordered_pair_once_per_metric(documents):
    results = compare_documents(documents)
    ids = list(documents)
    expected_pairs = [(ids[i], ids[j]) for i in range(len(ids)) for j in range(i + 1, len(ids))]
    for metric in DEFAULT_METRICS:
        assert [r.pair_key for r in results if r.metric == metric] == expected_pairs
    assert len(results) == len(expected_pairs) * len(DEFAULT_METRICS)


def test_results_grouped_in_requested_metric_order(documents):
    results = compare_documents(documents, metrics=["jaccard", "levenshtein"])
    metrics = [r.metric for r in results]
    pair_count = len(documents) * (len(documents) - 1) // 2
    assert metrics == ["jaccard"] * pair_count + ["levenshtein"] * pair_count


def test_tfidf_scores_equal_single_pair_embedding_similarity(documents):
    texts = list(documents.values())
    results = compare_documents(documents, metrics=["tfidf"])
    for result in results:
        expected = embedding_similarity(documents[result.doc1], documents[result.doc2], texts)
        assert result.score == pytest.approx(expected)


@pytest.mark.parametrize("vsm_mode", ["standard", "sparse"])
def test_vsm_mode_does_not_change_scores(documents, vsm_mode):
    baseline = compare_documents(documents, metrics=["cosine", "tfidf"], vsm_mode="standard")
    other = compare_documents(documents, metrics=["cosine", "tfidf"], vsm_mode=vsm_mode)
    for a, b in zip(baseline, other):
        assert a.pair_key == b.pair_key
        assert a.score == pytest.approx(b.score, abs=1e-9)


def test_edit_and_set_metrics_match_direct_calls(documents):
    results = compare_documents(documents, metrics=["levenshtein", "jaccard"])
    for result in results:
        a, b = documents[result.doc1], documents[result.doc2]
        if result.metric == "levenshtein":
            assert result.score == levenshtein_distance(a, b)
        else:
            assert result.score == pytest.approx(jaccard_similarity(a, b))


def test_empty_documents_give_defined_scores():
    results = compare_documents({"a": "", "b": ""})
    assert scores(results, "cosine") == {("a", "b"): 0.0}
    assert scores(results, "tfidf") == {("a", "b"): 0.0}
    assert scores(results, "jaccard") == {("a", "b"): 1.0}
    assert scores(results, "levenshtein") == {("a", "b"): 0}
    assert scores(results, "normalized_levenshtein") == {("a", "b"): 1.0}


def test_scores_symmetric_under_corpus_reordering(documents):
    forward = compare_documents(documents)
    backward = compare_documents(dict(reversed(list(documents.items()))))
    lookup = {(r.metric, frozenset(r.pair_key)): r.score for r in backward}
    for result in forward:
        assert result.score == pytest.approx(lookup[(result.metric, frozenset(result.pair_key))])


def test_accepts_sequence_of_pairs():
    results = compare_documents([("x", "the cat sat"), ("y", "the dog sat")], metrics=["jaccard"])
    assert len(results) == 1
    assert isinstance(results[0], ComparisonResult)
    assert results[0].pair_key == ("x", "y")
    assert results[0].metric == "jaccard"
    assert results[0].score == pytest.approx(1 / 3)


def test_fewer_than_two_documents_yield_nothing():
    assert compare_documents({}) == []
    assert compare_documents({"only": "one document"}) == []


def test_unknown_metric_rejected_up_front(documents):
    with pytest.raises(ValueError, match="semantic"):
        compare_documents(documents, metrics=["cosine", "semantic"])


def test_invalid_input_rejected():
    with pytest.raises(TypeError):
        DocumentComparator({"a": "text", "b": None})
    with pytest.raises(ValueError):
        DocumentComparator([("a", "x"), ("a", "y")])
    with pytest.raises(ValueError):
        DocumentComparator({"a": "x", "b": "y"}, vsm_mode="gpu")


def test_vector_model_built_once(documents):
    comparator = DocumentComparator(documents)
    comparator.compare(["cosine"])
    vsm = comparator.vsm
    comparator.compare(["tfidf"])
    assert comparator.vsm is vsm


def test_pair_count(documents):
    comparator = DocumentComparator(documents)
    assert comparator.doc_count == 5
    assert comparator.pair_count == 10
    assert list(comparator.pairs())[:2] == [(0, 1), (0, 2)]


def test_timings_recorded(documents):
    comparator = DocumentComparator(documents)
    comparator.compare(["jaccard", "tfidf"])
    assert "Metric: jaccard" in comparator.profiler.timings
    assert "Metric: tfidf" in comparator.profiler.timings


def test_top_pairs_orders_by_similarity():
    documents = {
        "a": "red green blue",
        "b": "red green blue",
        "c": "red yellow",
        "d": "purple orange",
    }
    results = compare_documents(documents, metrics=["jaccard", "levenshtein"])

    best = top_pairs(results, "jaccard", k=2)
    assert [r.pair_key for r in best] == [("a", "b"), ("a", "c")]

    closest = top_pairs(results, "levenshtein", k=1)
    assert closest[0].pair_key == ("a", "b")
    assert closest[0].score == 0


def test_top_pairs_unknown_metric():
    with pytest.raises(ValueError):
        top_pairs([], "euclidean")
