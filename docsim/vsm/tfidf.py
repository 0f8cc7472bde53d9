# docsim/vsm/tfidf.py
"""
TF-IDF Builder

Weights every term of a document by

    tf  = count / total tokens in the document
    idf = ln(1 + N / (1 + df))

where N is the corpus size and df the number of corpus documents containing
the term as a whole word. The smoothed idf is always positive, including for
terms present in every document.

A TF-IDF vector only means something relative to the corpus it was built
from. Comparing vectors built from different corpora is the caller's
responsibility; the vector models in this package never mix them.
"""
import math

from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence, Set

from docsim.text_processor import get_default_processor
from docsim.vsm.cosine import cosine_similarity


def inverse_document_frequency(doc_freq: int, corpus_size: int) -> float:
    return math.log(1 + corpus_size / (1 + doc_freq))


def term_frequencies(token_freq: Mapping[str, int]) -> Dict[str, float]:
    total_words = sum(token_freq.values())
    if total_words == 0:
        return {}
    return {term: count / total_words for term, count in token_freq.items()}


def _document_words(text: str, processor) -> Set[str]:
    """Every word of a raw text, stopwords included, as the tokenizer splits it."""
    if not isinstance(text, str):
        raise TypeError(f"Document text must be a str, got {type(text).__name__}")
    return set(processor.tokenizer.tokenize(text.lower()))


def document_frequency(term: str, corpus: Sequence[str], processor=None) -> int:
    """
    Count corpus documents whose raw text contains term as a whole word.

    A whole word is a maximal run of word characters as the processor's
    tokenizer defines it, so the counts agree with build_document_frequencies
    on any script. Every document is rescanned for every term: this is the
    slow path, use build_document_frequencies when scoring a whole corpus.
    """
    processor = processor or get_default_processor()
    return sum(1 for doc in corpus if term in _document_words(doc, processor))


def build_document_frequencies(corpus: Sequence[str], processor=None) -> Counter:
    """
    Index term -> document count for a corpus in a single tokenization pass.

    Stopwords are kept while indexing, matching a whole-word scan of the raw
    text.

    Args:
        corpus (Sequence[str]): Raw document texts
        processor: Text processor whose tokenizer is reused (stopword filter ignored)

    Returns:
        Counter: term -> number of documents containing it

    Raises:
        TypeError: If any text is not a string
    """
    processor = processor or get_default_processor()
    doc_freqs = Counter()
    for text in corpus:
        doc_freqs.update(_document_words(text, processor))
    return doc_freqs


def compute_tfidf(token_freq: Mapping[str, int], corpus: Sequence[str],
                  doc_freqs: Optional[Mapping[str, int]] = None, processor=None) -> Dict[str, float]:
    """
    Compute the TF-IDF vector of one document against a corpus.

    Args:
        token_freq (Mapping[str, int]): Token frequency map of the document
        corpus (Sequence[str]): Raw texts of every document in the corpus
        doc_freqs (Mapping[str, int], optional): Precomputed document frequencies;
            when omitted each term is looked up with a whole-word scan of the corpus
        processor (optional): Text processor used by the scan

    Returns:
        Dict[str, float]: term -> weight; empty when the document has no tokens

    Raises:
        TypeError: If a corpus text is not a string
    """
    tf = term_frequencies(token_freq)
    corpus_size = len(corpus)
    tfidf = {}
    for term, tf_value in tf.items():
        if doc_freqs is None:
            df = document_frequency(term, corpus, processor)
        else:
            df = doc_freqs.get(term, 0)
        tfidf[term] = tf_value * inverse_document_frequency(df, corpus_size)
    return tfidf


def compute_corpus_embeddings(corpus: Sequence[str], processor=None) -> List[Dict[str, float]]:
    """
    Compute the TF-IDF vector of every document in a corpus.

    Document frequencies are indexed once for the whole corpus, so each
    term-document pair is examined once no matter how many comparisons
    follow. The result is index-aligned with the input.

    Args:
        corpus (Sequence[str]): Raw document texts, in corpus order
        processor: Text processor used for tokenization (default: shared processor)

    Returns:
        List[Dict[str, float]]: One TF-IDF vector per document
    """
    processor = processor or get_default_processor()
    corpus = list(corpus)
    doc_freqs = build_document_frequencies(corpus, processor)
    return [compute_tfidf(processor.tokenize(text), corpus, doc_freqs) for text in corpus]


def embedding_similarity(text_a: str, text_b: str, corpus: Sequence[str], processor=None) -> float:
    """
    TF-IDF cosine similarity of two texts, recomputed from scratch.

    Every call rescans the corpus for each term of both texts. For many
    pairs over the same corpus use compute_corpus_embeddings instead.
    """
    processor = processor or get_default_processor()
    vec_a = compute_tfidf(processor.tokenize(text_a), corpus, processor=processor)
    vec_b = compute_tfidf(processor.tokenize(text_b), corpus, processor=processor)
    return cosine_similarity(vec_a, vec_b)
