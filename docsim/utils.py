# docsim/utils.py
"""
Utility Functions

Configuration loading and saving, logging setup, and the console output used
by the command-line driver.
"""
import json
import os
import logging
from collections import Counter
from typing import Dict, Iterable, Mapping

from docsim.comparison import DEFAULT_METRICS, DISTANCE_METRICS, top_pairs
from docsim.vsm.factory import VSMFactory

DEFAULT_CONFIG = {
    "documents_dir": "documents",
    "stopwords_file": None,
    "include_stopwords": False,
    "extensions": [".txt"],
    "metrics": list(DEFAULT_METRICS),
    "vsm_mode": "auto",
    "sparse_vsm_threshold": VSMFactory.DEFAULT_SPARSE_DOC_THRESHOLD,
    "top_k": None,
    "log_level": "INFO",
    "log_file": None
}

METRIC_LABELS = {
    "cosine": "Cosine Similarity",
    "levenshtein": "Levenshtein Distance",
    "normalized_levenshtein": "Normalized Levenshtein",
    "jaccard": "Jaccard Similarity",
    "tfidf": "Embedding Similarity"
}


def load_config(config_file='config.json', create=True) -> Dict:
    """
    Load configuration from a JSON file, falling back to defaults if not found or invalid.

    Args:
        config_file (str): Path to the configuration file
        create (bool): Write the defaults to config_file when it does not exist

    Returns:
        dict: The loaded configuration merged over the defaults
    """
    if not os.path.exists(config_file):
        return _create_default_config(config_file) if create else dict(DEFAULT_CONFIG)

    try:
        with open(config_file, 'r') as f:
            config = json.load(f)
        # Merge with defaults to ensure all keys exist
        return {**DEFAULT_CONFIG, **config}
    except (OSError, ValueError) as e:
        logging.getLogger('docsim.config').warning(
            f"Error loading config file {config_file}: {e}. Using default configuration.")
        return dict(DEFAULT_CONFIG)


def save_config(config: Dict, config_file='config.json'):
    with open(config_file, 'w') as f:
        json.dump(config, f, indent=2)


def _create_default_config(config_file='config.json') -> Dict:
    logger = logging.getLogger('docsim.config')
    try:
        save_config(DEFAULT_CONFIG, config_file)
        logger.info(f"Created default configuration file: {config_file}")
    except OSError as e:
        logger.warning(f"Could not create default configuration file: {e}")
    return dict(DEFAULT_CONFIG)


def setup_logging(level='INFO', log_file=None):
    """Configure the root logger with a console handler and an optional file handler."""
    handlers = [logging.StreamHandler()]
    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def format_score(metric: str, score) -> str:
    if metric == 'levenshtein':
        return f"{score:,} edits"
    return f"{score:.2%}"


def display_corpus_statistics(documents: Mapping[str, str], processor, n: int = 10):
    """
    Display document count, vocabulary size and the most frequent terms.

    Args:
        documents (Mapping[str, str]): doc_id -> text
        processor: Text processor used to count terms
        n (int): Number of top terms to show
    """
    totals = Counter()
    for text in documents.values():
        totals.update(processor.tokenize(text))

    print(f"Documents: {len(documents):,}")
    print(f"The number of unique words is: {len(totals):,}")
    print(f"The top {n} most frequent words are:")
    for i, (term, freq) in enumerate(totals.most_common(n), 1):
        print(f"    {i}. {term} ({freq:,})")
    print("=" * 55)


def display_results(results, metrics: Iterable[str], top_k=None):
    """
    Display comparison results, one block per metric.

    Args:
        results (List[ComparisonResult]): Output of DocumentComparator.compare
        metrics (Iterable[str]): Metrics to display, in order
        top_k (int, optional): Show only the k most similar pairs of each metric
    """
    for metric in metrics:
        print(f"\n=== {METRIC_LABELS.get(metric, metric)} ===")
        if top_k is not None:
            selected = top_pairs(results, metric, top_k)
        else:
            selected = [r for r in results if r.metric == metric]

        if not selected:
            print("    No document pairs to compare.")
            continue
        for result in selected:
            print(f"    {result.doc1}, {result.doc2}: {format_score(metric, result.score)}")

    if top_k is not None and any(m in DISTANCE_METRICS for m in metrics):
        print("\n(Levenshtein pairs are ranked by smallest distance.)")
