"""
Document Similarity Analyzer

Loads every document in a directory and compares each pair of documents
with word-frequency cosine, Levenshtein distance, normalized Levenshtein,
Jaccard overlap and TF-IDF cosine.
"""

import os
import sys
import argparse

from docsim.comparison import DocumentComparator, METRICS
from docsim.loader import load_documents
from docsim.profiler import Profiler
from docsim.text_processor import StandardTextProcessor
from docsim.utils import (display_corpus_statistics,
                          display_results,
                          load_config,
                          setup_logging)


def _explicit_options(argv):
    """Option names given on the command line, e.g. {'top_k', 'metrics'}."""
    provided = set()
    for arg in argv:
        if arg.startswith('--'):
            provided.add(arg[2:].split('=')[0])
    return provided


def parse_arguments(argv=None):
    """
    Parse command-line arguments and integrate with configuration file settings.

    Args:
        argv (list, optional): Arguments to parse (default: sys.argv[1:])

    Returns:
        argparse.Namespace: The parsed command-line arguments with config file integration
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    config = load_config(create=False)
    parser = argparse.ArgumentParser(description='Pairwise document similarity.', allow_abbrev=False)

    parser.add_argument('--config', default='config.json',
                        help='Path to configuration file')
    parser.add_argument('--documents_dir', default=config['documents_dir'],
                        help=f"Directory containing documents to compare (default: {config['documents_dir']})")
    parser.add_argument('--extensions', nargs='+', default=config['extensions'],
                        help=f"File extensions to load (default: {config['extensions']})")
    parser.add_argument('--stopwords_file', default=config['stopwords_file'],
                        help="File containing stopwords, one per line (default: bundled list)")
    parser.add_argument('--include_stopwords', action='store_true', default=config['include_stopwords'],
                        help='Keep stopwords when building word vectors')
    parser.add_argument('--metrics', nargs='+', choices=METRICS, default=config['metrics'],
                        help=f"Metrics to compute (default: {' '.join(config['metrics'])})")
    parser.add_argument('--top_k', type=int, default=config['top_k'],
                        help='Only show the k most similar pairs per metric')
    parser.add_argument('--vsm_mode', choices=['auto', 'standard', 'sparse'], default=config['vsm_mode'],
                        help=f"Vector model implementation (default: {config['vsm_mode']})")
    parser.add_argument('--sparse_vsm_threshold', type=int, default=config['sparse_vsm_threshold'],
                        help=f"Document count at which auto mode uses the sparse model "
                             f"(default: {config['sparse_vsm_threshold']})")
    parser.add_argument('--stats', action='store_true',
                        help='Display corpus vocabulary statistics')
    parser.add_argument('--report', default=None,
                        help='Write the timing report to this file')
    parser.add_argument('--log_level', default=config['log_level'],
                        help=f"Logging level (default: {config['log_level']})")
    parser.add_argument('--log_file', default=config['log_file'],
                        help='Also write logs to this file')

    args = parser.parse_args(argv)

    # A non-default config file supplies values for options not given on the command line
    if args.config != 'config.json' and os.path.exists(args.config):
        new_config = load_config(args.config, create=False)
        parser_defaults = {action.dest: action.default for action in parser._actions}
        provided_args = _explicit_options(argv)

        for key, value in new_config.items():
            if key in parser_defaults and key not in provided_args:
                setattr(args, key, value)

    return args


def main(argv=None):
    """
    Main function to run the document similarity analysis.

    Returns:
        int: Process exit status
    """
    args = parse_arguments(argv)
    setup_logging(args.log_level, args.log_file)

    profiler = Profiler()
    profiler.start_global_timer()

    with profiler.timer("Document Loading"):
        try:
            documents = load_documents(args.documents_dir, args.extensions)
        except FileNotFoundError as e:
            print(e)
            return 1

    if len(documents) < 2:
        print(f"Need at least 2 documents in {args.documents_dir} for comparison.")
        return 1

    print(f"Found {len(documents)} documents:\n")
    for name in documents:
        print(f"  - {name}")
    print()

    processor = StandardTextProcessor(args.stopwords_file, args.include_stopwords, profiler)

    if args.stats:
        display_corpus_statistics(documents, processor)

    comparator = DocumentComparator(
        documents,
        processor=processor,
        profiler=profiler,
        vsm_mode=args.vsm_mode,
        sparse_threshold=args.sparse_vsm_threshold
    )
    results = comparator.compare(args.metrics)

    # Printing is not part of the measured run
    profiler.pause_global_timer()
    display_results(results, args.metrics, args.top_k)
    profiler.resume_global_timer()

    print("\n" + profiler.generate_report(
        doc_count=comparator.doc_count,
        pair_count=comparator.pair_count,
        filename=args.report
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
