# docsim/loader.py
"""
Document loading for the command-line driver.

Reads every matching file of a directory into memory. The similarity engine
itself never touches the filesystem; it only sees the returned mapping.
"""
import os
import logging
from collections import OrderedDict
from typing import Iterable

logger = logging.getLogger('docsim.loader')


def _read_single_file(filepath: str) -> str:
    try:
        with open(filepath, 'r', encoding='utf-8', errors='ignore') as f:
            return f.read()
    except OSError as e:
        # An unreadable document still takes part, as an empty one
        logger.error(f"Error reading {filepath}: {e}")
        return ''


def load_documents(documents_dir: str, extensions: Iterable[str] = ('.txt',)) -> "OrderedDict[str, str]":
    """
    Load documents from a directory.

    Args:
        documents_dir (str): Directory to scan (not recursive)
        extensions (Iterable[str]): File suffixes to include, case-insensitive

    Returns:
        OrderedDict[str, str]: filename -> text, sorted by filename

    Raises:
        FileNotFoundError: If documents_dir does not exist
    """
    if not os.path.isdir(documents_dir):
        raise FileNotFoundError(f"Documents directory not found: {documents_dir}")

    extensions = tuple(ext.lower() for ext in extensions)
    entries = sorted(
        (entry for entry in os.scandir(documents_dir)
         if entry.is_file() and entry.name.lower().endswith(extensions)),
        key=lambda entry: entry.name
    )

    documents = OrderedDict()
    for entry in entries:
        documents[entry.name] = _read_single_file(entry.path)
        logger.info(f"Extracted {len(documents[entry.name])} characters from {entry.name}")
    return documents
