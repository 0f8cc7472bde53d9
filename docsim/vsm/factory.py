# docsim/vsm/factory.py
"""
Vector Space Model Factory

Selects the vector model for a corpus. Both implementations return the same
scores; they differ only in how they get there.

| Mode     | Storage                | Pairwise scoring                 |
| -------- | ---------------------- | -------------------------------- |
| standard | dict per document      | Python loop over shared terms    |
| sparse   | SciPy CSR matrices     | scikit-learn cosine_similarity   |
"""
from typing import Sequence

from docsim.profiler import Profiler
from docsim.vsm.base import BaseVSM


class VSMFactory:
    """
    Factory class for creating Vector Space Model implementations.

    Class Attributes:
        DEFAULT_SPARSE_DOC_THRESHOLD (int): Document count at which 'auto' switches
                                            from StandardVSM to SparseVSM
        VSM_CLASSES (Dict[str, str]): Mapping of implementation names to class paths
    """

    DEFAULT_SPARSE_DOC_THRESHOLD = 200

    VSM_CLASSES = {
        "standard": "standard_vsm.StandardVSM",
        "sparse": "sparse_vsm.SparseVSM"
    }

    @staticmethod
    def select_mode(doc_count: int, mode: str = 'auto', sparse_threshold: int = None) -> str:
        if sparse_threshold is None:
            sparse_threshold = VSMFactory.DEFAULT_SPARSE_DOC_THRESHOLD

        if mode == 'auto':
            return 'sparse' if doc_count >= sparse_threshold else 'standard'
        if mode not in VSMFactory.VSM_CLASSES:
            raise ValueError(f"Unknown VSM mode: {mode}")
        return mode

    @staticmethod
    def create_vsm(doc_ids: Sequence[str], texts: Sequence[str], mode: str = 'auto',
                   processor=None, profiler: Profiler = None, sparse_threshold: int = None) -> BaseVSM:
        """
        Create the vector space model for a corpus.

        Args:
            doc_ids (Sequence[str]): Document identifiers in corpus order
            texts (Sequence[str]): Raw texts, index-aligned with doc_ids
            mode (str): 'auto', 'standard' or 'sparse'
            processor (optional): Text processor used for tokenization
            profiler (Profiler, optional): Performance profiler
            sparse_threshold (int, optional): Document count at which 'auto' picks sparse

        Returns:
            BaseVSM: The built model

        Raises:
            ValueError: If mode is not recognized
        """
        profiler = profiler or Profiler()
        selected = VSMFactory.select_mode(len(doc_ids), mode, sparse_threshold)
        if mode == 'auto':
            profiler.log_message(f"Auto-selected VSM mode: {selected} (doc_count={len(doc_ids)})")

        module_name, class_name = VSMFactory.VSM_CLASSES[selected].rsplit(".", 1)
        module = __import__(f"docsim.vsm.{module_name}", fromlist=[class_name])
        return getattr(module, class_name)(doc_ids, texts, processor, profiler)
