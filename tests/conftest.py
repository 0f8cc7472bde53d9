import pytest

from docsim.text_processor import StandardTextProcessor


@pytest.fixture
def processor():
    return StandardTextProcessor()


@pytest.fixture
def corpus():
    return [
        "The cat sat on the mat.",
        "The dog sat on the log.",
        "Cats and dogs are not the same animal, but a cat is a cat.",
        "",
        "the and of it",
    ]


@pytest.fixture
def documents(corpus):
    return {f"doc{i}.txt": text for i, text in enumerate(corpus)}
