import pytest

import docsim.loader
from docsim.loader import load_documents


def test_loads_matching_files_sorted_by_name(tmp_path):
    (tmp_path / "b.txt").write_text("second", encoding="utf-8")
    (tmp_path / "a.TXT").write_text("first", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")
    (tmp_path / "sub.txt").mkdir()

    documents = load_documents(str(tmp_path))
    assert list(documents.items()) == [("a.TXT", "first"), ("b.txt", "second")]


def test_custom_extensions(tmp_path):
    (tmp_path / "a.txt").write_text("x", encoding="utf-8")
    (tmp_path / "b.md").write_text("y", encoding="utf-8")
    assert list(load_documents(str(tmp_path), extensions=[".md"])) == ["b.md"]


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_documents(str(tmp_path / "nope"))


def test_unreadable_file_becomes_empty_document(tmp_path, monkeypatch):
    (tmp_path / "good.txt").write_text("fine", encoding="utf-8")
    (tmp_path / "bad.txt").write_text("broken", encoding="utf-8")
    real_open = open

    def fake_open(path, *args, **kwargs):
        if str(path).endswith("bad.txt"):
            raise PermissionError("denied")
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr(docsim.loader, "open", fake_open, raising=False)
    assert load_documents(str(tmp_path)) == {"bad.txt": "", "good.txt": "fine"}
