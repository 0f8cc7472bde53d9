import json

import pytest

import main


@pytest.fixture
def documents_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "documents"
    docs.mkdir()
    (docs / "one.txt").write_text("The cat sat on the mat.", encoding="utf-8")
    (docs / "two.txt").write_text("The dog sat on the log.", encoding="utf-8")
    (docs / "three.txt").write_text("A cat and a dog.", encoding="utf-8")
    return docs


def test_defaults_come_from_config(documents_dir):
    args = main.parse_arguments([])
    assert args.documents_dir == "documents"
    assert args.vsm_mode == "auto"
    assert args.top_k is None


def test_config_file_overrides_unspecified_options(documents_dir, tmp_path):
    config = tmp_path / "custom.json"
    config.write_text(json.dumps({"top_k": 2, "metrics": ["jaccard"]}))
    args = main.parse_arguments(["--config", str(config), "--metrics", "cosine"])
    assert args.top_k == 2
    assert args.metrics == ["cosine"]


def test_runs_all_metrics(documents_dir, capsys):
    assert main.main(["--log_level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "Found 3 documents" in out
    for label in ("Cosine Similarity", "Levenshtein Distance", "Normalized Levenshtein",
                  "Jaccard Similarity", "Embedding Similarity"):
        assert label in out
    assert "one.txt, two.txt" in out
    assert "=== Timing Breakdown ===" in out


def test_top_k_and_metric_selection(documents_dir, capsys):
    assert main.main(["--metrics", "jaccard", "--top_k", "1", "--log_level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "Jaccard Similarity" in out
    assert "Cosine Similarity" not in out
    assert out.count("edits") == 0


def test_needs_two_documents(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "documents").mkdir()
    (tmp_path / "documents" / "alone.txt").write_text("just one")
    assert main.main(["--log_level", "WARNING"]) == 1
    assert "Need at least 2 documents" in capsys.readouterr().out


def test_missing_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main.main(["--documents_dir", "missing", "--log_level", "WARNING"]) == 1
    assert "not found" in capsys.readouterr().out


def test_abbreviated_option_is_rejected(documents_dir):
    with pytest.raises(SystemExit):
        main.parse_arguments(["--top", "3"])


def test_config_file_does_not_override_given_option(documents_dir, tmp_path):
    config = tmp_path / "custom.json"
    config.write_text(json.dumps({"top_k": 2}))
    args = main.parse_arguments(["--config", str(config), "--top_k=3"])
    assert args.top_k == 3


def test_display_excluded_from_global_time(documents_dir, monkeypatch):
    calls = []
    monkeypatch.setattr(main.Profiler, "pause_global_timer", lambda self: calls.append("pause"))
    monkeypatch.setattr(main.Profiler, "resume_global_timer", lambda self: calls.append("resume"))
    monkeypatch.setattr(main, "display_results", lambda *args: calls.append("display"))
    assert main.main(["--log_level", "WARNING"]) == 0
    assert calls == ["pause", "display", "resume"]
