import logging

from docsim.profiler import Profiler


def test_timer_records_named_timing():
    profiler = Profiler()
    with profiler.timer("step"):
        pass
    assert "step" in profiler.timings
    assert profiler.timings["step"] >= 0


def test_global_timer_pause_and_resume():
    profiler = Profiler()
    assert profiler.get_global_time() == 0.0
    profiler.start_global_timer()
    profiler.pause_global_timer()
    paused = profiler.get_global_time()
    assert profiler.get_global_time() == paused
    profiler.resume_global_timer()
    assert profiler.get_global_time() >= paused


def test_report(tmp_path):
    profiler = Profiler()
    profiler.timings["Metric: jaccard"] = 0.5
    path = tmp_path / "report.log"
    report = profiler.generate_report(doc_count=3, pair_count=3, filename=str(path))
    assert "Metric: jaccard: 0.5000s" in report
    assert "Documents: 3  Pairs: 3" in report
    assert path.read_text() == report


def test_log_message(caplog):
    with caplog.at_level(logging.INFO, logger="docsim.profiler"):
        Profiler().log_message("auto-selected")
    assert "auto-selected" in caplog.text
