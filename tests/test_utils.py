import threading

from dominant_colour.utils import (
    capture_log,
    debug_log,
    error,
    format_percentage,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_config_line,
    warn,
)


def test_key_value_pairs_formatting():
    text = key_value_pairs_to_string([("Pixels", 12345), ("White", True), ("Share", 0.25)])
    assert text == "Pixels: 12,345  White: on  Share: 0.25"


def test_time_formatting():
    assert format_seconds_compact(0.0123) == "12.3ms"
    assert format_seconds_compact(2.5) == "2.500s"
    assert format_total_duration_compact(75.0) == "1m 15s"
    assert format_percentage(0.125) == "12.5%"


def test_prefixes(capsys):
    log("plain")
    debug_log("detail")
    warn("careful")
    print_config_line("run", [("Jobs", 2)], debug=False)
    out = capsys.readouterr().out.splitlines()
    assert out == ["plain", "[debug] detail", "[warn] careful", "[run] Jobs: 2"]


def test_capture_log_is_per_thread(capsys):
    results = {}
    barrier = threading.Barrier(2)

    def worker(name):
        with capture_log() as buf:
            barrier.wait()
            for i in range(50):
                log(f"{name}-{i}")
        results[name] = buf.getvalue().splitlines()

    threads = [threading.Thread(target=worker, args=(n,)) for n in ("a", "b")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    log("after")

    assert results["a"] == [f"a-{i}" for i in range(50)]
    assert results["b"] == [f"b-{i}" for i in range(50)]
    assert capsys.readouterr().out == "after\n"


def test_error_goes_to_stderr_or_captured_stream(capsys):
    error("outside")
    with capture_log() as buf:
        log("inside")
        error("inside failed")
    captured = capsys.readouterr()
    assert captured.err == "[error] outside\n"
    assert captured.out == ""
    assert buf.getvalue() == "inside\n[error] inside failed\n"
