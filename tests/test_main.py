import io
import logging
import re
import time

import pytest

from coprimepi import config
from coprimepi.dev import cpu_timed, timer
from coprimepi.logging_config import setup_logging
from coprimepi.main import main


@pytest.mark.slow
def test_main_prints_three_lines(capsys, caplog, monkeypatch, clean_package_logger):
    monkeypatch.setattr(config, "LOG_LEVEL", logging.DEBUG)
    main()
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 3
    assert re.fullmatch(r"calcPi: \d+\.\d+ seconds", lines[0])
    assert lines[1] == "N: 10000"
    match = re.fullmatch(r"pi: (\d+\.\d+)", lines[2])
    assert match
    assert 3.0 < float(match.group(1)) < 3.3
    # The entry point is timed, the record stays off stdout
    assert any(r.name == "coprimepi.dev" and r.getMessage().startswith("main:") for r in caplog.records)


def test_cpu_timed_returns_result_and_durations():
    result, cpu_seconds, wall_seconds = cpu_timed(sum, range(1000))
    assert result == sum(range(1000))
    assert cpu_seconds >= 0.0
    assert wall_seconds >= 0.0


def test_cpu_timed_measures_wall_clock_sleep():
    _, _, wall_seconds = cpu_timed(time.sleep, 0.01)
    assert wall_seconds >= 0.01


def test_timer_logs_and_passes_through(caplog):
    caplog.set_level(logging.DEBUG, logger="coprimepi")

    @timer
    def double(x):
        return 2 * x

    assert double(21) == 42
    assert double.__name__ == "double"
    assert "double:" in caplog.text


def test_setup_logging_writes_file(tmp_path, clean_package_logger):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    setup_logging(level=logging.INFO, log_file=str(log_file))
    # Repeated setup replaces handlers instead of stacking them
    assert len(clean_package_logger.handlers) == 2
    for handler in clean_package_logger.handlers:
        handler.flush()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")


def test_setup_logging_keeps_stdout_clean(capsys, clean_package_logger):
    setup_logging(level=logging.INFO)
    logging.getLogger("coprimepi.main").info("hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hello" in captured.err


def test_setup_logging_custom_stream(clean_package_logger):
    stream = io.StringIO()
    logger = setup_logging(level=logging.DEBUG, stream=stream)
    assert logger is clean_package_logger
    assert "coprimepi - INFO - Logging initialized." in stream.getvalue()
