import re

import pytest

from freakland import log
from freakland.log import Level


@pytest.fixture(autouse=True)
def _reset_level():
    log.set_level(Level.TRACE)
    yield
    log.set_level(Level.TRACE)


LINE = re.compile(r"^\[\s*\d+\.\d{3}\] \[(.{5})\] \[(.*?)\] (.*)$")


def test_init_logs_initialized(capsys):
    log.init()
    out = capsys.readouterr().out
    assert "[INFO ] [Log     ] Logging initialized" in out


def test_info_line_format(capsys):
    log.info("Render", "hello world")
    line = capsys.readouterr().out.rstrip("\n")
    match = LINE.match(line)
    assert match is not None
    assert match.group(1) == "INFO "
    assert match.group(2) == "Render  "
    assert match.group(3) == "hello world"


def test_long_category_not_truncated(capsys):
    log.warn("Collision", "x")
    out = capsys.readouterr().out
    assert "[WARN ] [Collision] x" in out


def test_errors_go_to_stderr(capsys):
    log.error("Scene", "failed")
    log.fatal("App", "dead")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR] [Scene   ] failed" in captured.err
    assert "[FATAL] [App     ] dead" in captured.err


def test_set_level_filters_lower(capsys):
    log.set_level(Level.WARN)
    log.log_message(Level.TRACE, "A", "t")
    log.debug("A", "d")
    log.info("A", "i")
    log.warn("A", "w")
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert "[WARN ] [A       ] w" in out


def test_set_level_error_passes_error_and_fatal_only(capsys):
    log.set_level(Level.ERROR)
    log.warn("A", "w")
    log.error("A", "e")
    log.fatal("A", "f")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.count("\n") == 2
    assert "[ERROR] [A       ] e" in captured.err
    assert "[FATAL] [A       ] f" in captured.err


def test_each_level_prints_its_five_char_label(capsys):
    for level in Level:
        log.log_message(level, "Cat", "m")
    captured = capsys.readouterr()
    text = captured.out + captured.err
    for label in ("TRACE", "DEBUG", "INFO ", "WARN ", "ERROR", "FATAL"):
        assert f"[{label}] [Cat     ] m" in text


def test_shutdown_logs(capsys):
    log.shutdown()
    assert "Logging shutdown" in capsys.readouterr().out