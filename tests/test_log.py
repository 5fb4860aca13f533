import pytest

from tinterrain.log import (
    LogLevel,
    LogStream,
    decrease_log_level,
    get_log_level,
    log,
    log_message,
    set_log_level,
    set_log_stream,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    set_log_level(LogLevel.INFO)
    set_log_stream(LogStream.STDOUT)
    yield
    set_log_level(LogLevel.INFO)
    set_log_stream(LogStream.STDERR)


def test_info_is_written_bare(capsys):
    log_message(LogLevel.INFO, "/a/b/file.cpp", 12, "hello")
    assert capsys.readouterr().out == "hello\n"


def test_warn_carries_level_and_basename(capsys):
    log_message(LogLevel.WARN, "/a/b/file.cpp", 12, "hello")
    assert capsys.readouterr().out == "WARN file.cpp:12 hello\n"


def test_below_threshold_is_dropped(capsys):
    log_message(LogLevel.DEBUG, "x.cpp", 1, "hidden")
    assert capsys.readouterr().out == ""


def test_empty_message_is_dropped(capsys):
    log_message(LogLevel.FATAL, "x.cpp", 1, "")
    assert capsys.readouterr().out == ""


def test_stream_none_writes_nothing(capsys):
    set_log_stream(LogStream.NONE)
    log_message(LogLevel.FATAL, "x.cpp", 1, "boom")
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_stderr_stream(capsys):
    set_log_stream(LogStream.STDERR)
    log_message(LogLevel.ERROR, "x.cpp", 3, "bad")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "ERROR x.cpp:3 bad\n"


def test_decrease_level_steps_down_and_stops_at_trace():
    set_log_level(LogLevel.DEBUG)
    assert decrease_log_level() is LogLevel.TRACE
    assert decrease_log_level() is LogLevel.TRACE
    assert get_log_level() is LogLevel.TRACE


def test_decrease_enables_debug(capsys):
    decrease_log_level()
    log_message(LogLevel.DEBUG, "x.cpp", 5, "detail")
    assert capsys.readouterr().out == "DEBUG x.cpp:5 detail\n"


def test_log_records_caller_file(capsys):
    log(LogLevel.ERROR, "oops")
    out = capsys.readouterr().out
    assert out.startswith("ERROR test_log.py:")
    assert out.endswith(" oops\n")