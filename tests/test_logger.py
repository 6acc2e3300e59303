import re

import pytest

from corvus import logger
from corvus.logger import LogChannel, LogSeverity
from corvus.names import Name

LINE = re.compile(r"^\[\d{2}:\d{2}:\d{2}\] \[\d+\] \[(\w+)\] (.*)$")


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.destroy()


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_all_channel_writes_trace_messages(capsys):
    channel = LogChannel(Name("TestAll"), LogSeverity.ALL)
    logger.log(channel, LogSeverity.TRACE, "lowest")
    lines = _lines(capsys)
    assert len(lines) == 1
    match = LINE.match(lines[0])
    assert match is not None
    assert match.group(2) == "lowest"


def test_channel_accepts_plain_string_name():
    channel = LogChannel("Strs", LogSeverity.WARN)
    assert channel.name == Name("Strs")
    assert channel.severity is LogSeverity.WARN


def test_log_formats_arguments(capsys):
    channel = LogChannel(Name("TestWrite"), LogSeverity.ALL)
    logger.log(channel, LogSeverity.INFO, "{} + {} = {}", 2, 3, 5)
    lines = _lines(capsys)
    assert len(lines) == 1
    match = LINE.match(lines[0])
    assert match is not None
    assert match.group(1) == "info"
    assert match.group(2) == "2 + 3 = 5"


def test_warn_level_name(capsys):
    channel = LogChannel(Name("TestWarn"), LogSeverity.ALL)
    logger.log(channel, LogSeverity.WARN, "careful")
    match = LINE.match(_lines(capsys)[0])
    assert match.group(1) == "warning"
    assert match.group(2) == "careful"


def test_message_without_arguments_is_written_raw(capsys):
    channel = LogChannel(Name("TestRaw"), LogSeverity.ALL)
    logger.log(channel, LogSeverity.ERROR, "braces {} and 100%")
    match = LINE.match(_lines(capsys)[0])
    assert match.group(2) == "braces {} and 100%"


def test_messages_below_channel_severity_are_dropped(capsys):
    channel = LogChannel(Name("TestFilter"), LogSeverity.ERROR)
    logger.log(channel, LogSeverity.WARN, "dropped")
    logger.log(channel, LogSeverity.CRITICAL, "kept")
    lines = _lines(capsys)
    assert len(lines) == 1
    assert LINE.match(lines[0]).group(2) == "kept"


def test_off_channel_writes_nothing(capsys):
    channel = LogChannel(Name("TestOff"), LogSeverity.OFF)
    logger.log(channel, LogSeverity.CRITICAL, "never")
    assert capsys.readouterr().out == ""


def test_background_writer_keeps_order(capsys):
    logger.setup()
    channel = LogChannel(Name("TestAsync"), LogSeverity.ALL)
    for index in range(5):
        logger.log(channel, LogSeverity.DEBUG, "message {}", index)
    logger.destroy()
    messages = [LINE.match(line).group(2) for line in _lines(capsys)]
    assert messages == [f"message {index}" for index in range(5)]


def test_logging_after_destroy_still_writes(capsys):
    logger.setup()
    logger.destroy()
    logger.log(logger.LOG_TEMP, LogSeverity.INFO, "after")
    lines = _lines(capsys)
    assert [LINE.match(line).group(2) for line in lines] == ["after"]