import logging

from viengine.logger import TRACE, client_logger, core_logger, init_logging


def test_logger_names():
    assert core_logger().name == "VIEngine"
    assert client_logger().name == "Client"


def test_init_sets_trace_level_and_is_idempotent():
    init_logging()
    init_logging()
    for logger in (core_logger(), client_logger()):
        assert logger.level == TRACE
        assert len(logger.handlers) == 1
        assert logger.isEnabledFor(TRACE)


def test_trace_is_below_debug():
    init_logging()
    assert TRACE < logging.DEBUG
    assert logging.getLevelName(TRACE) == "TRACE"
    assert core_logger().isEnabledFor(logging.DEBUG)
    assert client_logger().getEffectiveLevel() == TRACE


def test_format_carries_source_name_and_thread():
    init_logging()
    formatter = core_logger().handlers[0].formatter
    record = logging.LogRecord("VIEngine", logging.INFO, __file__, 10, "hello %s", ("world",), None, func="fn")
    text = formatter.format(record)
    assert "[fn:10]" in text
    assert "[VIEngine]" in text
    assert "[Thread:" in text
    assert text.endswith("hello world")


def test_messages_go_to_stdout(capsys):
    init_logging()
    client_logger().log(TRACE, "game is init")
    out = capsys.readouterr().out
    assert "[Client]" in out
    assert "game is init" in out