import io

from ospfd.log import Logger, LogLevel, get_logger


def make_logger(level=LogLevel.DEBUG):
    stream = io.StringIO()
    return Logger(level, stream), stream


def test_all_levels_written_at_debug():
    logger, stream = make_logger(LogLevel.DEBUG)
    logger.debug("This is a debug message")
    logger.info("This is an info message")
    logger.warn("This is a warning message")
    logger.error("This is an error message")
    assert stream.getvalue().splitlines() == [
        "[DEBUG] This is a debug message",
        "[INFO] This is an info message",
        "[WARN] This is a warning message",
        "[ERROR] This is an error message",
    ]


def test_set_level_suppresses_lower_levels():
    logger, stream = make_logger(LogLevel.DEBUG)
    logger.set_level(LogLevel.WARN)
    logger.debug("This debug message should not be printed")
    logger.info("This info message should not be printed")
    logger.warn("This warning message should be printed")
    logger.error("This error message should be printed")
    assert stream.getvalue().splitlines() == [
        "[WARN] This warning message should be printed",
        "[ERROR] This error message should be printed",
    ]


def test_default_level_is_info():
    stream = io.StringIO()
    logger = Logger(stream=stream)
    logger.debug("hidden")
    logger.info("shown")
    assert logger.level == LogLevel.INFO
    assert stream.getvalue() == "[INFO] shown\n"


def test_format_arguments():
    logger, stream = make_logger()
    logger.write(LogLevel.INFO, "prefix: %s, id %d", "10.0.0.0/8", 7)
    assert stream.getvalue() == "[INFO] prefix: 10.0.0.0/8, id 7\n"


def test_message_without_args_keeps_percent():
    logger, stream = make_logger()
    logger.info("100%")
    assert stream.getvalue() == "[INFO] 100%\n"


def test_get_logger_is_shared():
    first = get_logger()
    previous = first.level
    try:
        first.set_level(LogLevel.ERROR)
        assert get_logger().level == LogLevel.ERROR
    finally:
        first.set_level(previous)
    assert get_logger().level == previous