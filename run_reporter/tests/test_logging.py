import logging

from run_reporter.core.logging import ColoredFormatter, setup_logger, verbosity_to_level


def _close(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_log_file_has_no_color_codes(tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logger(name="run_reporter.test_file", log_file=log_file)
    try:
        logger.error("boom")
        logger.warning("careful")
    finally:
        _close(logger)

    text = log_file.read_text()
    assert "\x1b" not in text
    assert "ERROR - boom" in text
    assert "WARNING - careful" in text


def test_colored_formatter_leaves_record_untouched():
    formatter = ColoredFormatter("%(levelname)s - %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

    colored = formatter.format(record)

    assert "\x1b[1mboom" in colored
    assert record.msg == "boom"
    assert record.levelname == "ERROR"
    assert logging.Formatter("%(levelname)s - %(message)s").format(record) == "ERROR - boom"


def test_verbosity_levels():
    assert verbosity_to_level(0) == logging.WARNING
    assert verbosity_to_level(1) == logging.INFO
    assert verbosity_to_level(2) == logging.INFO
    assert verbosity_to_level(3) == logging.DEBUG
