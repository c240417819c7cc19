import io
import logging

import pytest

from smartconverter.app.main import parse_args
from smartconverter.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


def test_console_only(package_logger):
    stream = io.StringIO()
    handlers = setup_logging(level=logging.WARNING, stream=stream)
    assert len(handlers) == 1
    assert package_logger.handlers == handlers

    logging.getLogger("smartconverter.model.session").info("hidden")
    logging.getLogger("smartconverter.model.session").warning("Clipboard write failed")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "WARNING smartconverter.model.session: Clipboard write failed" in output


def test_log_file_is_appended(package_logger, tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    setup_logging(log_file=str(log_file), stream=io.StringIO())
    logging.getLogger("smartconverter").info("first launch")
    handlers = setup_logging(log_file=str(log_file), stream=io.StringIO())
    logging.getLogger("smartconverter").info("second launch")
    for handler in handlers:
        handler.flush()

    # Reconfiguring replaces handlers instead of stacking them
    assert len(package_logger.handlers) == 2
    text = log_file.read_text(encoding="utf-8")
    assert "first launch" in text
    assert "second launch" in text


def test_cli_options():
    args = parse_args(["--log-level", "DEBUG", "--log-file", "out.log", "-style", "fusion"])
    assert args.log_level == "DEBUG"
    assert args.log_file == "out.log"
    assert parse_args([]).log_level == "INFO"
