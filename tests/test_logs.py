import logging
import sys
from collections.abc import Generator

from pytest import MonkeyPatch, fixture

from conslist import setup_logging


@fixture
def restore_logging() -> Generator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("conslist").handlers = []
    logging.getLogger("conslist").propagate = True
    logging.getLogger("conslist").setLevel(logging.NOTSET)


def test_setup_logging_uses_debug_flag(
    restore_logging: None,
    monkeypatch: MonkeyPatch,
) -> None:
    monkeypatch.setenv("DEBUG_LOGGING", "false")

    setup_logging("conslist", disable_existing_loggers=False)

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("conslist").level == logging.INFO


def test_setup_logging_explicit_debug(restore_logging: None) -> None:
    setup_logging("conslist", debug=True, disable_existing_loggers=False)

    logger = logging.getLogger("conslist")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logging_uses_given_stream(restore_logging: None) -> None:
    setup_logging("conslist", stream="ext://sys.stderr", disable_existing_loggers=False)

    handler = logging.getLogger("conslist").handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
