import io
import logging

import deepdig
from deepdig import logging_config
from deepdig.world import GridWorld


def _reset(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if not isinstance(h, logging.NullHandler):
            logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


def test_configures_package_logger_not_root(monkeypatch):
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)
    root_handlers = list(logging.getLogger().handlers)
    stream = io.StringIO()
    try:
        logger = deepdig.configure_logging(logging.DEBUG, stream=stream)
        assert logger.name == "deepdig"
        assert logger.level == logging.DEBUG
        assert logging.getLogger().handlers == root_handlers

        GridWorld([[0]], blocks=None)
        assert "deepdig.world.grid" in stream.getvalue()
    finally:
        _reset(logging.getLogger("deepdig"))


def test_repeated_calls_do_not_stack_handlers(monkeypatch):
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)
    try:
        deepdig.configure_logging()
        logger = deepdig.configure_logging()
        streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(streams) == 1
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    finally:
        _reset(logging.getLogger("deepdig"))


def test_env_override_and_fallback(monkeypatch):
    try:
        monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "warning")
        assert deepdig.configure_logging().level == logging.WARNING

        monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "chatty")
        assert deepdig.configure_logging(logging.ERROR).level == logging.ERROR
    finally:
        _reset(logging.getLogger("deepdig"))
