import logging

from sectioncanvas.logging_config import LOG_LEVEL_ENV, level_from_env, setup_logging


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "canvas.log"
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger.name == "sectioncanvas"
    assert len(logger.handlers) == 2
    assert log_file.exists()


def test_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert level_from_env() == logging.DEBUG

    monkeypatch.setenv(LOG_LEVEL_ENV, "not-a-level")
    assert level_from_env(logging.WARNING) == logging.WARNING

    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert level_from_env() == logging.INFO
