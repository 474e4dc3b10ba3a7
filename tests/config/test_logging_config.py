from pathlib import Path
import logging

from jp_post_tracking.config.logging_config import (
    coerce_level,
    get_logger,
)


def _reset(name):
    lg = logging.getLogger(name)
    for h in list(lg.handlers):
        lg.removeHandler(h)
        h.close()
    return lg


def test_coerce_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert coerce_level("debug") == logging.DEBUG
    assert coerce_level("warn") == logging.WARNING
    assert coerce_level(logging.ERROR) == logging.ERROR
    assert coerce_level("bogus") == logging.INFO
    assert coerce_level(None) == logging.INFO

    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert coerce_level(None) == logging.ERROR


def test_get_logger_idempotent_no_duplicate_handlers(tmp_path):
    _reset("jpt.test")
    log_path = tmp_path / "run.log"

    logger = get_logger("jpt.test", level="DEBUG", log_file=log_path, console=False)
    logger2 = get_logger("jpt.test", level="DEBUG", log_file=log_path, console=False)

    assert logger is logger2
    assert len(logger.handlers) == 1  # just file handler


def test_get_logger_writes_to_file(tmp_path):
    _reset("jpt.file")
    log_file = tmp_path / "logs" / "app.log"
    logger = get_logger("jpt.file", level="INFO", log_file=log_file, console=False)

    logger.info("123456789012: used=%s", True)

    assert "123456789012: used=True" in log_file.read_text(encoding="utf-8")


def test_get_logger_respects_level_env(monkeypatch, tmp_path):
    _reset("jpt.level.env")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    log_file = tmp_path / "lvl.log"
    logger = get_logger("jpt.level.env", log_file=log_file, console=False)

    logger.info("should NOT appear")
    logger.error("should appear")

    text = log_file.read_text(encoding="utf-8")
    assert "should appear" in text
    assert "should NOT appear" not in text


def test_console_then_file_gives_two_handlers(tmp_path):
    _reset("jpt.multi")

    lg1 = get_logger("jpt.multi", level="INFO", console=True, log_file=None)
    lg2 = get_logger("jpt.multi", level="INFO", console=True, log_file=tmp_path / "x.log")

    assert lg1 is lg2
    assert len(lg2.handlers) == 2
