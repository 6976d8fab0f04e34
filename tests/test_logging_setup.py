import logging
import logging.handlers
from pathlib import Path

from windowless.config import TableSettings
from windowless.logging_setup import setup_logging


def _close(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_setup_logging_stream_only():
    logger = setup_logging("warning")
    try:
        assert logger.name == "windowless"
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING
    finally:
        _close(logger)


def test_setup_logging_with_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "windowless.log"
    logger = setup_logging("nonsense", str(log_file))
    try:
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        stream_handlers = [h for h in logger.handlers if not isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert stream_handlers[0].level == logging.INFO

        logger.getChild("WindowTable").debug("hello")
        file_handlers[0].flush()
        assert "| DEBUG   | windowless.WindowTable | hello" in log_file.read_text(encoding="utf-8")
    finally:
        _close(logger)


def test_setup_logging_replaces_handlers():
    setup_logging()
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        _close(logger)


def test_setup_logging_from_settings(tmp_path: Path):
    log_file = tmp_path / "windowless.log"
    settings = TableSettings(log_level="ERROR", log_file=str(log_file))
    logger = setup_logging(settings=settings)
    try:
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        stream_handlers = [h for h in logger.handlers if not isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == log_file
        assert stream_handlers[0].level == logging.ERROR
    finally:
        _close(logger)


def test_explicit_arguments_override_settings(tmp_path: Path):
    settings = TableSettings(log_level="ERROR", log_file=str(tmp_path / "ignored.log"))
    logger = setup_logging("debug", "", settings=settings)
    try:
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG
        assert not (tmp_path / "ignored.log").exists()
    finally:
        _close(logger)


def test_loaded_settings_drive_logging(tmp_path: Path):
    path = tmp_path / "windowless.json"
    TableSettings(log_level="warning", log_file=str(tmp_path / "out" / "w.log")).save(str(path))
    logger = setup_logging(settings=TableSettings.load(str(path)))
    try:
        logger.getChild("WindowTable").warning("loaded")
        for handler in logger.handlers:
            handler.flush()
        assert "loaded" in (tmp_path / "out" / "w.log").read_text(encoding="utf-8")
    finally:
        _close(logger)
