import logging

from passgen_app.core import event_log


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "passgen.log"
    logger = event_log.setup_logging(str(log_file))
    try:
        event_log.log_event("CONFIG_CHANGED")
        event_log.log_warning("settings ignored")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert " - INFO - CONFIG_CHANGED" in content
        assert " - WARNING - settings ignored" in content
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()


def test_setup_logging_is_idempotent(tmp_path):
    logger = event_log.setup_logging(str(tmp_path / "a.log"))
    try:
        event_log.setup_logging(str(tmp_path / "b.log"))
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert not (tmp_path / "b.log").exists()
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()


def test_format_event():
    assert event_log.format_event("PASSWORD_COPIED") == "PASSWORD_COPIED"
    assert event_log.format_event("CONFIG_CHANGED", {"length": 12}) == "CONFIG_CHANGED: {'length': 12}"
