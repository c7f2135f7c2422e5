# passgen_app/core/event_log.py
import logging
import os
from typing import Any
import config

logger = logging.getLogger('PassGenLogger')
logger.setLevel(logging.INFO)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(log_file: str = None) -> logging.Logger:
    """Attache le journal de l'application à `log_file` (une seule fois par processus)."""
    log_file = log_file or config.LOG_FILE
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return logger


def format_event(event_type: str, details: Any = None) -> str:
    # Details are settings only; a generated password never goes through here
    if details is None:
        return event_type
    return f"{event_type}: {details}"

def log_event(event_type: str, details: Any = None): logger.info(format_event(event_type, details))
def log_warning(message: str): logger.warning(message)
def log_error(message: str): logger.error(message)
