from __future__ import annotations

import os
import logging

# Logging configuration
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_ENV = 'STYLE_ENGINE_LOG_FILE'
LOG_LEVEL_ENV = 'STYLE_ENGINE_LOG_LEVEL'


def _resolve_level() -> int:
    try:
        raw = os.getenv(LOG_LEVEL_ENV)
        raw = raw.strip().upper() if isinstance(raw, str) else ''
        level = logging.getLevelName(raw) if raw else logging.INFO
        return level if isinstance(level, int) else logging.INFO
    except Exception:
        return logging.INFO


LOG_LEVEL = _resolve_level()


# Create a formatter that removes double underscores
class NoDunderFormatter(logging.Formatter):
    def format(self, record):
        record.name = record.name.replace("__", "")
        return super().format(record)


# Stream handler
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(NoDunderFormatter(LOG_FORMAT))

# File handler is opt-in; importing the library never creates files
_file_handler: logging.Handler | None = None


def _get_file_handler() -> logging.Handler | None:
    global _file_handler
    path = os.getenv(LOG_FILE_ENV)
    path = path.strip() if isinstance(path, str) else ''
    if not path:
        return None
    if _file_handler is None:
        log_dir = os.path.dirname(path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        _file_handler = logging.FileHandler(path, mode='a', encoding='utf-8')
        _file_handler.setFormatter(NoDunderFormatter(LOG_FORMAT))
    return _file_handler


# Logger assembly helper (idempotent)
def get_logger(name: str = 'style_engine') -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(LOG_LEVEL)
        logger.addHandler(stream_handler)
        file_handler = _get_file_handler()
        if file_handler is not None:
            logger.addHandler(file_handler)
    return logger
