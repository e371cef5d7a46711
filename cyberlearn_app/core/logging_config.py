"""
Logging setup for CyberLearn.

Everything logs under the ``cyberlearn_app`` logger: Flask's ``app.logger``
is that logger, and the learner engine's module loggers are its children.
"""

import logging
import logging.handlers
import os
from typing import Optional

PACKAGE_LOGGER = 'cyberlearn_app'

TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'

LOG_FILE_NAME = 'cyberlearn.log'
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    (Re)configure the package logger.

    Args:
        app: Flask app; when given, werkzeug's request lines are quieted
        log_level: level name, unknown names fall back to INFO
        log_dir: also write a rotating ``cyberlearn.log`` here
        json_format: one JSON object per line instead of plain text
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(JSON_FORMAT if json_format else TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    handlers = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding='utf-8',
        ))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if app is not None:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.debug("Logging ready (level=%s, dir=%s)", logging.getLevelName(level), log_dir or '-')
    return logger
