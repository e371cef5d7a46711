import logging
import logging.handlers

from cyberlearn_app.core.logging_config import setup_logging


def test_console_only_without_log_dir():
    logger = setup_logging(log_level='debug')
    assert logger.name == 'cyberlearn_app'
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_rotating_file_handler(tmp_path):
    logger = setup_logging(log_level='INFO', log_dir=str(tmp_path))
    try:
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert (tmp_path / 'cyberlearn.log').exists()
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_json_format():
    logger = setup_logging(json_format=True)
    assert logger.handlers[0].formatter._fmt.startswith('{"time"')


def test_app_logger_is_package_logger(app):
    assert app.logger is logging.getLogger('cyberlearn_app')
    assert app.logger.handlers
