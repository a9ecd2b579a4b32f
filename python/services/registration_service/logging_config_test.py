import logging

from registration_service.logging_config import setup_logging


def test_setup_logging_is_idempotent():
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG

        setup_logging("bogus")
        assert root_logger.level == logging.INFO
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
