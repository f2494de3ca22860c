import logging

from pythonjsonlogger import jsonlogger

from audio_digest.logging import setup_logging


def test_setup_logging_shares_one_json_handler_with_uvicorn():
    root_logger = setup_logging()

    assert root_logger is logging.getLogger()
    (handler,) = root_logger.handlers
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)
    for name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(name)
        assert u_logger.handlers == [handler]
        assert u_logger.propagate is False
