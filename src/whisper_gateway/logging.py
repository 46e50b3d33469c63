import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
_SERVER_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error"]


def setup_logging():
    """
    Configures structured JSON logging for the gateway.

    Every record goes to stdout as one JSON object carrying timestamp, level,
    logger name, message, the `extra` fields of the call, and the Datadog
    trace_id/span_id. Uvicorn's own loggers are routed through the same
    handler so access logs and application logs share a format. The level
    comes from LOG_LEVEL (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(_JSON_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for logger_name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
