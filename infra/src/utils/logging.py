import logging

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "static-site"


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False  # the Pulumi host already captures stderr once

    # Only one console handler, however many modules ask for the logger
    if not any(isinstance(h.formatter, jsonlogger.JsonFormatter) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        ))
        logger.addHandler(ch)

    return logger
