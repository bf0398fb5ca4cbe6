import logging

import colorlog

LOGGER_NAME = "flashdeck"
HANDLER_NAME = "flashdeck-console"
LOG_FORMAT = "%(log_color)s%(levelname)-8s | %(name)-15s | %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach one colored console handler to the package logger.

    Safe to call repeatedly (app factory, tests, uvicorn reload): the
    handler is only installed once, later calls just adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = colorlog.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(colorlog.ColoredFormatter(
            LOG_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        ))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
