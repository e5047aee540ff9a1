#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os
import threading

import coloredlogs

ROOT_LOGGER_NAME = "PyCursor"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "PYCURSOR_LOG_LEVEL"

# Library default: stay silent unless the application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class CursorLogger:
    """
    Logger registry for cursor classes.
    Every class gets one child logger of the package logger, named after the class.
    """

    _loggers = {}
    _lock = threading.RLock()

    @staticmethod
    def getLogger(class_name):
        """Get a logger instance for the given class name."""
        with CursorLogger._lock:
            if class_name not in CursorLogger._loggers:
                CursorLogger._loggers[class_name] = logging.getLogger(
                    f"{ROOT_LOGGER_NAME}.{class_name}"
                )
            return CursorLogger._loggers[class_name]


# Decorator to add logger to classes
def CURSOR_LOGGER(cls):
    """Decorator to add logger functionality to a class."""
    cls.logger = CursorLogger.getLogger(cls.__name__)

    # Add logging methods to the class
    cls.debug = lambda self, msg, *args, **kwargs: cls.logger.debug(
        msg, *args, **kwargs
    )
    cls.trace = lambda self, msg, *args, **kwargs: cls.logger.debug(
        f"TRACE: {msg}", *args, **kwargs
    )

    return cls


def setupLogging(level=None):
    """
    Install colored console logging on the package logger.

    Args:
        level: Level name or number; falls back to $PYCURSOR_LOG_LEVEL, then INFO

    Returns:
        The package logger
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    coloredlogs.install(level=level, logger=logger, fmt=LOG_FORMAT)
    return logger
