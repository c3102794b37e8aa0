#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
import logging

import colorlog
from wrapt import synchronized


# Trace log level
LOG_TRACE = 5

logging.addLevelName(LOG_TRACE, "TRACE")


class Log:
    """
    Logging module

    Call get() to get a cached instance of a specific logger.
    Colored output can optionally be enabled.
    """

    _LOGGERS: dict[str, logging.Logger] = {}
    _HANDLERS: dict[str, logging.Handler] = {}
    _use_color = False
    _level: int | None = None

    @classmethod
    def _formatter(cls) -> logging.Formatter:
        if cls._use_color:
            return colorlog.ColoredFormatter(
                " %(log_color)s%(name)s/%(levelname)-8s%(reset)s |"
                " %(log_color)s%(message)s%(reset)s"
            )
        return logging.Formatter(" %(name)s/%(levelname)-8s | %(message)s")

    @synchronized
    @classmethod
    def get(cls, tag: str) -> logging.Logger:
        """
        Get the global logger instance for the given tag

        :param tag: the log tag
        :return: the logger instance
        """
        if tag not in cls._LOGGERS:
            handler = colorlog.StreamHandler()
            handler.setFormatter(cls._formatter())

            logger = logging.getLogger(tag)
            logger.addHandler(handler)
            if cls._level is not None:
                logger.setLevel(cls._level)

            cls._HANDLERS[tag] = handler
            cls._LOGGERS[tag] = logger

        return cls._LOGGERS[tag]

    @synchronized
    @classmethod
    def enable_color(cls, enable: bool):
        """
        Enable colored output for all loggers, including the ones
        already handed out by get()
        """
        cls._use_color = enable
        for handler in cls._HANDLERS.values():
            handler.setFormatter(cls._formatter())

    @synchronized
    @classmethod
    def set_level(cls, level: int):
        """Set the level of every logger, including ones created later."""
        cls._level = level
        for logger in cls._LOGGERS.values():
            logger.setLevel(level)
