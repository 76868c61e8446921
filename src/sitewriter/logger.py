"""
Centralized logging configuration for sitewriter
统一日志配置模块
"""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "sitewriter"

_configured = False


def _configure_root() -> logging.Logger:
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _configured:
        root.setLevel(logging.INFO)

        # Avoid adding handlers multiple times
        if not root.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)

            # Format: [LEVEL] message
            formatter = logging.Formatter(
                "[%(levelname)s] %(message)s",
                datefmt="%H:%M:%S"
            )
            console_handler.setFormatter(formatter)

            root.addHandler(console_handler)
        _configured = True
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the package logger.

    Args:
        name: Logger name, usually ``__name__`` of the calling module

    Returns:
        Logger that shares the package handler
    """
    _configure_root()
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int | str) -> None:
    """
    Set the package log level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               or integer level
    """
    logger = _configure_root()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
