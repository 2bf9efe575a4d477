"""Logging helpers for the finance tracker."""

from .logger import (
    AppLogger,
    Logger,
    LoggerBuilder,
    UsageLogger,
    get_app_logger,
    get_usage_logger,
)

__all__ = [
    "AppLogger",
    "Logger",
    "LoggerBuilder",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
