"""Severity-filtered logging with formatters, converters, console and rolling-file appenders, plus small utilities."""

__version__ = "0.1.0"

__all__ = ["severity", "record", "formatters", "converters", "appenders", "logger", "util"]