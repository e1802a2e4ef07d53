"""Loggers, the per-instance registry and the functions that set them up."""

import inspect
import os
import threading

from beelog.appenders import Appender, RollingFileAppender
from beelog.formatters import CsvFormatter, TxtFormatter
from beelog.record import Record, split_file_name
from beelog.severity import Severity

DEFAULT_INSTANCE_ID = 0

_registry_lock = threading.Lock()
_loggers = {}
_file_appenders = {}


def _caller(depth):
    """Return (function name, line number) of the frame `depth` levels up."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "", 0
        return frame.f_code.co_name, frame.f_lineno
    finally:
        del frame


class Logger(Appender):
    """Passes records at or above its severity threshold to its appenders."""

    def __init__(self, max_severity=Severity.NONE):
        self.max_severity = Severity(max_severity)
        self.instance_id = DEFAULT_INSTANCE_ID
        self._appenders = []

    @property
    def appenders(self):
        return tuple(self._appenders)

    def add_appender(self, appender):
        """Attach an appender and return the logger for chaining."""
        if appender is self:
            raise ValueError("a logger cannot be its own appender")
        self._appenders.append(appender)
        return self

    def check_severity(self, severity):
        """True when records of this severity pass the threshold."""
        return Severity(severity) <= self.max_severity

    def write(self, record):
        """Deliver a record to every appender if its severity passes."""
        if self.check_severity(record.severity):
            self._dispatch(record)

    def _dispatch(self, record):
        for appender in self._appenders:
            appender.write(record)

    def __iadd__(self, record):
        self._dispatch(record)
        return self

    def log(self, severity, *args, func=None, line=None, file=""):
        """Build a record from the arguments and send it out.

        Returns the record, or None when the severity is filtered out.
        Function name and line default to those of the caller.
        """
        if not self.check_severity(severity):
            return None
        if func is None or line is None:
            caller_func, caller_line = _caller(1)
            func = caller_func if func is None else func
            line = caller_line if line is None else line
        record = Record(severity, func, line, file, None, self.instance_id)
        record.write(*args)
        self._dispatch(record)
        return record


def get_logger(instance_id=DEFAULT_INSTANCE_ID):
    """Return the logger set up for an instance id, or None if there is none."""
    with _registry_lock:
        return _loggers.get(instance_id)


def init(max_severity=Severity.NONE, appender=None, instance_id=DEFAULT_INSTANCE_ID):
    """Create the logger for an instance id on first call and attach an appender.

    Later calls reuse the existing logger; their severity is ignored.
    """
    with _registry_lock:
        logger = _loggers.get(instance_id)
        if logger is None:
            logger = Logger(max_severity)
            logger.instance_id = instance_id
            _loggers[instance_id] = logger
    if appender is not None:
        logger.add_appender(appender)
    return logger


def is_csv(file_name):
    """True when the file name's extension is exactly '.csv'."""
    _, ext = split_file_name(os.fspath(file_name))
    dot = os.fspath(file_name).rfind(".")
    return dot >= 0 and ext == "csv"


def init_file(max_severity, file_name, max_file_size=0, max_files=0,
              formatter=None, instance_id=DEFAULT_INSTANCE_ID):
    """Set up a logger writing to a rolling file.

    Without a formatter, CSV is chosen for '.csv' files and plain text
    otherwise. One file appender exists per formatter type and instance id;
    later calls reuse it.
    """
    if formatter is None:
        formatter = CsvFormatter() if is_csv(file_name) else TxtFormatter()
    key = (type(formatter), instance_id)
    with _registry_lock:
        appender = _file_appenders.get(key)
        created = appender is None
        if created:
            appender = RollingFileAppender(
                file_name, formatter, max_file_size, max_files
            )
            _file_appenders[key] = appender
    logger = init(max_severity, None, instance_id)
    if created or appender not in logger.appenders:
        logger.add_appender(appender)
    return logger


def log(severity, *args, instance_id=DEFAULT_INSTANCE_ID):
    """Log through the logger of an instance id, if it exists and accepts it.

    Returns the record written, or None.
    """
    logger = get_logger(instance_id)
    if logger is None or not logger.check_severity(severity):
        return None
    func, line = _caller(1)
    return logger.log(severity, *args, func=func, line=line)