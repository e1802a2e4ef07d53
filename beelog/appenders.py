"""Appenders: destinations that log records are written to."""

import os
import sys
import threading
from abc import ABC, abstractmethod
from contextlib import suppress

from beelog.converters import NativeEOLConverter, UTF8Converter
from beelog.formatters import TxtFormatter
from beelog.record import split_file_name
from beelog.severity import Severity

MIN_MAX_FILE_SIZE = 1000

_COLORS = {
    Severity.FATAL: "\x1b[97m\x1b[41m",
    Severity.ERROR: "\x1b[91m",
    Severity.WARNING: "\x1b[93m",
    Severity.DEBUG: "\x1b[96m",
    Severity.VERBOSE: "\x1b[96m",
}
_RESET = "\x1b[0m\x1b[0K"


class Appender(ABC):
    """Something that accepts log records."""

    @abstractmethod
    def write(self, record):
        """Deliver one record."""


def _stream_is_tty(stream):
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


class ConsoleAppender(Appender):
    """Writes formatted records to a text stream, standard output by default."""

    def __init__(self, formatter=None, stream=None):
        self.formatter = formatter if formatter is not None else TxtFormatter()
        self.stream = stream if stream is not None else sys.stdout
        self.isatty = _stream_is_tty(self.stream)
        self._lock = threading.Lock()

    def _write_text(self, text):
        self.stream.write(text)
        self.stream.flush()

    def write(self, record):
        text = self.formatter.format(record)
        with self._lock:
            self._write_text(text)


class ColorConsoleAppender(ConsoleAppender):
    """A console appender that colours records by severity on a terminal."""

    def __init__(self, formatter=None, stream=None):
        super().__init__(formatter, stream)

    def write(self, record):
        text = self.formatter.format(record)
        with self._lock:
            if self.isatty:
                color = _COLORS.get(record.severity)
                if color:
                    self.stream.write(color)
            self._write_text(text)
            if self.isatty:
                self.stream.write(_RESET)
                self.stream.flush()


class RollingFileAppender(Appender):
    """Writes records to a file, rotating it into numbered backups when full."""

    def __init__(self, file_name, formatter=None, max_file_size=0, max_files=0,
                 converter=None):
        self.formatter = formatter if formatter is not None else TxtFormatter()
        self.converter = (
            converter if converter is not None
            else NativeEOLConverter(UTF8Converter())
        )
        self._lock = threading.Lock()
        self._file = None
        self._file_size = None
        self._max_file_size = MIN_MAX_FILE_SIZE
        self._max_files = max_files
        self._name_no_ext = ""
        self._ext = ""
        self._first_write = True
        self.set_file_name(file_name)
        self.set_max_file_size(max_file_size)

    @property
    def max_file_size(self):
        return self._max_file_size

    @property
    def max_files(self):
        return self._max_files

    @property
    def file_size(self):
        """Bytes in the current file, or None when it could not be opened."""
        return self._file_size

    def write(self, record):
        with self._lock:
            if self._first_write:
                self._open_log_file()
                self._first_write = False
            elif (self._max_files > 0 and self._file_size is not None
                  and self._file_size > self._max_file_size):
                self.roll_log_files()
            written = self._write_bytes(
                self.converter.convert(self.formatter.format(record))
            )
            if written is not None and self._file_size is not None:
                self._file_size += written

    def set_file_name(self, file_name):
        with self._lock:
            self._name_no_ext, self._ext = split_file_name(os.fspath(file_name))
            self._close_file()
            self._first_write = True

    def set_max_files(self, max_files):
        self._max_files = max_files

    def set_max_file_size(self, max_file_size):
        self._max_file_size = max(max_file_size, MIN_MAX_FILE_SIZE)

    def roll_log_files(self):
        """Shift every file up one number, dropping the oldest, and start anew."""
        self._close_file()
        with suppress(OSError):
            os.unlink(self._build_file_name(self._max_files - 1))
        for number in range(self._max_files - 2, -1, -1):
            with suppress(OSError):
                os.replace(self._build_file_name(number),
                           self._build_file_name(number + 1))
        self._open_log_file()
        self._first_write = False

    def close(self):
        with self._lock:
            self._close_file()

    def _close_file(self):
        if self._file is not None:
            with suppress(OSError):
                self._file.close()
            self._file = None

    def _write_bytes(self, data):
        if self._file is None:
            return None
        try:
            return self._file.write(data)
        except OSError:
            return None

    def _open_log_file(self):
        try:
            self._file = open(self._build_file_name(), "ab", buffering=0)
            self._file_size = self._file.seek(0, os.SEEK_END)
        except OSError:
            self._file = None
            self._file_size = None
            return
        if self._file_size == 0:
            written = self._write_bytes(
                self.converter.header(self.formatter.header())
            )
            if written is not None:
                self._file_size += written

    def _build_file_name(self, number=0):
        name = self._name_no_ext
        if number > 0:
            name += f".{number}"
        if self._ext:
            name += f".{self._ext}"
        return name