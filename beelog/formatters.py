"""Formatters that turn records into lines of text."""

import time as _time

from beelog.severity import severity_to_string

MAX_CSV_MESSAGE_SIZE = 32000


def _time_struct(record, utc):
    return _time.gmtime(record.time) if utc else _time.localtime(record.time)


def _object_text(obj):
    return "0" if obj is None else hex(id(obj))


class TxtFormatter:
    """Plain text lines: date, time, severity, thread, function and message."""

    def __init__(self, utc=False):
        self.utc = utc

    def header(self):
        return ""

    def format(self, record):
        t = _time_struct(record, self.utc)
        stamp = (
            f"{t.tm_year}-{t.tm_mon:02d}-{t.tm_mday:02d} "
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}.{record.millitm:03d}"
        )
        severity = severity_to_string(record.severity)
        return (
            f"{stamp} {severity:<5} [{record.tid}] "
            f"[{record.func}@{record.line}] {record.message}\n"
        )


class CsvFormatter:
    """Semicolon separated lines with a quoted, length-limited message."""

    def __init__(self, utc=False):
        self.utc = utc

    def header(self):
        return "Date;Time;Severity;TID;This;Function;Message\n"

    def format(self, record):
        t = _time_struct(record, self.utc)
        date = f"{t.tm_year}/{t.tm_mon:02d}/{t.tm_mday:02d}"
        clock = (
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}.{record.millitm:03d}"
        )
        fields = [
            date,
            clock,
            severity_to_string(record.severity),
            str(record.tid),
            _object_text(record.obj),
            f"{record.func}@{record.line}",
        ]
        message = record.message
        if len(message) > MAX_CSV_MESSAGE_SIZE:
            message = message[:MAX_CSV_MESSAGE_SIZE] + "..."
        quoted = "".join(f'"{token}"' for token in message.split('"'))
        return ";".join(fields) + ";" + quoted + "\n"


class FuncMessageFormatter:
    """Lines holding only the function, line number and message."""

    def header(self):
        return ""

    def format(self, record):
        return f"{record.func}@{record.line}: {record.message}\n"


class MessageOnlyFormatter:
    """Lines holding only the message."""

    def header(self):
        return ""

    def format(self, record):
        return f"{record.message}\n"