"""A single log record and helpers for names it carries."""

import threading
import time as _time

from beelog.severity import Severity


def process_func_name(func):
    """Reduce a full function signature to its qualified name.

    The part before the opening parenthesis is kept, starting after the
    last space before it (which drops a return type).
    """
    paren = func.find("(")
    if paren < 0:
        return func
    start = func.rfind(" ", 0, paren) + 1
    return func[start:paren]


def split_file_name(file_name):
    """Split a file name at its last dot into (name without extension, extension)."""
    dot = file_name.rfind(".")
    if dot < 0:
        return file_name, ""
    return file_name[:dot], file_name[dot + 1:]


class Record:
    """One log message with the context it was produced in."""

    def __init__(self, severity, func, line, file, obj, instance_id):
        now_ns = _time.time_ns()
        self.time = now_ns // 1_000_000_000
        self.millitm = (now_ns // 1_000_000) % 1000
        self.severity = Severity(severity)
        self.tid = threading.get_native_id()
        self.obj = obj
        self.line = line
        self.file = file
        self.instance_id = instance_id
        self._func = func
        self._parts = []

    @property
    def func(self):
        """The function name, stripped of return type and arguments."""
        return process_func_name(self._func)

    @property
    def message(self):
        """Everything written to the record so far."""
        return "".join(self._parts)

    def write(self, *args):
        """Append the text form of each argument to the message."""
        for arg in args:
            if arg is None:
                self._parts.append("(null)")
            elif isinstance(arg, (bytes, bytearray)):
                self._parts.append(bytes(arg).decode("utf-8", errors="replace"))
            else:
                self._parts.append(str(arg))
        return self

    def printf(self, fmt, *args):
        """Append a printf-style formatted string to the message."""
        return self.write(fmt % args)

    def __lshift__(self, data):
        return self.write(data)