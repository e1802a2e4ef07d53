"""Everyday helpers: timestamps, directories, file output, byte decoding and INI settings."""

import configparser
import datetime
import os
import struct

from beelog.logger import get_logger, init_file
from beelog.severity import Severity

DEFAULT_LOG_MAX_SIZE = 1024 * 1024 * 10
LOG_DIR = "./log/"
_INI_GENERAL = "General"

_log_initialized = False


def get_datetime(only_date=False, name=False):
    """Return the current date, or date and time, as text.

    With ``only_date`` the date is joined by dashes when ``name`` is true and
    by underscores otherwise. Without it, ``name`` gives a string usable as a
    file name (``yyyy_MM_dd_hh_mm_ss``), otherwise ``yyyy-MM-dd hh:mm:ss``.
    """
    now = datetime.datetime.now()
    if only_date:
        pattern = "%Y-%m-%d" if name else "%Y_%m_%d"
    else:
        pattern = "%Y_%m_%d_%H_%M_%S" if name else "%Y-%m-%d %H:%M:%S"
    return now.strftime(pattern)


def create_dir(path):
    """Create a directory and its parents, with levels separated by '/'.

    Returns the path of the directory as built from its parts.
    """
    if os.path.isdir(path):
        return path
    slash = path.rfind("/")
    parent = create_dir(path[:slash]) if slash > 0 else ""
    dir_name = path[slash + 1:]
    if dir_name:
        os.makedirs(os.path.join(parent or ".", dir_name), exist_ok=True)
    return f"{parent}/{dir_name}" if slash > 0 else dir_name


def log_init(max_size=DEFAULT_LOG_MAX_SIZE):
    """Set up debug logging to ./log/<date>.log once per process.

    Returns the default logger.
    """
    global _log_initialized
    if not _log_initialized:
        directory = create_dir(LOG_DIR)
        file_name = directory + get_datetime(True) + ".log"
        init_file(Severity.DEBUG, file_name, max_size, 1)
        _log_initialized = True
    return get_logger()


class WriteFile:
    """A file opened for appending binary data, with its directories created."""

    def __init__(self):
        self.file_path = ""
        self._stream = None

    @property
    def is_open(self):
        return self._stream is not None and not self._stream.closed

    def open(self, path):
        """Open ``path`` for appending; './' or a bare name means this directory."""
        slash = path.rfind("/")
        file_name = path[slash + 1:]
        if not file_name:
            raise ValueError(f"no file name in path {path!r}")
        if slash > 0:
            directory = create_dir(path[:slash])
            self.file_path = f"{directory}/{file_name}"
        else:
            self.file_path = file_name
        self.close()
        self._stream = open(self.file_path, "ab")
        return self

    def close(self):
        if self.is_open:
            self._stream.close()

    def write(self, data):
        """Append text (encoded as UTF-8) or bytes and flush."""
        if not self.is_open:
            raise ValueError("file is not open")
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._stream.write(bytes(data))
        self._stream.flush()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False


def _unpack(fmt, size, data, little_endian):
    data = bytes(data)
    if len(data) < size:
        raise ValueError(f"need {size} bytes, got {len(data)}")
    order = "<" if little_endian else ">"
    return struct.unpack(order + fmt, data[:size])[0]


def bytes_to_float(data, little_endian=True):
    """Decode a 4-byte IEEE float."""
    return _unpack("f", 4, data, little_endian)


def bytes_to_double(data, little_endian=True):
    """Decode an 8-byte IEEE double."""
    return _unpack("d", 8, data, little_endian)


def bytes_to_short(data, little_endian=True):
    """Decode a signed 16-bit integer."""
    return _unpack("h", 2, data, little_endian)


def bytes_to_ushort(data, little_endian=True):
    """Decode an unsigned 16-bit integer."""
    return _unpack("H", 2, data, little_endian)


def bytes_to_int(data, little_endian=True):
    """Decode a signed 32-bit integer."""
    return _unpack("i", 4, data, little_endian)


def bytes3_to_int(data, little_endian=True):
    """Decode a signed 24-bit integer; its top bit marks a negative value."""
    data = bytes(data)
    if len(data) < 3:
        raise ValueError(f"need 3 bytes, got {len(data)}")
    return int.from_bytes(data[:3], "little" if little_endian else "big", signed=True)


def bytes_to_uint(data, little_endian=True):
    """Decode an unsigned 32-bit integer."""
    return _unpack("I", 4, data, little_endian)


def _split_key(key):
    group, sep, name = key.partition("/")
    if not sep:
        return _INI_GENERAL, key
    return group, name.replace("/", "\\")


def _ini_text(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _load_ini(filename):
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    if os.path.exists(filename):
        parser.read(filename, encoding="utf-8")
    return parser


def write_ini(filename, key, value):
    """Store ``value`` under ``key`` ('group/name') in a UTF-8 INI file."""
    parser = _load_ini(filename)
    section, option = _split_key(key)
    if not parser.has_section(section):
        parser.add_section(section)
    parser.set(section, option, _ini_text(value))
    with open(filename, "w", encoding="utf-8") as handle:
        parser.write(handle)


def read_ini(filename, key):
    """Return the text stored under ``key`` in an INI file, or None if absent."""
    parser = _load_ini(filename)
    section, option = _split_key(key)
    return parser.get(section, option, fallback=None)