# beelog

A small logging library built from severities, records, formatters,
converters and appenders. It also has helpers for timestamps, directories,
appending to files, decoding binary numbers and reading and writing INI
settings. Only the standard library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Severities

`beelog.severity.Severity` is an `IntEnum`. Its levels run from the most
severe to the most detailed: `NONE` (0), `FATAL`, `ERROR`, `WARNING`, `INFO`,
`DEBUG` and `VERBOSE` (6).

- `severity_to_string(severity)` gives the short name used in output:
  `FATAL`, `ERROR`, `WARN`, `INFO`, `DEBUG`, `VERB`. Any other value gives
  `NONE`.
- `severity_from_string(text)` reads only the first letter, without regard
  to case. An empty string or an unknown letter gives `Severity.NONE`.

## Loggers

A `beelog.logger.Logger` accepts a record when the record's severity is no
greater than the logger's `max_severity`. It then passes the record to each of
its appenders in turn.

```python
from beelog.logger import init, log
from beelog.appenders import ColorConsoleAppender
from beelog.formatters import TxtFormatter
from beelog.severity import Severity

logger = init(Severity.DEBUG, ColorConsoleAppender(TxtFormatter()))
logger.log(Severity.WARNING, "disk almost full")
log(Severity.INFO, "started, value=", 42)   # message: "started, value=42"
```

- `init(max_severity, appender, instance_id)` creates the logger for an
  instance id (default 0) the first time it is called. Later calls return
  that same logger and ignore their severity. If an appender is given, it is
  added to the logger.
- `get_logger(instance_id)` returns the logger for that id, or `None` if
  there is none yet.
- `Logger.log(severity, *args, func=None, line=None, file="")` builds a
  `Record` from the arguments and sends it out. It returns the record, or
  `None` when the severity is filtered out. Unless given, the function name
  and line number are those of the caller.
- `log(severity, *args, instance_id=0)` does the same through the registered
  logger for that id. It does nothing and returns `None` when that logger does
  not exist.
- `Logger.add_appender(appender)` returns the logger, so calls can be
  chained. A logger cannot be added to itself (`ValueError`).

### Logging to a rolling file

```python
from beelog.logger import init_file
from beelog.severity import Severity

init_file(Severity.DEBUG, "app.log", max_file_size=10 * 1024 * 1024, max_files=3)
```

- If `init_file` is given no formatter, it picks one with `is_csv(file_name)`.
  A name whose extension is exactly `.csv` gets `CsvFormatter`; any other name
  gets `TxtFormatter`.
- There is one file appender for each pair of formatter type and instance id,
  and later calls reuse it.
- The directory of the log file must already exist. If the file cannot be
  opened, records are silently dropped.

`beelog.appenders.RollingFileAppender` opens its file for appending on the
first write.

- If the file is empty, the converter's header is written first. The default
  converter writes a UTF-8 byte-order mark followed by the formatter's header.
- The size limit is `max_file_size`, never less than 1000 bytes. When
  `max_files` is greater than zero and the file has grown past the limit, the
  next write rolls the files. The oldest file (`name.<max_files-1>.ext`) is
  deleted, each remaining file moves up one number (`name.ext` becomes
  `name.1.ext`, and so on), and a new file is started. With `max_files=1` this
  simply deletes the file and starts over.
- `set_file_name`, `set_max_files`, `set_max_file_size`, `roll_log_files` and
  `close` control the appender directly.

### Other appenders

- `ConsoleAppender(formatter, stream)` writes each formatted record to a text
  stream and flushes it. The default stream is standard output and the
  default formatter is `TxtFormatter`.
- `ColorConsoleAppender` works the same way. When the stream is a terminal,
  it adds ANSI colours: white on red for fatal, red for error, yellow for
  warning and cyan for debug and verbose.
- To write your own appender, subclass `Appender` and implement
  `write(record)`.

## Records

A `beelog.record.Record` holds the following:

- the time, as whole seconds in `time` and milliseconds in `millitm`;
- the severity;
- the native thread id (`tid`);
- the object, line number, file and instance id;
- the function name;
- the message.

The `func` property trims a full signature down to its name: it keeps the
text between the last space before `(` and the `(`. To build the message, use
`write(*args)`, `printf(fmt, *args)` (`%`-formatting) or the `<<` operator.
`None` is written as `(null)` and bytes are decoded as UTF-8.

`split_file_name(name)` splits a file name at its last dot, giving the name
and the extension. `process_func_name(func)` is the trimming that `func`
uses.

## Formatters and converters

Formatters live in `beelog.formatters`:

- `TxtFormatter(utc=False)` produces
  `YYYY-MM-DD hh:mm:ss.mmm SEVER [tid] [func@line] message`. The severity is
  padded to five characters.
- `CsvFormatter(utc=False)` produces
  `Date;Time;Severity;TID;This;Function;Message` and writes that as its header
  line. The message is cut to 32000 characters, with `...` added when cut, and
  is put in quotes. Any `"` inside the message splits it into separately
  quoted parts.
- `FuncMessageFormatter` produces `func@line: message`.
- `MessageOnlyFormatter` produces the message alone.

Converters live in `beelog.converters`:

- `UTF8Converter` encodes text as UTF-8. Its `header` puts a byte-order mark
  in front.
- `NativeEOLConverter(inner, eol)` replaces each `\n` with `eol`, which
  defaults to `os.linesep`, and then hands the text to the inner converter.

## Helpers (`beelog.util`)

- `get_datetime(only_date=False, name=False)` returns the current date or
  date and time:
  - `only_date=True`: `yyyy_MM_dd`, or `yyyy-MM-dd` when `name=True`.
  - otherwise: `yyyy-MM-dd hh:mm:ss`, or `yyyy_MM_dd_hh_mm_ss` when
    `name=True`, which is safe to use as a file name.
- `create_dir(path)` creates each missing directory of a `/`-separated path
  and returns the path.
- `log_init(max_size=10 MiB)` runs only once per process. It creates `./log/`
  and logs at `DEBUG` level to `./log/<yyyy_MM_dd>.log` with `max_files=1`,
  then returns the default logger.
- `WriteFile` appends binary data to a file and creates the file's
  directories as needed.
  - `open(path)` opens the file. It raises `ValueError` if the path has no
    file name.
  - `write(data)` accepts text, encoded as UTF-8, or bytes, and flushes after
    each write. It raises `ValueError` if the file is not open.
  - `file_path` holds the path, and `is_open` tells whether the file is open.
  - It can be used as a context manager.
- Number decoding: `bytes_to_float`, `bytes_to_double`, `bytes_to_short`,
  `bytes_to_ushort`, `bytes_to_int`, `bytes3_to_int` and `bytes_to_uint`.
  - Each takes `(data, little_endian=True)`.
  - `bytes3_to_int` reads a signed 24-bit value.
  - Too few bytes raise `ValueError`. Extra bytes are ignored.
- `write_ini(filename, key, value)` and `read_ini(filename, key)` store and
  read settings in a UTF-8 INI file.
  - Keys take the form `section/name`. A key with no `/` goes into the
    `General` section.
  - Booleans are stored as `true` or `false`.
  - `read_ini` returns the stored text, or `None` when the key is absent.

## What it does not do

beelog is a library only. It has no command-line program, does not read
logging configuration from files, and offers no network or system-log
appenders.