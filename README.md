# ringlog

A small asynchronous logger. A log call formats a line and pushes it onto a
bounded ring buffer; a background sink thread drains that buffer into one or
more writers: standard output, standard error, or a file.

## Installation

```
pip install .
```

## Usage

```python
from ringlog.logger import LogLevel, get_logger, log_info, log_warning

logger = get_logger()
logger.init("app.log", LogLevel.INFO, True)

log_info("This is an info message")
log_warning("This", "is", "a", "warning", "message", 1, 2, 3)

logger.finish()  # drain the buffer, flush the writers, stop the sink thread
```

Each record looks like this:

```
[2024-01-01 12:00:00][INFO] This is an info message
```

The timestamp is local time. All arguments of a log call are converted to
text and joined with no separator; floats are written in `%g` style, so
`4.5` appears as `4.5` and `10.1` as `10.1`.

`get_logger()` returns one process-wide `Logger`, and `log_debug`,
`log_info`, `log_warning`, `log_error` and `log_critical` log through it.
The logger calls `finish()` on itself at interpreter exit. You can also
create a separate `Logger()` and call its `debug`, `info`, `warning`,
`error`, `critical` or `log(level, *args)` methods directly.

`Logger.init(filename="", level=LogLevel.INFO, console_output=True, override=False)`:

- writes to standard output when `console_output` is true, and to
  `filename` when it is not empty;
- refuses to overwrite a file: if `filename` already exists it raises
  `FileExistsError`;
- finishes any sink started by an earlier `init` before starting a new one;
- accepts `override` but ignores it.

Records below the minimum level are discarded; change the level with
`Logger.set_log_level`. Logging at a level that passes the filter before
`init` has been called raises `RuntimeError`. The buffer holds 2000
records, and a record logged while it is full is dropped silently.

`LogLevel` has the members `DEBUG`, `INFO`, `WARNING`, `ERROR` and
`CRITICAL`. `level_to_string(level)` gives a level's name, or `UNKNOWN`,
and `format_message(level, message, timestamp)` builds a single record.

### Building blocks

- `ringlog.ring_buffer.RingBuffer`: a thread-safe fixed-capacity FIFO
  (default capacity 2000; a capacity below 1 raises `ValueError`). `push`
  returns `False` when the buffer is full, `pop` raises `RingBufferEmpty`
  when there is nothing to take, and `is_empty`, `is_full`, `capacity`,
  `reset` and `len()` report on or clear it.
- `ringlog.writer`: `FileWriter` (buffers up to 20 MB in memory, writes it
  to a new file, and closes the file on `flush`), `ConsoleWriter` (writes
  to standard output or standard error according to `ConsoleType`) and
  `NoneWriter` (discards everything). `create_writer(WriterType, filename)`
  builds one by type; a `FILE` writer without a filename raises
  `ValueError`. Every writer is a context manager that flushes on exit.
- `ringlog.sink.Sink(buffer, writer_types, filename)`: starts a thread that
  moves records from the buffer to every writer, polling every 100 ms when
  the buffer is empty. `finish()` drains what is left, flushes the writers
  and waits for the thread to stop.

## Commands

```
ringlog-demo [--log-file PATH]
```

Logs a short demonstration at every level to standard output and to the
log file (default `app.log`). The debug line is filtered out. It exits with
status 1 if the log file already exists.

```
ringlog-benchmark [--threads N] [--message-size BYTES] [--message-count N] [--log-file PATH]
```

Logs from several threads at once into the log file (default `app.log`,
with 20 threads each logging 100000 messages of 1000 bytes) and prints the
throughput in MB/s. Because records are dropped when the buffer is full,
the figure measures how fast records are accepted, not how many reach the
file. It also exits with status 1 if the log file already exists.

## Limitations

ringlog does not rotate or append to existing log files, does not block or
retry when the buffer is full, and is not connected to Python's standard
`logging` module.