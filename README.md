# binlogsrv

Building blocks for a server that collects MySQL binary logs: a binlog
storage that keeps binlog files together with an index, a local-directory
storage backend, and a few helpers for binary parsing, log levels and
error reporting.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `binlogsrv.storage`

`Storage(backend)` keeps binlog files and a `binlog.index` object on a
backend consistent with each other.

- On creation, an empty backend is accepted as a new storage. A non-empty
  backend must hold `binlog.index`; every line of the index must have the
  form `./<name>`, must not name the index itself, must not contain a path
  separator and must not repeat an earlier entry. Every other object on the
  backend must be listed in the index, and every index entry must exist.
  Any violation raises `RuntimeError`.
- `open_binlog(name)` opens a binlog for appending. If the current position
  is 0, it writes the 4-byte magic header `b"\xfebin"`, adds the name to the
  index and saves the index. A name containing a path separator raises
  `ValueError`.
- `write_event(data)` appends bytes and advances the position.
- `close_binlog()` closes the stream and resets the position to 0.
- Properties: `binlog_name` (most recent name, or `""`), `binlog_names`
  (all names in index order) and `position`.
- `Storage.check_binlog_name(name)` tells whether a name is acceptable.

`StorageBackend` is the protocol a backend satisfies: `list_objects`,
`get_object`, `put_object`, `open_stream`, `write_data_to_stream`,
`close_stream` and `get_description`.

### `binlogsrv.filesystem_backend`

`FilesystemStorageBackend(root_path)` stores each object as a regular file
directly under an existing directory (otherwise `ValueError`).
`list_objects()` maps file names to sizes and raises `RuntimeError` if the
directory holds anything other than regular files. `get_object()` refuses
files larger than `MAX_OBJECT_SIZE` (1 MiB) with `ValueError`.
`get_description()` returns `"local filesystem"`.

### Helpers

- `binlogsrv.byte_reader`: `extract_fixed_int(buffer, size)` reads an
  unsigned little-endian integer and `extract_byte_array(buffer, size)` reads
  raw bytes; both return the value and a `memoryview` of the rest, and raise
  `ValueError` when too few bytes remain.
- `binlogsrv.log_severity`: the `LogSeverity` levels `trace`, `debug`,
  `info`, `warning`, `error`, `fatal`; `str()` gives the label and
  `parse_log_severity(text)` parses one (raising `ValueError` otherwise).
- `binlogsrv.core_error`: `CoreError(code, message)`, a client-library error
  carrying its numeric code; `mysql_error_message(code)` gives `"CR_<code>"`.
- `binlogsrv.flag_set`: `flags_to_string(flags)` renders the named single
  bits of an `enum.Flag` value, lowest first, joined by `" | "`.
- `binlogsrv.composite_name`: `CompositeName`, a stack of name elements
  rendered with `str()` as `a.b.c` or with `str_reverse()` as `c.b.a`.
- `binlogsrv.command_line`: `extract_executable_name(argv)` and
  `get_readable_command_line_arguments(argv)`.

## Example

```python
from binlogsrv.filesystem_backend import FilesystemStorageBackend
from binlogsrv.storage import Storage

backend = FilesystemStorageBackend("/var/lib/binlogsrv")
storage = Storage(backend)
storage.open_binlog("binlog.000001")
storage.write_event(b"...event bytes...")
print(storage.binlog_name, storage.position)
storage.close_binlog()
```

## What this package does not do

- It does not connect to a MySQL server or fetch binary log events; the
  events written to a `Storage` must come from elsewhere.
- It has no configuration loading (no JSON or command-line configuration)
  and no factory that picks a backend by name; backends are constructed
  directly.
- The only storage backend is the local filesystem one.
- It installs no command; it is used as a library.