"""Binlog storage: a set of binlog files plus an index naming them in order."""

from __future__ import annotations

import os
import posixpath
from collections.abc import Mapping
from typing import Protocol

MAGIC_BINLOG_PAYLOAD = b"\xfebin"
MAGIC_BINLOG_OFFSET = len(MAGIC_BINLOG_PAYLOAD)


class StorageBackend(Protocol):
    """Operations a storage backend provides."""

    def list_objects(self) -> dict[str, int]: ...

    def get_object(self, name: str) -> bytes: ...

    def put_object(self, name: str, content: bytes) -> None: ...

    def open_stream(self, name: str) -> None: ...

    def write_data_to_stream(self, data: bytes) -> None: ...

    def close_stream(self) -> None: ...

    def get_description(self) -> str: ...


class Storage:
    """Keeps binlog files and their index consistent on a backend."""

    default_binlog_index_name = "binlog.index"
    default_binlog_index_entry_path = "."

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend
        self._binlog_names: list[str] = []
        self._position = 0

        storage_objects = backend.list_objects()
        if not storage_objects:
            return
        if self.default_binlog_index_name not in storage_objects:
            raise RuntimeError(
                "storage is not empty but does not contain binlog index"
            )
        self._load_binlog_index()
        self._validate_binlog_index(storage_objects)
        if self._binlog_names:
            self._position = storage_objects[self._binlog_names[-1]]

    @property
    def binlog_name(self) -> str:
        """Name of the most recent binlog, or an empty string if there is none."""
        return self._binlog_names[-1] if self._binlog_names else ""

    @property
    def binlog_names(self) -> tuple[str, ...]:
        """All binlog names in index order."""
        return tuple(self._binlog_names)

    @property
    def position(self) -> int:
        """Current write position within the most recent binlog."""
        return self._position

    @staticmethod
    def check_binlog_name(binlog_name: str) -> bool:
        """Return True if ``binlog_name`` contains no path separator."""
        return os.sep not in binlog_name

    def open_binlog(self, binlog_name: str) -> None:
        """Open a binlog for writing, creating it and registering it if new."""
        if not self.check_binlog_name(binlog_name):
            raise ValueError("cannot create a binlog with invalid name")
        self._backend.open_stream(binlog_name)
        if self._position == 0:
            self._backend.write_data_to_stream(MAGIC_BINLOG_PAYLOAD)
            self._binlog_names.append(binlog_name)
            self._save_binlog_index()
            self._position = MAGIC_BINLOG_OFFSET

    def write_event(self, event_data: bytes) -> None:
        """Append one event to the open binlog."""
        self._backend.write_data_to_stream(event_data)
        self._position += len(event_data)

    def close_binlog(self) -> None:
        """Close the open binlog."""
        self._backend.close_stream()
        self._position = 0

    def _load_binlog_index(self) -> None:
        content = self._backend.get_object(self.default_binlog_index_name)
        for line in content.decode("utf-8").split("\n"):
            if not line:
                continue
            parent, name = posixpath.split(line)
            if parent != self.default_binlog_index_entry_path:
                raise RuntimeError(
                    "binlog index contains an entry that has an invalid path"
                )
            if name == self.default_binlog_index_name:
                raise RuntimeError(
                    "binlog index contains a reference to the binlog index name"
                )
            if not self.check_binlog_name(name):
                raise RuntimeError(
                    "binlog index contains a reference to a binlog with invalid name"
                )
            if name in self._binlog_names:
                raise RuntimeError("binlog index contains a duplicate entry")
            self._binlog_names.append(name)

    def _validate_binlog_index(self, object_names: Mapping[str, int]) -> None:
        known_entries = 0
        for object_name in object_names:
            if object_name == self.default_binlog_index_name:
                continue
            if object_name not in self._binlog_names:
                raise RuntimeError(
                    "storage contains an object that is not referenced in the "
                    "binlog index"
                )
            known_entries += 1
        if known_entries != len(self._binlog_names):
            raise RuntimeError(
                "binlog index contains a reference to a non-existing object"
            )

    def _save_binlog_index(self) -> None:
        content = "".join(
            posixpath.join(self.default_binlog_index_entry_path, name) + "\n"
            for name in self._binlog_names
        )
        self._backend.put_object(
            self.default_binlog_index_name, content.encode("utf-8")
        )