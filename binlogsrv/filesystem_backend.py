"""Storage backend that keeps objects as files in a local directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

MAX_OBJECT_SIZE = 1048576


class FilesystemStorageBackend:
    """Stores named objects as regular files directly under ``root_path``."""

    def __init__(self, root_path: str | os.PathLike[str]) -> None:
        self._root_path = Path(root_path)
        if not self._root_path.exists():
            raise ValueError("root path does not exist")
        if not self._root_path.is_dir():
            raise ValueError("root path is not a directory")
        self._stream: BinaryIO | None = None

    @property
    def root_path(self) -> Path:
        """The directory holding the stored objects."""
        return self._root_path

    def _object_path(self, name: str) -> Path:
        return self._root_path / name

    def list_objects(self) -> dict[str, int]:
        """Return a mapping from object name to object size in bytes."""
        result: dict[str, int] = {}
        for entry in os.scandir(self._root_path):
            if not entry.is_file(follow_symlinks=True):
                raise RuntimeError(
                    "filesystem storage directory contains an entry that is "
                    "not a regular file"
                )
            result[entry.name] = entry.stat().st_size
        return result

    def get_object(self, name: str) -> bytes:
        """Return the whole content of the named object."""
        path = self._object_path(name)
        try:
            stream = open(path, "rb")
        except OSError as error:
            raise RuntimeError("cannot open underlying object file") from error
        with stream:
            if os.fstat(stream.fileno()).st_size > MAX_OBJECT_SIZE:
                raise ValueError("underlying object file is too large")
            try:
                return stream.read()
            except OSError as error:
                raise RuntimeError(
                    "cannot read underlying object file content"
                ) from error

    def put_object(self, name: str, content: bytes) -> None:
        """Replace the named object with ``content``."""
        path = self._object_path(name)
        try:
            stream = open(path, "wb")
        except OSError as error:
            raise RuntimeError(
                "cannot open underlying object file for writing"
            ) from error
        with stream:
            try:
                stream.write(bytes(content))
            except OSError as error:
                raise RuntimeError(
                    "cannot write data to underlying object file"
                ) from error

    def open_stream(self, name: str) -> None:
        """Open the named object for appending."""
        self.close_stream()
        try:
            self._stream = open(self._object_path(name), "ab")
        except OSError as error:
            raise RuntimeError(
                "cannot open underlying file for the stream"
            ) from error

    def write_data_to_stream(self, data: bytes) -> None:
        """Append ``data`` to the currently open stream."""
        if self._stream is None:
            raise RuntimeError("cannot write data to the underlying stream file")
        try:
            self._stream.write(bytes(data))
            self._stream.flush()
        except OSError as error:
            raise RuntimeError(
                "cannot write data to the underlying stream file"
            ) from error

    def close_stream(self) -> None:
        """Close the currently open stream, if any."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def get_description(self) -> str:
        """Return a short description of this backend."""
        return "local filesystem"