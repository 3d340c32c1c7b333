"""Binlog storage, a filesystem storage backend and helpers for a MySQL binary log server."""

__version__ = "0.1.0"