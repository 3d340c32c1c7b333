import pytest

from binlogsrv.filesystem_backend import MAX_OBJECT_SIZE, FilesystemStorageBackend


def test_missing_root_rejected(tmp_path):
    with pytest.raises(ValueError, match="does not exist"):
        FilesystemStorageBackend(tmp_path / "missing")


def test_root_that_is_a_file_rejected(tmp_path):
    target = tmp_path / "plain"
    target.write_bytes(b"x")
    with pytest.raises(ValueError, match="not a directory"):
        FilesystemStorageBackend(target)


def test_root_path_property(tmp_path):
    backend = FilesystemStorageBackend(str(tmp_path))
    assert backend.root_path == tmp_path


def test_empty_directory_lists_nothing(tmp_path):
    assert FilesystemStorageBackend(tmp_path).list_objects() == {}


def test_put_and_get_round_trip(tmp_path):
    backend = FilesystemStorageBackend(tmp_path)
    backend.put_object("obj", b"\x00\x01binary\n")
    assert backend.get_object("obj") == b"\x00\x01binary\n"
    assert backend.list_objects() == {"obj": len(b"\x00\x01binary\n")}


def test_put_truncates_previous_content(tmp_path):
    backend = FilesystemStorageBackend(tmp_path)
    backend.put_object("obj", b"long content here")
    backend.put_object("obj", b"short")
    assert backend.get_object("obj") == b"short"


def test_get_missing_object_raises(tmp_path):
    backend = FilesystemStorageBackend(tmp_path)
    with pytest.raises(RuntimeError):
        backend.get_object("absent")


def test_get_too_large_object_raises(tmp_path):
    (tmp_path / "big").write_bytes(b"x" * (MAX_OBJECT_SIZE + 1))
    backend = FilesystemStorageBackend(tmp_path)
    with pytest.raises(ValueError, match="too large"):
        backend.get_object("big")


def test_list_objects_rejects_subdirectory(tmp_path):
    (tmp_path / "sub").mkdir()
    backend = FilesystemStorageBackend(tmp_path)
    with pytest.raises(RuntimeError, match="not a regular file"):
        backend.list_objects()


def test_stream_appends(tmp_path):
    backend = FilesystemStorageBackend(tmp_path)
    backend.open_stream("log")
    backend.write_data_to_stream(b"abc")
    backend.write_data_to_stream(b"def")
    backend.close_stream()
    backend.open_stream("log")
    backend.write_data_to_stream(b"ghi")
    backend.close_stream()
    assert (tmp_path / "log").read_bytes() == b"abcdefghi"


def test_write_without_open_stream_raises(tmp_path):
    backend = FilesystemStorageBackend(tmp_path)
    with pytest.raises(RuntimeError):
        backend.write_data_to_stream(b"data")


def test_write_after_close_raises(tmp_path):
    backend = FilesystemStorageBackend(tmp_path)
    backend.open_stream("log")
    backend.close_stream()
    with pytest.raises(RuntimeError):
        backend.write_data_to_stream(b"data")


def test_description(tmp_path):
    assert FilesystemStorageBackend(tmp_path).get_description() == "local filesystem"