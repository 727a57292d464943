import pytest

from photo_describer.errors import StorageWriteFailure
from photo_describer.temp_store import transient_image


async def test_transient_image_writes_bytes_and_removes_file(tmp_path):
    async with transient_image(b"jpeg-bytes", str(tmp_path)) as path:
        assert path.read_bytes() == b"jpeg-bytes"
        assert path.parent == tmp_path
        assert path.name.startswith("photo_")
        assert path.suffix == ".jpeg"

    assert not path.exists()
    assert list(tmp_path.iterdir()) == []


async def test_transient_image_removes_file_when_body_raises(tmp_path):
    with pytest.raises(RuntimeError):
        async with transient_image(b"bytes", str(tmp_path)) as path:
            raise RuntimeError("boom")

    assert not path.exists()


async def test_transient_image_names_are_unique(tmp_path):
    async with transient_image(b"a", str(tmp_path)) as first:
        async with transient_image(b"b", str(tmp_path)) as second:
            assert first != second
            assert len(list(tmp_path.iterdir())) == 2

    assert list(tmp_path.iterdir()) == []


async def test_transient_image_tolerates_file_already_gone(tmp_path):
    async with transient_image(b"bytes", str(tmp_path)) as path:
        path.unlink()

    assert list(tmp_path.iterdir()) == []


async def test_transient_image_missing_directory_is_storage_failure(tmp_path):
    with pytest.raises(StorageWriteFailure, match="Failed to save image"):
        async with transient_image(b"bytes", str(tmp_path / "missing")):
            pass


async def test_transient_image_write_error_leaves_nothing_behind(tmp_path, monkeypatch):
    def failing_fdopen(fd, mode):
        raise OSError("disk full")

    monkeypatch.setattr("photo_describer.temp_store.os.fdopen", failing_fdopen)

    with pytest.raises(StorageWriteFailure):
        async with transient_image(b"bytes", str(tmp_path)):
            pass

    assert list(tmp_path.iterdir()) == []


async def test_transient_image_does_io_off_the_event_loop(tmp_path, monkeypatch):
    offloaded = []

    async def recording_threadpool(func, *args):
        offloaded.append(func.__name__)
        return func(*args)

    monkeypatch.setattr("photo_describer.temp_store.run_in_threadpool", recording_threadpool)

    async with transient_image(b"bytes", str(tmp_path)):
        pass

    assert offloaded == ["_write", "_remove"]
