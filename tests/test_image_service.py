import io

import pytest
from PIL import Image

from resizer.errors import ErrorKind, ResizeError, Severity
from resizer.services.image_service import ImageService


@pytest.fixture
def service():
    return ImageService()


def test_decode_reads_dimensions(service, make_jpeg, tmp_path):
    path = make_jpeg(tmp_path / "a.jpg", 300, 200)
    with service.open_source(str(path)) as stream:
        data = service.decode(stream, str(path))
    assert data.size == (300, 200)
    assert data.mode == "RGB"
    assert data.path == str(path)


def test_decode_garbage_is_recoverable(service, make_corrupt, tmp_path):
    path = make_corrupt(tmp_path / "c.jpeg")
    with service.open_source(str(path)) as stream:
        with pytest.raises(ResizeError) as info:
            service.decode(stream, str(path))
    assert info.value.kind is ErrorKind.DECODE
    assert info.value.severity is Severity.RECOVERABLE


def test_decode_truncated_jpeg_is_recoverable(service, make_jpeg, tmp_path):
    path = make_jpeg(tmp_path / "t.jpg", 64, 64)
    path.write_bytes(path.read_bytes()[:200])
    with service.open_source(str(path)) as stream:
        with pytest.raises(ResizeError) as info:
            service.decode(stream, str(path))
    assert info.value.kind is ErrorKind.DECODE


def test_decode_rejects_other_formats(service, tmp_path):
    path = tmp_path / "b.jpg"
    Image.new("RGB", (8, 8)).save(path, format="PNG")
    with service.open_source(str(path)) as stream:
        with pytest.raises(ResizeError) as info:
            service.decode(stream, str(path))
    assert info.value.kind is ErrorKind.DECODE


def test_open_missing_file_is_fatal(service, tmp_path):
    with pytest.raises(ResizeError) as info:
        service.open_source(str(tmp_path / "missing.jpg"))
    assert info.value.kind is ErrorKind.OPEN
    assert info.value.fatal


def test_create_destination_makes_parent_directories(service, tmp_path):
    target = tmp_path / "out_" / "nested" / "a.jpg"
    with service.create_destination(str(target)) as stream:
        stream.write(b"x")
    assert target.read_bytes() == b"x"


def test_create_destination_truncates_existing_file(service, tmp_path):
    target = tmp_path / "a.jpg"
    target.write_bytes(b"old contents")
    with service.create_destination(str(target)):
        pass
    assert target.read_bytes() == b""


def test_create_destination_failure_is_fatal(service, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    with pytest.raises(ResizeError) as info:
        service.create_destination(str(blocker / "a.jpg"))
    assert info.value.kind is ErrorKind.CREATE
    assert info.value.fatal


def test_encode_writes_jpeg(service):
    stream = io.BytesIO()
    service.encode(Image.new("RGBA", (20, 10)), stream, "mem.jpg")
    stream.seek(0)
    with Image.open(stream) as im:
        assert im.format == "JPEG"
        assert im.size == (20, 10)


def test_encode_failure_is_recoverable(service):
    class Broken(io.BytesIO):
        def write(self, data):
            raise OSError(28, "No space left on device")

    with pytest.raises(ResizeError) as info:
        service.encode(Image.new("RGB", (20, 10)), Broken(), "full.jpg")
    assert info.value.kind is ErrorKind.ENCODE
    assert not info.value.fatal
