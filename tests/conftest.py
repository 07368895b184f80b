import io
import logging
import tarfile
from pathlib import Path

import pytest
import zstandard

from mission_record import RecordingSpec


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo init_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger("mission_record")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_spec(tmp_path):
    def _make(codec="gzip", name="record.tar.gz"):
        return RecordingSpec(
            is_recording=True,
            working_dir=tmp_path / "records" / "mission",
            destination=tmp_path / name,
            codec=codec,
        )
    return _make


def write_file(root: Path, rel: str, data: bytes) -> Path:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p


def read_archive(path: Path, codec: str = "gzip") -> dict:
    """Return {entry name: bytes} for a compressed tar on disk."""
    if codec == "gzip":
        tf = tarfile.open(path, "r:gz")
    else:
        with open(path, "rb") as f:
            raw = zstandard.ZstdDecompressor().stream_reader(f).read()
        tf = tarfile.open(fileobj=io.BytesIO(raw), mode="r:")
    with tf:
        return {m.name: tf.extractfile(m).read() for m in tf.getmembers() if m.isfile()}
