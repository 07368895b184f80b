"""Tests for Compressor."""

import gzip
import io
import logging

import pytest
import zstandard

from mission_record import Compressor


PAYLOAD = b"mission data " * 1000


def test_gzip_stream(tmp_path):
    dest = tmp_path / "out.gz"
    assert Compressor("gzip").compress(io.BytesIO(PAYLOAD), dest)
    assert gzip.decompress(dest.read_bytes()) == PAYLOAD


def test_zstd_stream(tmp_path):
    dest = tmp_path / "out.zst"
    assert Compressor("zstd", level=5).compress(io.BytesIO(PAYLOAD), dest)
    with open(dest, "rb") as f:
        assert zstandard.ZstdDecompressor().stream_reader(f).read() == PAYLOAD


def test_reads_from_current_position(tmp_path):
    dest = tmp_path / "out.gz"
    src = io.BytesIO(b"skip" + PAYLOAD)
    src.seek(4)
    Compressor().compress(src, dest)
    assert gzip.decompress(dest.read_bytes()) == PAYLOAD


def test_unknown_codec_rejected():
    with pytest.raises(ValueError):
        Compressor("lzma")


def test_unwritable_destination_returns_false(tmp_path, caplog):
    dest = tmp_path / "a_directory"
    dest.mkdir()

    with caplog.at_level(logging.WARNING, logger="mission_record"):
        assert not Compressor().compress(io.BytesIO(PAYLOAD), dest)

    assert "Unable to write recording" in caplog.text
