"""Tests for the mission-record command line."""

import logging
from pathlib import Path

import pytest

from mission_record import ArchiveWriter
from mission_record.cli import main
from mission_record.config import Config
from mission_record.utils import init_logging

from conftest import read_archive, write_file


def test_pack_archives_and_removes_workdir(tmp_path):
    work = tmp_path / "work"
    write_file(work, "observations.txt", b"{}\n")
    write_file(work, "frames/0001.bin", b"\x00\x01")
    dest = tmp_path / "mission.tar.gz"

    assert main(["pack", str(work), str(dest)]) == 0

    assert read_archive(dest) == {"observations.txt": b"{}\n", "frames/0001.bin": b"\x00\x01"}
    assert not work.exists()


def test_pack_zstd(tmp_path):
    work = tmp_path / "work"
    write_file(work, "a.txt", b"alpha")
    dest = tmp_path / "mission.tar.zst"

    assert main(["pack", "--codec", "zstd", str(work), str(dest)]) == 0
    assert read_archive(dest, "zstd") == {"a.txt": b"alpha"}


def test_pack_missing_workdir(tmp_path):
    assert main(["pack", str(tmp_path / "nope"), str(tmp_path / "out.tar.gz")]) == 1
    assert not (tmp_path / "nope").exists()


def test_pack_empty_workdir(tmp_path):
    work = tmp_path / "work"
    work.mkdir()
    assert main(["pack", str(work), str(tmp_path / "out.tar.gz")]) == 0
    assert not (tmp_path / "out.tar.gz").exists()
    assert not work.exists()


def test_pack_undeliverable(tmp_path):
    work = tmp_path / "work"
    write_file(work, "a.txt", b"alpha")
    assert main(["pack", str(work), str(tmp_path / "missing" / "out.tar.gz")]) == 1
    assert not work.exists()


def test_pack_archive_build_failure(tmp_path, monkeypatch):
    work = tmp_path / "work"
    write_file(work, "a.txt", b"alpha")

    def full_disk(self):
        raise OSError("No space left on device")

    monkeypatch.setattr(ArchiveWriter, "finish", full_disk)

    assert main(["pack", str(work), str(tmp_path / "out.tar.gz")]) == 1
    assert not work.exists()


def test_pack_reports_skipped_files_once(tmp_path, monkeypatch, capsys):
    work = tmp_path / "work"
    write_file(work, "a.txt", b"alpha")
    write_file(work, "locked.txt", b"secret")
    dest = tmp_path / "out.tar.gz"
    read_bytes = Path.read_bytes

    def locked_read(self):
        if self.name == "locked.txt":
            raise PermissionError("permission denied")
        return read_bytes(self)

    monkeypatch.setattr(Path, "read_bytes", locked_read)

    assert main(["pack", str(work), str(dest)]) == 0

    err = capsys.readouterr().err
    assert err.count("locked.txt") == 1
    assert "1 file(s) left out of" in err
    assert read_archive(dest) == {"a.txt": b"alpha"}


def test_bad_codec_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["pack", "--codec", "rar", str(tmp_path), str(tmp_path / "out")])
    assert info.value.code == 2


# === Logging setup ===

class FileLogConfig(Config):
    LOG_LEVEL = "DEBUG"


def test_init_logging_is_idempotent():
    logger = init_logging(Config)
    init_logging(Config)

    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert logger.level == logging.INFO


def test_init_logging_with_file(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "mission.log"
    monkeypatch.setattr(FileLogConfig, "LOG_FILE", str(log_file))

    logger = init_logging(FileLogConfig)
    logger.debug("hello from the recorder")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "hello from the recorder" in log_file.read_text()


def test_level_override():
    logger = init_logging(Config, level="warning")
    assert logger.level == logging.WARNING
