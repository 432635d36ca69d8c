"""Tests for the chunk writer."""

from pathlib import Path

import pytest

from file_splitter.errors import OutputWriteFailed, SuffixExhausted
from file_splitter.splitter.writer import ChunkWriter


class TestChunkWriter:
    """Test cases for ChunkWriter."""

    def test_emits_sequential_files(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        writer = ChunkWriter("x", 2, False)

        assert writer.emit(b"first") == Path("xaa")
        assert writer.emit(b"second") == Path("xab")

        assert (tmp_path / "xaa").read_bytes() == b"first"
        assert (tmp_path / "xab").read_bytes() == b"second"
        assert writer.stats.files_written == 2
        assert writer.stats.bytes_written == 11
        assert writer.stats.outputs == [Path("xaa"), Path("xab")]

    def test_overwrites_existing_file(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "x00").write_bytes(b"a much longer stale content")

        ChunkWriter("x", 2, True).emit(b"new")

        assert (tmp_path / "x00").read_bytes() == b"new"

    def test_accepts_memoryview(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        buffer = bytearray(b"abcdef")
        with memoryview(buffer) as view:
            ChunkWriter("m", 2, False).emit(view[:3])
        assert (tmp_path / "maa").read_bytes() == b"abc"

    def test_write_failure_raises(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        writer = ChunkWriter("missing-dir/x", 2, False)

        with pytest.raises(OutputWriteFailed) as excinfo:
            writer.emit(b"data")

        assert excinfo.value.path == Path("missing-dir/xaa")
        assert isinstance(excinfo.value.__cause__, OSError)
        assert writer.stats.files_written == 0

    def test_index_not_advanced_on_failure(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "xaa").mkdir()
        writer = ChunkWriter("x", 2, False)

        with pytest.raises(OutputWriteFailed):
            writer.emit(b"data")
        assert writer.next_path() == Path("xaa")

    def test_suffix_exhaustion(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        writer = ChunkWriter("n", 2, True)
        for _ in range(100):
            writer.emit(b"")

        with pytest.raises(SuffixExhausted):
            writer.emit(b"one too many")
        assert (tmp_path / "n99").exists()
