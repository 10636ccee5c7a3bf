"""Tests for fortune file discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fortuner.errors import PathNotFoundError
from fortuner.utils.files import find_files, iter_source_paths


class TestIterSourcePaths:
    """Test iter_source_paths function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """Should yield a plain file as itself."""
        jokes = tmp_path / "jokes"
        jokes.write_text("A\n%\n")

        assert list(iter_source_paths(jokes)) == [jokes]

    def test_single_reserved_file(self, tmp_path: Path) -> None:
        """Should skip a reserved index file even when named directly."""
        index = tmp_path / "jokes.dat"
        index.write_bytes(b"\x00\x01")

        assert list(iter_source_paths(index)) == []

    def test_nested_directories(self, tmp_path: Path) -> None:
        """Should walk into nested directories."""
        subdir = tmp_path / "sub"
        subdir.mkdir()
        (tmp_path / "root").write_text("r\n%\n")
        (subdir / "nested").write_text("n\n%\n")

        names = {p.name for p in iter_source_paths(tmp_path)}

        assert names == {"root", "nested"}

    def test_reserved_extension_is_case_sensitive(self, tmp_path: Path) -> None:
        """Only the exact lowercase extension is reserved."""
        (tmp_path / "jokes.dat").write_text("x")
        (tmp_path / "quotes.DAT").write_text("y")
        (tmp_path / "dat").write_text("z")

        names = {p.name for p in iter_source_paths(tmp_path)}

        assert names == {"quotes.DAT", "dat"}


class TestFindFiles:
    """Test find_files function."""

    def test_sorted_output(self, tmp_path: Path) -> None:
        """Should return files sorted by path."""
        for name in ("zeta", "alpha", "mid"):
            (tmp_path / name).write_text("x\n%\n")

        files = find_files([str(tmp_path)])

        assert files == sorted(files)
        assert [p.name for p in files] == ["alpha", "mid", "zeta"]

    def test_same_directory_twice(self, tmp_path: Path) -> None:
        """Should list each file once when a directory is given twice."""
        (tmp_path / "a").write_text("x\n%\n")
        (tmp_path / "b").write_text("y\n%\n")

        files = find_files([str(tmp_path), str(tmp_path)])

        assert [p.name for p in files] == ["a", "b"]

    def test_file_and_parent_directory(self, tmp_path: Path) -> None:
        """Should dedupe a file reachable directly and through its directory."""
        fortune = tmp_path / "quotes"
        fortune.write_text("x\n%\n")

        files = find_files([str(fortune), str(tmp_path)])

        assert files == [fortune]

    def test_excludes_reserved_files(self, tmp_path: Path) -> None:
        """Should drop .dat files from directory walks."""
        (tmp_path / "jokes").write_text("x\n%\n")
        (tmp_path / "jokes.dat").write_bytes(b"\x00")

        files = find_files([str(tmp_path)])

        assert [p.name for p in files] == ["jokes"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Should return an empty list for an empty directory."""
        assert find_files([str(tmp_path)]) == []

    def test_missing_path(self) -> None:
        """Should name the missing path in the error."""
        with pytest.raises(PathNotFoundError) as excinfo:
            find_files(["/no/such/path"])

        assert excinfo.value.path == "/no/such/path"
        assert str(excinfo.value).startswith("/no/such/path: ")
        assert isinstance(excinfo.value.cause, FileNotFoundError)

    def test_missing_path_stops_before_later_paths(self, tmp_path: Path) -> None:
        """Should fail on the first missing path without checking the rest."""
        missing = tmp_path / "missing"
        also_missing = tmp_path / "also_missing"

        with pytest.raises(PathNotFoundError) as excinfo:
            find_files([str(missing), str(also_missing)])

        assert excinfo.value.path == str(missing)

    def test_empty_string_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty path is missing, not the current directory."""
        (tmp_path / "jokes").write_text("x\n%\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(PathNotFoundError) as excinfo:
            find_files([""])

        assert excinfo.value.path == ""

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read every directory",
    )
    def test_unreadable_subdirectory_skipped(self, tmp_path: Path) -> None:
        """Should keep walking past a directory it cannot list."""
        (tmp_path / "jokes").write_text("x\n%\n")
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "hidden").write_text("y\n%\n")
        locked.chmod(0)
        try:
            files = find_files([str(tmp_path)])
        finally:
            locked.chmod(0o755)

        assert [p.name for p in files] == ["jokes"]
