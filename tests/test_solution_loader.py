from __future__ import annotations

import pytest

from exercise_grader.errors import FileSystemError
from exercise_grader.solution_loader import load_solution_files


def test_loads_direct_files_sorted_by_name(tmp_path):
    (tmp_path / "sort").write_text("print(sorted(input()))\n", encoding="utf-8")
    (tmp_path / "add").write_text("print(1)\n", encoding="utf-8")
    (tmp_path / "rules.toml").write_text("", encoding="utf-8")

    files = load_solution_files(tmp_path)

    assert [f.name for f in files] == ["add", "rules.toml", "sort"]
    assert files[0].content == "print(1)\n"


def test_skips_subdirectories(tmp_path):
    (tmp_path / "add").write_text("x", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "inner").write_text("y", encoding="utf-8")

    assert [f.name for f in load_solution_files(tmp_path)] == ["add"]


def test_preserves_content_exactly(tmp_path):
    (tmp_path / "crlf").write_bytes("line1\r\nline2 é\r\n".encode("utf-8"))

    (file,) = load_solution_files(tmp_path)

    assert file.content == "line1\r\nline2 é\r\n"


def test_missing_directory(tmp_path):
    with pytest.raises(FileSystemError, match="Cannot read directory"):
        load_solution_files(tmp_path / "absent")


def test_binary_file_is_an_error(tmp_path):
    (tmp_path / "blob").write_bytes(b"\x80\x81\x82")
    with pytest.raises(FileSystemError, match="blob"):
        load_solution_files(tmp_path)
