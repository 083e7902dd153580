from __future__ import annotations

from pathlib import Path

import pytest

from cakeaudit.errors import InputError
from cakeaudit.path_diff import diff_paths, read_lines


def test_diff_paths_basic() -> None:
    assert diff_paths(["a", "b", "c"], ["b", "c", "d"]) == ["ADDED d", "REMOVED a"]


def test_diff_paths_identical() -> None:
    assert diff_paths(["a", "b"], ["b", "a"]) == []


def test_diff_paths_empty_sides() -> None:
    assert diff_paths([], ["x", "y"]) == ["ADDED x", "ADDED y"]
    assert diff_paths(["x", "y"], []) == ["REMOVED x", "REMOVED y"]


# Purpose: a line repeated in the new file is reported again once it has been consumed.
def test_diff_paths_repeated_new_line() -> None:
    assert diff_paths(["a"], ["a", "a"]) == ["ADDED a"]


def test_diff_paths_repeated_old_line() -> None:
    assert diff_paths(["a", "a", "b"], ["b"]) == ["REMOVED a"]


def test_diff_paths_is_symmetric_difference() -> None:
    old = ["/etc/hosts", "/tmp/a", "/tmp/b"]
    new = ["/tmp/b", "/srv/c"]
    out = diff_paths(old, new)
    added = {line[len("ADDED ") :] for line in out if line.startswith("ADDED ")}
    removed = {line[len("REMOVED ") :] for line in out if line.startswith("REMOVED ")}
    assert added == set(new) - set(old)
    assert removed == set(old) - set(new)


def test_read_lines(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_bytes(b"a\r\nb c\n\n /d \n")
    assert read_lines(path) == ["a", "b c", "", " /d "]


def test_read_lines_without_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_bytes(b"a\nb")
    assert read_lines(path) == ["a", "b"]


def test_read_lines_empty(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_read_lines_missing(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="error opening old file"):
        read_lines(tmp_path / "missing.txt", label="old")


def test_read_lines_keeps_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_bytes(b"/srv/caf\xe9\n/srv/plain\n")
    lines = read_lines(path)
    assert lines == ["/srv/caf\udce9", "/srv/plain"]
    assert lines[0].encode("utf-8", errors="surrogateescape") == b"/srv/caf\xe9"
    assert read_lines(path, encoding="latin-1") == ["/srv/caf\xe9", "/srv/plain"]


def test_diff_paths_with_undecodable_bytes(tmp_path: Path) -> None:
    old = tmp_path / "old.txt"
    new = tmp_path / "new.txt"
    old.write_bytes(b"/a\xff\n/b\n")
    new.write_bytes(b"/b\n/a\xfe\n")
    assert diff_paths(read_lines(old), read_lines(new)) == ["ADDED /a\udcfe", "REMOVED /a\udcff"]


def test_fixture_snapshots(fixtures_dir: Path) -> None:
    old = read_lines(fixtures_dir / "snapshot1.txt")
    new = read_lines(fixtures_dir / "snapshot2.txt")
    assert diff_paths(old, new) == ["ADDED /usr/bin/cakeaudit", "REMOVED /etc/hosts"]
