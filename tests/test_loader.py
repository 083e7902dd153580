from __future__ import annotations

from pathlib import Path

import pytest

from cakeaudit.errors import FormatError, InputError
from cakeaudit.loader import load_recipes, read_bytes

DUPLICATED = b'{"cake": [{"name": "A", "time": "1 h"}, {"name": "A", "time": "2 h"}]}'


def test_load_recipes_json(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    path.write_bytes(b'{"cake": [{"name": "A", "time": "1 h"}]}')
    assert [c.name for c in load_recipes(path).cakes] == ["A"]


def test_load_recipes_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="failed to open file"):
        load_recipes(tmp_path / "missing.xml")


def test_load_recipes_checks_extension_first(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="unsupported file extension: .txt"):
        load_recipes(tmp_path / "missing.txt")


def test_read_bytes_directory(tmp_path: Path) -> None:
    with pytest.raises(InputError):
        read_bytes(tmp_path)


def test_duplicates_kept_by_default(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    path.write_bytes(DUPLICATED)
    assert len(load_recipes(path).cakes) == 2


def test_duplicates_rejected(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    path.write_bytes(DUPLICATED)
    with pytest.raises(FormatError, match="duplicate cake 'A'"):
        load_recipes(path, duplicates="reject")
