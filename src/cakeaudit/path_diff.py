from __future__ import annotations

from pathlib import Path

from .errors import InputError


def read_lines(path: str | Path, encoding: str = "utf-8", label: str = "") -> list[str]:
    """Lines of ``path`` without their line breaks.

    Bytes that are not valid in ``encoding`` are kept as surrogate escapes, so
    arbitrary POSIX paths compare byte for byte and print back unchanged.
    """
    prefix = f"{label} " if label else ""
    try:
        text = Path(path).read_bytes().decode(encoding, errors="surrogateescape")
    except OSError as exc:
        raise InputError(f"error opening {prefix}file {path}: {exc.strerror or exc}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def diff_paths(old_lines: list[str], new_lines: list[str]) -> list[str]:
    remaining = dict.fromkeys(old_lines)
    out: list[str] = []
    for line in new_lines:
        if line not in remaining:
            out.append(f"ADDED {line}")
        remaining.pop(line, None)
    out.extend(f"REMOVED {line}" for line in remaining)
    return out
