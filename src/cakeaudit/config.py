from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any

from .errors import ConfigError


DUPLICATE_POLICIES = ("keep-last", "reject")
REPORT_FORMATS = ("text", "json", "yaml")


@dataclass(frozen=True)
class EffectiveConfig:
    indent: int = 4
    duplicates: str = "keep-last"
    encoding: str = "utf-8"
    report_format: str = "text"
    project_dir: str = "."


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/cakeaudit"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "cakeaudit.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = dict(global_cfg)
    merged.update(project)
    merged.update(cli)
    return merged


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    project_dir = cli_args.get("project") or os.getcwd()
    cli_cfg = {
        key: cli_args[key]
        for key in ("indent", "duplicates", "encoding", "report_format")
        if cli_args.get(key) is not None
    }
    merged = merge_config(cli_cfg, load_project_config(project_dir), load_global_config())

    return EffectiveConfig(
        indent=_indent(merged.get("indent", 4)),
        duplicates=_choice("duplicates", merged.get("duplicates", "keep-last"), DUPLICATE_POLICIES),
        encoding=_encoding(merged.get("encoding", "utf-8")),
        report_format=_choice("report_format", merged.get("report_format", "text"), REPORT_FORMATS),
        project_dir=str(project_dir),
    )


def _indent(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"indent must be a non-negative integer, got {value!r}")
    return value


def _choice(key: str, value: Any, allowed: tuple[str, ...]) -> str:
    text = str(value).strip().lower()
    if text not in allowed:
        raise ConfigError(f"{key} must be one of {', '.join(allowed)}, got {value!r}")
    return text


def _encoding(value: Any) -> str:
    text = str(value).strip()
    try:
        "".encode(text)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {value!r}") from exc
    return text
