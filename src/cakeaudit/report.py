from __future__ import annotations

from dataclasses import asdict
import json
from typing import Any

import yaml

from .errors import ConfigError
from .recipe_diff import Change, format_change


def render_report(changes: list[Change], report_format: str = "text") -> str:
    if report_format == "text":
        return "\n".join(format_change(change) for change in changes)
    records = [_record(change) for change in changes]
    if report_format == "json":
        return json.dumps(records, indent=4, ensure_ascii=False)
    if report_format == "yaml":
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True, default_flow_style=False).rstrip("\n")
    raise ConfigError(f"Unsupported report format: {report_format}")


def _record(change: Change) -> dict[str, Any]:
    return {key: value for key, value in asdict(change).items() if value is not None}
