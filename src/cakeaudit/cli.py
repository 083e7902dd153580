from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Callable

from .config import DUPLICATE_POLICIES, REPORT_FORMATS, EffectiveConfig, resolve_config
from .errors import CakeauditError, UsageError
from .services import compare_databases, compare_file_lists, convert_database


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def read_db_main(argv: list[str] | None = None) -> int:
    return _run(_read_db_parser(), _cmd_read_db, argv)


def compare_db_main(argv: list[str] | None = None) -> int:
    return _run(_compare_db_parser(), _cmd_compare_db, argv)


def compare_fs_main(argv: list[str] | None = None) -> int:
    return _run(_compare_fs_parser(), _cmd_compare_fs, argv)


TOOLS: dict[str, Callable[[list[str] | None], int]] = {
    "readdb": read_db_main,
    "comparedb": compare_db_main,
    "comparefs": compare_fs_main,
}


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in TOOLS:
        print(f"Error: usage: cakeaudit {{{','.join(TOOLS)}}} [options]", file=sys.stderr)
        return 1
    return TOOLS[args[0]](args[1:])


def _run(
    parser: argparse.ArgumentParser,
    handler: Callable[[argparse.Namespace], int],
    argv: list[str] | None,
) -> int:
    try:
        args = parser.parse_args(argv)
        return handler(args)
    except CakeauditError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _common() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--project", help="Directory holding cakeaudit.toml (default: cwd)")
    common.add_argument("--verbose", action="store_true", help="Print progress to stderr")
    return common


def _read_db_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="readdb", parents=[_common()], description="Convert a recipe database to the other format")
    parser.add_argument("-f", "--file", dest="path", help="Database file (.json or .xml)")
    parser.add_argument("--indent", type=int)
    parser.add_argument("--duplicates", choices=DUPLICATE_POLICIES)
    return parser


def _compare_db_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="comparedb", parents=[_common()], description="Compare two recipe databases")
    parser.add_argument("--old", dest="old_path", help="Old database file")
    parser.add_argument("--new", dest="new_path", help="New database file")
    parser.add_argument("--duplicates", choices=DUPLICATE_POLICIES)
    parser.add_argument("--report-format", dest="report_format", choices=REPORT_FORMATS)
    return parser


def _compare_fs_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="comparefs", parents=[_common()], description="Compare two path lists")
    parser.add_argument("--old", dest="old_path", help="Old snapshot file")
    parser.add_argument("--new", dest="new_path", help="New snapshot file")
    parser.add_argument("--encoding")
    return parser


def _cmd_read_db(args: argparse.Namespace) -> int:
    if not args.path:
        raise UsageError("Please specify the file path using the -f option")
    cfg = _resolve_cfg(args)
    print(convert_database(args.path, cfg, verbose=args.verbose))
    return 0


def _cmd_compare_db(args: argparse.Namespace) -> int:
    _require_old_new(args)
    cfg = _resolve_cfg(args)
    report = compare_databases(args.old_path, args.new_path, cfg, verbose=args.verbose)
    if report:
        print(report)
    return 0


def _cmd_compare_fs(args: argparse.Namespace) -> int:
    _require_old_new(args)
    cfg = _resolve_cfg(args)
    lines = compare_file_lists(args.old_path, args.new_path, cfg, verbose=args.verbose)
    if isinstance(sys.stdout, io.TextIOWrapper):
        # Undecodable path bytes travel as surrogate escapes; write them back as bytes.
        sys.stdout.reconfigure(errors="surrogateescape")
    for line in lines:
        print(line)
    return 0


def _require_old_new(args: argparse.Namespace) -> None:
    if not args.old_path or not args.new_path:
        raise UsageError("Usage: --old <old_file> --new <new_file>")


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(vars(args).copy())
