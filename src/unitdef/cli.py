"""Command line wrapper over parse / format / decode.

Usage:
    unitdef check jobnets/*.txt
    unitdef format jobnet.txt -o jobnet.out.txt
    unitdef tree jobnet.txt
    unitdef decode jobnet.txt /ROOT/NET sd
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .ast import walk
from .config import Settings, load_settings
from .errors import DecodeError, ParseError, UnitDefError
from .formatter import Formatter
from .index import UnitIndex
from .parameters import decode_all
from .parser import parse_file

logger = logging.getLogger(__name__)


def cmd_check(args, settings: Settings) -> int:
    failed = 0
    for filepath in args.files:
        try:
            units = parse_file(filepath, settings.encoding)
        except (ParseError, OSError, UnicodeDecodeError) as e:
            failed += 1
            print(f"  FAIL  {filepath}: {e}")
            continue
        count = sum(1 for root in units for _ in walk(root))
        print(f"  OK    {filepath}: {count} units")
    print()
    print(f"  {len(args.files) - failed} ok, {failed} failed")
    return 1 if failed else 0


def cmd_format(args, settings: Settings) -> int:
    units = parse_file(args.file, settings.encoding)
    formatter = Formatter(settings.format)
    if args.output:
        formatter.write_file(units, args.output, settings.encoding)
    else:
        formatter.write(units, sys.stdout)
    return 0


def cmd_tree(args, settings: Settings) -> int:
    for root in parse_file(args.file, settings.encoding):
        for unit in walk(root):
            indent = "  " * (unit.fqn.depth - 1)
            print(f"{indent}{unit.name} [{unit.unit_type_code or '?'}]  {unit.fqn}")
    return 0


def cmd_decode(args, settings: Settings) -> int:
    index = UnitIndex(parse_file(args.file, settings.encoding))
    unit = index.get(args.fqn)
    if unit is None:
        print(f"unit not found: {args.fqn}", file=sys.stderr)
        return 1
    try:
        values = decode_all(unit, args.parameter)
    except DecodeError as e:
        print(f"{args.parameter}: {e}", file=sys.stderr)
        return 1
    for value in values:
        if isinstance(value, list):
            dumped = [v.model_dump(mode="json") for v in value]
            print(json.dumps(dumped, ensure_ascii=False))
        elif hasattr(value, "model_dump"):
            print(json.dumps(value.model_dump(mode="json"), ensure_ascii=False))
        elif hasattr(value, "value"):
            print(value.value)
        else:
            print(value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitdef", description="Read and write JP1/AJS unit definition files"
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("--encoding", default=None, help="Override the file encoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("check", help="Parse files and report syntax errors")
    p.add_argument("files", nargs="+", type=Path)
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("format", help="Re-emit a file in canonical layout")
    p.add_argument("file", type=Path)
    p.add_argument("-o", "--output", type=Path, default=None)
    p.set_defaults(func=cmd_format)

    p = sub.add_parser("tree", help="Print the unit hierarchy")
    p.add_argument("file", type=Path)
    p.set_defaults(func=cmd_tree)

    p = sub.add_parser("decode", help="Decode a parameter of one unit")
    p.add_argument("file", type=Path)
    p.add_argument("fqn", help="Full qualified name, e.g. /ROOT/NET")
    p.add_argument("parameter", help="Parameter name, e.g. sd")
    p.set_defaults(func=cmd_decode)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_settings(args.config)
        if args.encoding:
            settings = settings.model_copy(update={"encoding": args.encoding})
        logger.debug("settings: %s", settings)
        return args.func(args, settings)
    except (UnitDefError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
