"""
CLI interface for congkit.

Usage:
    congkit code 我你佢
    congkit code -r 寫
    congkit chars "onf*" "jh*f"
    congkit radicals "hqi rgpd"
    congkit --json --scheme v5 --filter all code 我
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

from congkit import CongkitError, __version__, get_default_table_path, load_table
from congkit.db import CongkitDB
from congkit.entry import FILTER_PRESETS, CongkitVersion


# ============================================================================
# Output Formatting
# ============================================================================

MISSING = "-"


def format_codes(db: CongkitDB, characters: str, radicals: bool = False) -> str:
    """
    One line per character: character, code, and optionally its radicals.

    Characters not in the table are shown with '-'.
    """
    lines = []
    for char, code in zip(characters, db.get_codes(characters)):
        if code is None:
            lines.append(f"{char}\t{MISSING}")
        elif radicals:
            lines.append(f"{char}\t{code}\t{db.get_radicals(code)}")
        else:
            lines.append(f"{char}\t{code}")
    return "\n".join(lines)


def format_chars(results: Dict[str, List[str]]) -> str:
    """One line per pattern: pattern, then its matches in display order."""
    return "\n".join(f"{pattern}\t{''.join(chars) or MISSING}" for pattern, chars in results.items())


def format_radicals(db: CongkitDB, codes: List[str]) -> str:
    return "\n".join(f"{code}\t{db.get_radicals(code)}" for code in codes)


def to_json(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


# ============================================================================
# Commands
# ============================================================================

def run_code(db: CongkitDB, args: argparse.Namespace) -> str:
    characters = "".join(args.characters)
    if args.json:
        data = []
        for char, code in zip(characters, db.get_codes(characters)):
            item = {"character": char, "code": code}
            if args.radicals:
                item["radicals"] = db.get_radicals(code) if code is not None else None
            data.append(item)
        return to_json(data)
    return format_codes(db, characters, radicals=args.radicals)


def run_chars(db: CongkitDB, args: argparse.Namespace) -> str:
    results = db.get_chars_mult(args.patterns)
    if args.json:
        return to_json(results)
    return format_chars(results)


def run_radicals(db: CongkitDB, args: argparse.Namespace) -> str:
    if args.json:
        return to_json({code: db.get_radicals(code) for code in args.codes})
    return format_radicals(db, args.codes)


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="congkit",
        description="Cangjie code table lookups",
    )
    parser.add_argument(
        "--table", "-t",
        default=str(get_default_table_path()),
        help="Text (.txt) or binary table file (default: %(default)s)",
    )
    parser.add_argument(
        "--scheme", "-s",
        choices=[v.value for v in CongkitVersion],
        default=CongkitVersion.V3.value,
        help="Cangjie version to look up (default: %(default)s)",
    )
    parser.add_argument(
        "--filter", "-f",
        choices=sorted(FILTER_PRESETS),
        default="chinese",
        help="Character categories to load (default: %(default)s)",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"congkit {__version__}",
    )

    parser.set_defaults(needs_table=True)

    subparsers = parser.add_subparsers(dest="command", required=True)

    code = subparsers.add_parser("code", help="Show the code of each character")
    code.add_argument("characters", nargs="+", help="Characters to look up")
    code.add_argument(
        "--radicals", "-r",
        action="store_true",
        help="Also show codes as radicals",
    )
    code.set_defaults(func=run_code)

    chars = subparsers.add_parser("chars", help="Show the characters matching code patterns")
    chars.add_argument("patterns", nargs="+", help="Codes, '*' matches one or more keys")
    chars.set_defaults(func=run_chars)

    radicals = subparsers.add_parser("radicals", help="Show codes as radicals")
    radicals.add_argument("codes", nargs="+", help="Codes to convert")
    radicals.set_defaults(func=run_radicals, needs_table=False)

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.needs_table:
            db = load_table(
                args.table,
                version=CongkitVersion(args.scheme),
                filter=FILTER_PRESETS[args.filter](),
            )
        else:
            # Radicals do not depend on the table
            db = CongkitDB()
        print(args.func(db, args))
    except (CongkitError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
