# src/sandhi_splitter/cli.py
import argparse
import logging
import sys

from .config import load_settings
from .sandhi import WINDOW_MODES, EmptyTableError, FormatError, load_rule_table, read_sandhi_rules, split
from .utils import ConfigParseError, ConfigTypeError


def main(argv=None):
    """CLI: print every candidate two-way split of TEXT, one `prefix suffix` per line."""
    parser = argparse.ArgumentParser(
        prog="sandhi-split",
        description="Propose every split of a Sanskrit string, reversing known sandhi at the boundary.",
    )
    parser.add_argument("text", help="Transliterated text to split (e.g. te)")
    parser.add_argument(
        "--rules",
        default=None,
        help="Path to a rules TSV (left, right, combined). Defaults to <data>/sandhi.tsv",
    )
    parser.add_argument(
        "--window",
        choices=WINDOW_MODES,
        default=None,
        help="Fusion-window bound: inclusive tries 1..L, legacy tries 0..L-1",
    )
    parser.add_argument(
        "--include-trailing",
        action="store_true",
        default=None,
        dest="include_trailing",
        help="Also emit the split with the whole text as prefix",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings()
        if args.rules:
            table = read_sandhi_rules(args.rules)
        else:
            table = load_rule_table(settings.rules_file)
        window = args.window or settings.window
        include_trailing = settings.include_trailing if args.include_trailing is None else True
        candidates = split(args.text, table, window=window, include_trailing=include_trailing)
    except (OSError, FormatError, EmptyTableError, ConfigParseError, ConfigTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for prefix, suffix in candidates:
        print(f"{prefix} {suffix}")


if __name__ == "__main__":
    main()
