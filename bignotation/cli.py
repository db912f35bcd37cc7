"""
BigNotation CLI Tools

    bignotation lookup QaD
    bignotation calc 1QiD 2.5QaD --mode div
    bignotation format 12345e45 --decimals 3
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .calculator import CalcMode, calculate, render_calculation
from .config import ArithmeticConf, arithmetic_conf
from .formatters import format_abbreviation_suffix, to_pretty_scientific
from .parser import ParseFailure, parse_magnitude
from .table import AbbreviationTable

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_PARSE_ERROR = 2


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignotation",
        description="Convert between large-number abbreviations and scientific notation, "
                    "and compare or combine extreme-magnitude values.",
    )
    parser.add_argument("--table", type=Path, default=None,
                        help="Abbreviation table, '.toml' or 'abbreviation = scientific' text. "
                             "Defaults to the bundled short-scale table.")
    parser.add_argument("--config", type=Path, default=None,
                        help="TOML file with an [arithmetic] table of precision overrides.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    commands = parser.add_subparsers(dest="command", required=True)

    lookup = commands.add_parser("lookup", help="Find abbreviations by abbreviation, exponent or notation.")
    lookup.add_argument("query", help="e.g. QaD, 1QaD, 45, e45, 1e45")
    lookup.add_argument("--limit", type=int, default=100, help="Maximum rows to print.")

    calc = commands.add_parser("calc", help="Compare or combine two values.")
    calc.add_argument("a", help="Value A, e.g. 1QiD or 2.5e45")
    calc.add_argument("b", help="Value B")
    calc.add_argument("--mode", choices=[m.value for m in CalcMode], default=CalcMode.COMPARE.value)
    _add_display_args(calc)

    fmt = commands.add_parser("format", help="Show a value in scientific and abbreviated form.")
    fmt.add_argument("value", help="e.g. 12345e45 or 250QaD")
    _add_display_args(fmt)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        table = AbbreviationTable.from_file(args.table) if args.table else AbbreviationTable.default()
        conf = ArithmeticConf.from_toml(args.config) if args.config else arithmetic_conf
    except (OSError, ValueError, TypeError, toml.TomlDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    logger.debug("Using %r with %r", table, conf)

    if args.command == "lookup":
        return _run_lookup(table, args.query, args.limit)
    if args.command == "calc":
        calc = calculate(args.a, args.b, args.mode, lookup=table, conf=conf)
        print(render_calculation(calc, table, sig_digits=args.digits, max_decimals=args.decimals))
        return EXIT_OK if calc.ok else EXIT_PARSE_ERROR
    return _run_format(table, args.value, args.digits, args.decimals)


# Private methods ------------------------------------------------------------------------------------------------------

def _add_display_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--digits", type=int, default=6, help="Significant digits in scientific notation.")
    parser.add_argument("--decimals", type=int, default=2, help="Maximum decimals in abbreviated form.")


def _run_lookup(table: AbbreviationTable, query: str, limit: int) -> int:
    exact = table.exact_match(query)
    print(f"Exact: {exact.abbreviation} = {exact.scientific}" if exact else "No exact match")

    rows = table.search(query)
    print(f"{len(rows)} result{'' if len(rows) == 1 else 's'}")
    for entry in rows[:limit]:
        print(f"  {entry.abbreviation} = {entry.scientific}  ({entry.exponent})")
    return EXIT_OK


def _run_format(table: AbbreviationTable, value: str, digits: int, decimals: int) -> int:
    mag = parse_magnitude(value, table)
    if isinstance(mag, ParseFailure):
        print(f"Fix: {mag.reason}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    print(f"Scientific:  {to_pretty_scientific(mag, digits)}")
    print(f"Abbreviated: {format_abbreviation_suffix(mag, table, decimals)}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
