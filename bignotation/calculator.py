#
# BigNotation Calculator
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .arithmetic import (
    CalcResult,
    DifferenceSummary,
    add_or_subtract,
    difference_summary,
    divide,
    multiply,
)
from .config import ArithmeticConf
from .formatters import format_abbreviation_suffix, format_exponent, to_pretty_scientific
from .magnitude import Magnitude
from .parser import ParseFailure, parse_magnitude
from .table import AbbreviationLookup


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class CalcMode(StrEnum):
    """
    Calculator modes.

    Attributes:
        COMPARE (str) : Exponent gap, order and ratio only - no arithmetic
        ADD (str)     : A + B
        SUB (str)     : A - B
        MUL (str)     : A × B
        DIV (str)     : A / B
    """
    COMPARE = "compare"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
# @formatter:on


_SYMBOLS = {CalcMode.ADD: "+", CalcMode.SUB: "-", CalcMode.MUL: "×", CalcMode.DIV: "/"}


@dataclass(frozen=True)
class Calculation:
    """Both parsed operands, the summary and, for arithmetic modes, the result; or the parse errors."""
    mode: CalcMode
    a: Magnitude | None = None
    b: Magnitude | None = None
    summary: DifferenceSummary | None = None
    result: CalcResult | None = None
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


# Methods --------------------------------------------------------------------------------------------------------------

def calculate(
        a_text: str,
        b_text: str,
        mode: CalcMode | str = CalcMode.COMPARE,
        *,
        lookup: AbbreviationLookup,
        conf: ArithmeticConf | None = None,
) -> Calculation:
    """
    Parse two operands and run the requested mode over them.

    Parse failures are collected per operand as "A: <reason>" and "B: <reason>"
    instead of raising. The difference summary is computed in every mode.

    Raises:
        ValueError: Unknown mode string.
    """
    mode = CalcMode(mode)
    a = parse_magnitude(a_text, lookup)
    b = parse_magnitude(b_text, lookup)

    errors = tuple(
        f"{label}: {parsed.reason}"
        for label, parsed in (("A", a), ("B", b))
        if isinstance(parsed, ParseFailure)
    )
    if errors:
        return Calculation(mode=mode, errors=errors)

    if mode == CalcMode.ADD:
        result = add_or_subtract(a, b, subtract=False, conf=conf)
    elif mode == CalcMode.SUB:
        result = add_or_subtract(a, b, subtract=True, conf=conf)
    elif mode == CalcMode.MUL:
        result = multiply(a, b, conf=conf)
    elif mode == CalcMode.DIV:
        result = divide(a, b, conf=conf)
    else:
        result = None

    return Calculation(mode=mode, a=a, b=b, summary=difference_summary(a, b), result=result)


def render_calculation(
        calc: Calculation,
        lookup: AbbreviationLookup,
        *,
        sig_digits: int = 6,
        max_decimals: int = 2,
) -> str:
    """
    Multi-line plain text report of a Calculation.

    Example:
        Value A:       1e48  (1QiD)
        Value B:       1e45  (1QaD)
        Exponent gap:  3  (absolute 3)
        Ratio (A / B): 1e3  - A is larger
    """
    if not calc.ok:
        return "Fix: " + " • ".join(calc.errors)

    lines = [
        f"Value A:       {_describe(calc.a, lookup, sig_digits, max_decimals)}",
        f"Value B:       {_describe(calc.b, lookup, sig_digits, max_decimals)}",
        f"Exponent gap:  {format_exponent(calc.summary.exponent_gap)}"
        f"  (absolute {format_exponent(calc.summary.abs_gap)})",
        f"Ratio (A / B): {calc.summary.ratio}  - {calc.summary.relation}",
    ]

    if calc.result is not None:
        label = f"A {_SYMBOLS[calc.mode]} B"
        if calc.result.magnitude is None:
            lines.append(f"{label + ':':<15}{calc.result.output}")
        else:
            lines.append(f"{label + ':':<15}{_describe(calc.result.magnitude, lookup, sig_digits, max_decimals)}")
        lines.append(f"Notes:         {calc.result.notes}")

    return "\n".join(lines)


# Private methods ------------------------------------------------------------------------------------------------------

def _describe(mag: Magnitude, lookup: AbbreviationLookup, sig_digits: int, max_decimals: int) -> str:
    scientific = to_pretty_scientific(mag, sig_digits)
    suffix = format_abbreviation_suffix(mag, lookup, max_decimals)
    if suffix == to_pretty_scientific(mag, max_decimals + 1):
        return scientific
    return f"{scientific}  ({suffix})"
