"""
BigNotation Arithmetic Engine

Comparison and the four arithmetic operations over Magnitudes.

This is an approximation engine, not a bignum library: each operation cuts
its operands to a fixed budget of leading digits (see ArithmeticConf) and
runs exact integer arithmetic on what is left. The exponents stay exact.
Every result carries a note describing the precision policy that applied.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .config import ArithmeticConf, arithmetic_conf
from .formatters import format_ratio, to_pretty_scientific
from .magnitude import Magnitude

logger = logging.getLogger(__name__)

# Leading digits used for the float coefficients of a ratio estimate
RATIO_DIGITS = 15


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class CalcStatus(StrEnum):
    OK = "ok"
    DIVISION_BY_ZERO = "division_by_zero"


@dataclass(frozen=True)
class CalcResult:
    """
    Result of an arithmetic operation.

    Attributes:
        magnitude (Magnitude | None) : Computed value, None for a division by zero.
        output (str)                 : Display string, scientific notation.
        notes (str)                  : Precision policy or shortcut that produced the value.
        status (CalcStatus)          : OK or DIVISION_BY_ZERO.
    """
    magnitude: Magnitude | None
    output: str
    notes: str
    status: CalcStatus = CalcStatus.OK

    @property
    def ok(self) -> bool:
        return self.status == CalcStatus.OK


@dataclass(frozen=True)
class DifferenceSummary:
    """
    Cheap comparison of two values without full arithmetic.

    Attributes:
        exponent_gap (int) : A.exponent - B.exponent.
        abs_gap (int)      : Absolute exponent gap.
        order (int)        : compare(A, B), one of -1, 0, 1.
        relation (str)     : "A is larger", "B is larger" or "Same magnitude (very close)".
        ratio (str)        : Estimate of A / B as "<coefficient>e<gap>", "undefined" if B is zero.
    """
    exponent_gap: int
    abs_gap: int
    order: int
    relation: str
    ratio: str


# Methods --------------------------------------------------------------------------------------------------------------

def compare(a: Magnitude, b: Magnitude) -> int:
    """
    Three-way comparison of two Magnitudes: -1 if a < b, 0 if equal, 1 if a > b.

    Signs decide first, then exponents, then the mantissa digits. Mantissas are
    left-aligned, so shorter digit strings are compared as if right-padded with zeros.

    Examples:
        >>> compare(Magnitude(1, "1", 50), Magnitude(1, "9", 49))
        1
        >>> compare(Magnitude(-1, "1", 50), Magnitude(-1, "9", 49))
        -1
    """
    if a.is_zero or b.is_zero:
        if a.is_zero and b.is_zero:
            return 0
        return -b.sign if a.is_zero else a.sign

    if a.sign != b.sign:
        return 1 if a.sign > b.sign else -1

    if a.exponent != b.exponent:
        return a.sign if a.exponent > b.exponent else -a.sign

    width = max(len(a.digits), len(b.digits))
    a_digits, b_digits = a.digits.ljust(width, "0"), b.digits.ljust(width, "0")
    if a_digits == b_digits:
        return 0
    return a.sign if a_digits > b_digits else -a.sign


def scale_to_exponent(mag: Magnitude, target_exponent: int, max_digits: int) -> int:
    """
    Align a Magnitude to target_exponent as a signed integer of at most max_digits digits.

    Returns N such that ``mag ≈ N × 10^(target_exponent - (max_digits - 1))``.
    A Magnitude below the target is shifted right by cutting its mantissa tail,
    the cut digits are lost. Shifting by max_digits or more leaves nothing, so 0
    is returned. At or above the target, the leading max_digits digits are padded
    with zeros to the full width.

    Examples:
        >>> scale_to_exponent(Magnitude(1, "5", 10), 10, 4)
        5000
        >>> scale_to_exponent(Magnitude(-1, "123", 9), 10, 4)
        -123
        >>> scale_to_exponent(Magnitude(1, "123", 5), 10, 4)
        0
    """
    if max_digits < 1:
        raise ValueError(f"max_digits must be >= 1, got {max_digits}")

    shift = target_exponent - mag.exponent
    if shift > 0:
        keep = max_digits - shift
        if keep <= 0:
            return 0
        window = mag.digits[:keep].ljust(keep, "0")
    else:
        window = mag.digits[:max_digits].ljust(max_digits, "0")

    return mag.sign * int(window)


def add_or_subtract(
        a: Magnitude,
        b: Magnitude,
        subtract: bool = False,
        *,
        conf: ArithmeticConf | None = None,
) -> CalcResult:
    """
    Compute a + b, or a - b when subtract is True.

    When the exponents differ by more than conf.dominant_gap, the smaller term
    cannot reach the leading digits, so the larger term is returned unchanged
    (dominant-term shortcut). Otherwise both terms are aligned to the larger
    exponent as conf.add_digits-digit integers and summed.

    Examples:
        >>> add_or_subtract(Magnitude(1, "5", 10), Magnitude(1, "5", 10)).output
        '1e11'
        >>> add_or_subtract(Magnitude(1, "1", 100), Magnitude(1, "1", 10)).notes
        'Dominant term: exponent gap 90 exceeds 18; the smaller term cannot affect the leading digits.'
    """
    conf = conf or arithmetic_conf
    if subtract:
        b = b.negate()

    if a.is_zero or b.is_zero:
        # Zero is exact, and its exponent must not pick the dominant term
        value = b if a.is_zero else a
        return _result(value, f"Computed with ~{conf.add_digits}-digit precision.", conf)

    gap = abs(a.exponent - b.exponent)
    if gap > conf.dominant_gap:
        dominant = a if a.exponent > b.exponent else b
        logger.debug("Dominant-term shortcut, exponent gap %d > %d", gap, conf.dominant_gap)
        return _result(
            dominant,
            f"Dominant term: exponent gap {gap} exceeds {conf.dominant_gap}; "
            f"the smaller term cannot affect the leading digits.",
            conf,
        )

    target = max(a.exponent, b.exponent)
    total = (scale_to_exponent(a, target, conf.add_digits)
             + scale_to_exponent(b, target, conf.add_digits))
    value = Magnitude.from_scaled_int(total, target - (conf.add_digits - 1))
    return _result(value, f"Computed with ~{conf.add_digits}-digit precision.", conf)


def multiply(a: Magnitude, b: Magnitude, *, conf: ArithmeticConf | None = None) -> CalcResult:
    """
    Compute a × b from the leading conf.mul_digits digits of each operand.

    Each truncated mantissa is read as an integer whose last digit sits at
    ``exponent - (digit_count - 1)``, the two such exponents add up.

    Examples:
        >>> multiply(Magnitude(1, "2", 10), Magnitude(1, "3", 5)).output
        '6e15'
    """
    conf = conf or arithmetic_conf
    a_int, a_exp = _truncate(a, conf.mul_digits)
    b_int, b_exp = _truncate(b, conf.mul_digits)

    value = Magnitude.from_scaled_int(a.sign * b.sign * a_int * b_int, a_exp + b_exp)
    return _result(value, f"Approximate: operands truncated to {conf.mul_digits} leading digits.", conf)


def divide(a: Magnitude, b: Magnitude, *, conf: ArithmeticConf | None = None) -> CalcResult:
    """
    Compute a / b from the leading conf.div_digits digits of each operand.

    The numerator is scaled by 10^conf.div_scale before integer division so the
    quotient keeps fractional precision. Division by zero is reported as a
    CalcStatus.DIVISION_BY_ZERO result, never raised.

    Examples:
        >>> divide(Magnitude(1, "1", 10), Magnitude(1, "4", 2)).output
        '2.5e7'
        >>> divide(Magnitude(1, "1", 10), Magnitude.zero()).status
        <CalcStatus.DIVISION_BY_ZERO: 'division_by_zero'>
    """
    conf = conf or arithmetic_conf
    if b.is_zero:
        logger.debug("Division by zero, returning an undefined result")
        return CalcResult(
            magnitude=None,
            output="undefined",
            notes="Division by zero: B is zero.",
            status=CalcStatus.DIVISION_BY_ZERO,
        )

    a_int, a_exp = _truncate(a, conf.div_digits)
    b_int, b_exp = _truncate(b, conf.div_digits)

    quotient = (a_int * 10 ** conf.div_scale) // b_int
    value = Magnitude.from_scaled_int(a.sign * b.sign * quotient, a_exp - b_exp - conf.div_scale)
    return _result(
        value,
        f"Approximate: operands truncated to {conf.div_digits} leading digits, "
        f"quotient kept to ~{conf.div_scale} digits.",
        conf,
    )


def difference_summary(a: Magnitude, b: Magnitude) -> DifferenceSummary:
    """
    Summarize how two values relate: exponent gap, order and an estimated ratio.

    Examples:
        >>> s = difference_summary(Magnitude(1, "1", 48), Magnitude(1, "1", 45))
        >>> s.exponent_gap, s.relation, s.ratio
        (3, 'A is larger', '1e3')
    """
    gap = a.exponent - b.exponent
    order = compare(a, b)

    if order > 0:
        relation = "A is larger"
    elif order < 0:
        relation = "B is larger"
    else:
        relation = "Same magnitude (very close)"

    if b.is_zero:
        ratio = "undefined"
    else:
        ratio = format_ratio(gap, _leading_coefficient(a) / _leading_coefficient(b))

    return DifferenceSummary(exponent_gap=gap, abs_gap=abs(gap), order=order, relation=relation, ratio=ratio)


# Private methods ------------------------------------------------------------------------------------------------------

def _truncate(mag: Magnitude, max_digits: int) -> tuple[int, int]:
    """Leading max_digits digits as an unsigned int and the exponent of its last digit."""
    kept = mag.digits[:max_digits]
    return int(kept), mag.exponent - (len(kept) - 1)


def _leading_coefficient(mag: Magnitude) -> float:
    """Signed mantissa d0.d1d2... as a float, from the leading RATIO_DIGITS digits."""
    kept = mag.digits[:RATIO_DIGITS]
    return mag.sign * int(kept) / 10 ** (len(kept) - 1)


def _result(value: Magnitude, notes: str, conf: ArithmeticConf) -> CalcResult:
    return CalcResult(magnitude=value, output=to_pretty_scientific(value, conf.display_digits), notes=notes)
