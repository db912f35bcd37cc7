"""
BigNotation Formatters

Render a Magnitude as text:
    - to_pretty_scientific() : "1.25e47", "-3.14159…e1002"
    - format_abbreviation_suffix() : "125QaD", "1.5k", "-12Qi"
    - format_ratio() : "2.5e-3" for exponent gap and coefficient ratio pairs
    - format_exponent() : decimal text of an exponent of any size

The exponent printed by the scientific renderer is always Magnitude.exponent,
the power of ten of the leading digit, which is what the parser produces,
so parse → format round-trips.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .magnitude import Magnitude
from .table import AbbreviationLookup

_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


# Methods --------------------------------------------------------------------------------------------------------------

def to_pretty_scientific(mag: Magnitude, sig_digits: int = 6, *, ellipsis: str = "…") -> str:
    """
    Format a Magnitude in scientific notation with at most sig_digits significant digits.

    Digits beyond the budget are cut, not rounded, and the cut is marked with ellipsis.

    Args:
        mag: Value to format.
        sig_digits: Significant digits to show, values below 1 act as 1.
        ellipsis: Truncation marker appended after the mantissa.

    Examples:
        >>> to_pretty_scientific(Magnitude(1, "1", 45), 1)
        '1e45'
        >>> to_pretty_scientific(Magnitude(-1, "125", 47))
        '-1.25e47'
        >>> to_pretty_scientific(Magnitude(1, "3141592", 0), 3)
        '3.14…e0'
    """
    digits = mag.digits.lstrip("0") or "0"
    sig_digits = max(1, sig_digits)

    mantissa = digits[:sig_digits]
    truncated = len(digits) > sig_digits

    number = mantissa[0] + (f".{mantissa[1:]}" if len(mantissa) > 1 else "")
    sign = "-" if mag.is_negative else ""
    return f"{sign}{number}{ellipsis if truncated else ''}e{format_exponent(mag.exponent)}"


def format_abbreviation_suffix(mag: Magnitude, lookup: AbbreviationLookup, max_decimals: int = 2) -> str:
    """
    Format a Magnitude as a coefficient followed by the nearest thousand-power abbreviation.

    The abbreviation is the one for floor(exponent / 3) * 3, so the coefficient is
    in [1, 1000) and the abbreviation never denotes more than the value itself.
    Values below one thousand, and exponents missing from the table, fall back
    to scientific notation with max_decimals + 1 significant digits.

    Examples:
        With an entry 1QaD = 1e45:

        >>> format_abbreviation_suffix(Magnitude(1, "125", 47), table)
        '125QaD'
        >>> format_abbreviation_suffix(Magnitude(1, "2567", 45), table)
        '2.56QaD'
        >>> format_abbreviation_suffix(Magnitude(1, "25", 1), table)
        '2.5e1'
    """
    max_decimals = max(0, max_decimals)
    if mag.exponent < 3:
        return to_pretty_scientific(mag, max_decimals + 1)

    base_exponent = (mag.exponent // 3) * 3
    entry = lookup.find_by_exponent(base_exponent)
    if entry is None:
        return to_pretty_scientific(mag, max_decimals + 1)

    shift = mag.exponent - base_exponent
    int_part = mag.digits[:shift + 1].ljust(shift + 1, "0")
    frac_part = mag.digits[shift + 1:shift + 1 + max_decimals].rstrip("0")

    coefficient = int_part + (f".{frac_part}" if frac_part else "")
    sign = "-" if mag.is_negative else ""
    return f"{sign}{coefficient}{entry.short_abbreviation}"


def format_ratio(exponent_gap: int, ratio_coefficient: float) -> str:
    """
    Format the ratio ``ratio_coefficient × 10^exponent_gap`` as "<coefficient>e<gap>".

    Examples:
        >>> format_ratio(3, 2.5)
        '2.5e3'
        >>> format_ratio(-2, float("inf"))
        'NaNe-2'
    """
    coefficient = f"{ratio_coefficient:.6g}" if math.isfinite(ratio_coefficient) else "NaN"
    return f"{coefficient}e{format_exponent(exponent_gap)}"


def format_exponent(exponent: int) -> str:
    """
    Decimal text of an exponent, including ints past the str() digit limit.

    Examples:
        >>> format_exponent(-45)
        '-45'
        >>> len(format_exponent(10 ** 5000))
        5001
    """
    if abs(exponent) < _CHUNK:
        return str(exponent)

    # str(int) refuses huge ints, convert in fixed-size chunks instead
    remainder, chunks = abs(exponent), []
    while remainder:
        remainder, chunk = divmod(remainder, _CHUNK)
        chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")
    text = "".join(reversed(chunks)).lstrip("0")
    return f"-{text}" if exponent < 0 else text
