"""
BigNotation Parser

Converts free-form text into a Magnitude. Accepted forms, tried in order:

1. Decimal-scientific:          "-12.34e56", "2.5E45", ".5e3"
2. Bare power of ten:           "e123", "1e123"
3. Coefficient + abbreviation:  "250Qa", "0.5QiD", "QaD", "1QaD"
4. Plain decimal number:        "0", "1500", "-2.5"

Whitespace is ignored everywhere and letters are case-insensitive. Parsing
never raises for text input, failures come back as ParseFailure values.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .magnitude import Magnitude
from .table import AbbreviationLookup

_COEF = r"(?:\d+(?:\.\d+)?|\.\d+)"

_SCIENTIFIC_RE = re.compile(rf"([+-]?)({_COEF})e([+-]?\d+)", re.IGNORECASE | re.ASCII)
_POWER_RE = re.compile(r"([+-]?)1?e([+-]?\d+)", re.IGNORECASE | re.ASCII)
_ABBREV_RE = re.compile(rf"([+-]?)({_COEF})?([a-z][a-z0-9]*)", re.IGNORECASE | re.ASCII)
_PLAIN_RE = re.compile(rf"([+-]?)({_COEF})", re.ASCII)

# Shapes of grammars 1 and 3 with any run of digits and dots as the coefficient
_LOOSE_SCIENTIFIC_RE = re.compile(r"[+-]?([0-9.]+)e[+-]?\d+", re.IGNORECASE | re.ASCII)
_LOOSE_ABBREV_RE = re.compile(r"[+-]?([0-9.]+)[a-z][a-z0-9]*", re.IGNORECASE | re.ASCII)

_WHITESPACE_RE = re.compile(r"\s+")

HINT = "Could not parse. Try like: 1QaD, QaD, 2.5QaD, 1e45, e45, 2.5e45."

MAX_EXPONENT_DIGITS = 4000


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ParseFailure:
    """Why a text could not be read as a Magnitude; falsy so that `if not result` works."""
    reason: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.reason


# Methods --------------------------------------------------------------------------------------------------------------

def parse_magnitude(text: Any, lookup: AbbreviationLookup) -> Magnitude | ParseFailure:
    """
    Parse a number in scientific, abbreviation or plain decimal form.

    Args:
        text: Input text. None counts as empty, other non-str values are read via str().
        lookup: Abbreviation service, the suffix is tried as given and with a leading "1".

    Returns:
        Magnitude on success, ParseFailure with a human-readable reason otherwise.

    Examples:
        >>> parse_magnitude("-12.34e56", table)
        Magnitude(sign=-1, digits='1234', exponent=57)
        >>> parse_magnitude("2.5QaD", table)
        Magnitude(sign=1, digits='25', exponent=45)
        >>> parse_magnitude("1.2.3e4", table)
        ParseFailure(reason="Invalid coefficient: '1.2.3'")
    """
    clean = _WHITESPACE_RE.sub("", "" if text is None else str(text))
    if not clean:
        return ParseFailure("Empty value.")

    if match := _SCIENTIFIC_RE.fullmatch(clean):
        sign, coef, exp_text = match.groups()
        return _build(sign, coef, exp_text)

    if match := _POWER_RE.fullmatch(clean):
        sign, exp_text = match.groups()
        return _build(sign, "1", exp_text)

    if match := _ABBREV_RE.fullmatch(clean):
        sign, coef, suffix = match.groups()
        entry = _resolve_suffix(suffix, lookup)
        if entry is None:
            return ParseFailure(f"Unknown abbreviation: {suffix}")
        return _build(sign, coef or "1", entry.exponent)

    if match := _PLAIN_RE.fullmatch(clean):
        sign, coef = match.groups()
        return _build(sign, coef, 0)

    if match := (_LOOSE_SCIENTIFIC_RE.fullmatch(clean) or _LOOSE_ABBREV_RE.fullmatch(clean)):
        return ParseFailure(f"Invalid coefficient: {match.group(1)!r}")

    return ParseFailure(HINT)


# Private methods ------------------------------------------------------------------------------------------------------

def _build(sign: str, coef: str, exponent: str | int) -> Magnitude | ParseFailure:
    """Fold a validated coefficient and exponent into a Magnitude."""
    if isinstance(exponent, str):
        # Results of arithmetic must still fit str(int) limits
        if len(exponent.lstrip("+-")) > MAX_EXPONENT_DIGITS:
            return ParseFailure(f"Exponent out of range: more than {MAX_EXPONENT_DIGITS} digits.")
        exponent = int(exponent)

    int_part, _, frac_part = coef.partition(".")
    return Magnitude.from_coefficient(-1 if sign == "-" else 1, int_part, frac_part, exponent)


def _resolve_suffix(suffix: str, lookup: AbbreviationLookup):
    key = suffix.lower()
    return lookup.find_by_abbreviation(key) or lookup.find_by_abbreviation(f"1{key}")
