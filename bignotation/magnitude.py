"""
BigNotation Magnitude Model

A signed decimal value of enormous range: sign × digit string × 10^exponent,
where the exponent is the power of ten of the leading digit. The mantissa is
a plain digit string so that arithmetic can truncate it to a fixed budget,
while the exponent is an ordinary Python int of unbounded range.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from typing import Self

_DIGITS_RE = re.compile(r"[0-9]+")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Magnitude:
    """
    Immutable extreme-range decimal value.

    The represented value is ``sign × d0.d1d2... × 10^exponent``, so
    ``Magnitude(1, "125", 47)`` is 1.25×10⁴⁷.

    Normalization on construction never changes the value:
        - leading zeros are stripped and the exponent is lowered accordingly;
        - trailing zeros are stripped;
        - all-zero digits collapse to the canonical zero ``Magnitude(1, "0", 0)``,
          so negative zero does not exist.

    Raises:
        TypeError: digits is not a str, or exponent is not an int.
        ValueError: sign is not ±1, or digits contains non-digit characters.

    Examples:
        >>> Magnitude(1, "0125", 48)
        Magnitude(sign=1, digits='125', exponent=47)
        >>> Magnitude(-1, "000", 12)
        Magnitude(sign=1, digits='0', exponent=0)
    """

    sign: int = 1
    digits: str = "0"
    exponent: int = 0

    def __post_init__(self):
        self._validate()

        stripped = self.digits.lstrip("0")
        if not stripped:
            object.__setattr__(self, 'sign', 1)
            object.__setattr__(self, 'digits', "0")
            object.__setattr__(self, 'exponent', 0)
            return

        leading_zeros = len(self.digits) - len(stripped)
        object.__setattr__(self, 'digits', stripped.rstrip("0"))
        object.__setattr__(self, 'exponent', self.exponent - leading_zeros)

    @classmethod
    def zero(cls) -> Self:
        return cls(1, "0", 0)

    @classmethod
    def from_coefficient(cls, sign: int, int_part: str, frac_part: str, exponent: int) -> Self:
        """
        Fold a decimal coefficient ``int_part.frac_part × 10^exponent`` into a Magnitude.

        The decimal point is dropped and the exponent of the leading digit becomes
        ``exponent - len(frac_part) + (digit_count - 1)``.

        Examples:
            >>> Magnitude.from_coefficient(1, "12", "34", 56)
            Magnitude(sign=1, digits='1234', exponent=57)
            >>> Magnitude.from_coefficient(1, "0", "5", 45)
            Magnitude(sign=1, digits='5', exponent=44)
        """
        digits = (int_part + frac_part) or "0"
        return cls(sign, digits, exponent - len(frac_part) + (len(digits) - 1))

    @classmethod
    def from_scaled_int(cls, value: int, scale: int) -> Self:
        """
        Build a Magnitude from the exact value ``value × 10^scale``.

        Examples:
            >>> Magnitude.from_scaled_int(-6, 15)
            Magnitude(sign=-1, digits='6', exponent=15)
            >>> Magnitude.from_scaled_int(1200, -2)
            Magnitude(sign=1, digits='12', exponent=1)
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"value must be an int, got {type(value).__name__}")
        if value == 0:
            return cls.zero()
        digits = str(abs(value))
        return cls(-1 if value < 0 else 1, digits, scale + len(digits) - 1)

    @property
    def is_zero(self) -> bool:
        return self.digits == "0"

    @property
    def is_negative(self) -> bool:
        return self.sign < 0

    def negate(self) -> Self:
        """Return the value with the opposite sign; zero stays zero."""
        return type(self)(-self.sign, self.digits, self.exponent)

    def abs(self) -> Self:
        return type(self)(1, self.digits, self.exponent)

    def _validate(self):
        """Validate raw fields before normalization"""
        if isinstance(self.sign, bool) or self.sign not in (1, -1):
            raise ValueError(f"sign must be 1 or -1, got {self.sign!r}")

        if not isinstance(self.digits, str):
            raise TypeError(f"digits must be a str, got {type(self.digits).__name__}")
        if not _DIGITS_RE.fullmatch(self.digits):
            raise ValueError(f"digits must be a non-empty string of 0-9 characters, got {self.digits!r}")

        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise TypeError(f"exponent must be an int, got {type(self.exponent).__name__}")
