#
# BigNotation Arithmetic Configuration
#

# Standard library -----------------------------------------------------------------------------------------------------
import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import toml


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ArithmeticConf:
    """
    Precision budgets of the arithmetic engine.

    Every operation truncates its operands to a fixed number of leading digits
    before exact integer arithmetic, which keeps the cost independent of how
    extreme the exponents are. The results are approximations by construction.

    Attributes:
        mul_digits (int)     : Leading digits kept per operand in multiplication.
        div_digits (int)     : Leading digits kept per operand in division.
        div_scale (int)      : Power of ten applied to the numerator before integer division.
        add_digits (int)     : Width of the aligned integers in addition and subtraction.
        dominant_gap (int)   : Exponent gap above which the smaller addend is ignored.
        display_digits (int) : Significant digits shown in a result's output string.
    """
    mul_digits: int = 12
    div_digits: int = 16
    div_scale: int = 24
    add_digits: int = 30
    dominant_gap: int = 18
    display_digits: int = 6

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"ArithmeticConf.{f.name} must be an int, got {type(value).__name__}")
            minimum = 0 if f.name == "dominant_gap" else 1
            if value < minimum:
                raise ValueError(f"ArithmeticConf.{f.name} must be >= {minimum}, but got {value}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """
        Create from a mapping of field overrides, missing fields keep their defaults.

        Raises:
            ValueError: On unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown ArithmeticConf keys: {unknown}, expected some of {sorted(known)}")
        return cls(**dict(data))

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str]) -> Self:
        """
        Load overrides from the ``[arithmetic]`` table of a TOML file.

        Example file:
            [arithmetic]
            mul_digits = 20
            dominant_gap = 25
        """
        data = toml.load(os.fspath(path))
        section = data.get("arithmetic", {})
        if not isinstance(section, Mapping):
            raise ValueError(f"[arithmetic] must be a table in {path}")
        return cls.from_mapping(section)


arithmetic_conf = ArithmeticConf()
