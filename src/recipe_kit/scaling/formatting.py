# src/recipe_kit/scaling/formatting.py

import math
from dataclasses import dataclass
from enum import Enum


class FractionStyle(str, Enum):
    ASCII = "ascii"
    UNICODE = "unicode"


# (value, ascii text, unicode glyph)
COMMON_FRACTIONS: list[tuple[float, str, str]] = [
    (1 / 4, "1/4", "¼"),
    (1 / 3, "1/3", "⅓"),
    (1 / 2, "1/2", "½"),
    (2 / 3, "2/3", "⅔"),
    (3 / 4, "3/4", "¾"),
]


@dataclass(frozen=True)
class QuantityFormatter:
    """Renders a scaled quantity for display.

    Whole numbers print without decimals. Values below `fraction_ceiling`
    whose fractional part is within `tolerance` of a common fraction print
    as ``"<whole> <fraction>"``. Everything else gets one decimal place.
    """

    style: FractionStyle = FractionStyle.ASCII
    tolerance: float = 0.01
    fraction_ceiling: float = 5.0

    @classmethod
    def ascii(cls) -> "QuantityFormatter":
        return cls(style=FractionStyle.ASCII, tolerance=0.01)

    @classmethod
    def unicode(cls) -> "QuantityFormatter":
        return cls(style=FractionStyle.UNICODE, tolerance=0.05)

    def format(self, number: float) -> str:
        if float(number).is_integer():
            return f"{number:.0f}"

        if number < self.fraction_ceiling:
            fraction = self._closest_fraction(number)
            if fraction is not None:
                whole = math.floor(number)
                return f"{whole} {fraction}" if whole else fraction

        return f"{number:.1f}"

    def _closest_fraction(self, number: float) -> str | None:
        fractional = number - math.floor(number)
        for value, ascii_text, glyph in COMMON_FRACTIONS:
            if abs(fractional - value) < self.tolerance:
                return glyph if self.style is FractionStyle.UNICODE else ascii_text
        return None
