"""The Oracle INTERVAL YEAR TO MONTH value."""

from __future__ import annotations

import dataclasses
import re

from oratypes.errors import ParseOracleTypeError

_PATTERN = re.compile(r"([+-]?)([0-9]+)-([0-9]+)")


@dataclasses.dataclass(frozen=True, eq=False)
class IntervalYM:
    """An interval of years and months.

    All components are zero or positive for a positive interval and zero
    or negative for a negative one. The precision only affects the text
    form; it is ignored in comparisons.
    """

    years: int
    months: int
    precision: int = 9

    def and_prec(self, precision):
        """Return a copy with the given leading field precision."""
        return dataclasses.replace(self, precision=precision)

    @classmethod
    def parse(cls, text):
        """Parse text such as ``+02-03``; precision is the number of year digits."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ParseOracleTypeError("IntervalYM")
        sign, year_digits, month_digits = match.groups()
        factor = -1 if sign == "-" else 1
        return cls(
            years=factor * int(year_digits),
            months=factor * int(month_digits),
            precision=len(year_digits),
        )

    def __eq__(self, other):
        if not isinstance(other, IntervalYM):
            return NotImplemented
        return self.years == other.years and self.months == other.months

    def __hash__(self):
        return hash((self.years, self.months))

    def __str__(self):
        sign = "-" if self.years < 0 or self.months < 0 else "+"
        years = abs(self.years)
        if 2 <= self.precision <= 9:
            year_text = f"{years:0{self.precision}d}"
        else:
            year_text = str(years)
        return f"{sign}{year_text}-{abs(self.months):02d}"