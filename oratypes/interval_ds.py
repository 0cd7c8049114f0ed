"""The Oracle INTERVAL DAY TO SECOND value."""

from __future__ import annotations

import dataclasses
import re

from oratypes.errors import ParseOracleTypeError

_PATTERN = re.compile(
    r"([+-]?)([0-9]+) ([0-9]+):([0-9]+):([0-9]+)(?:\.([0-9]+))?"
)


@dataclasses.dataclass(frozen=True, eq=False)
class IntervalDS:
    """An interval of days, hours, minutes, seconds and nanoseconds.

    All components are zero or positive for a positive interval and zero
    or negative for a negative one. ``lfprec`` (leading field precision)
    and ``fsprec`` (fractional second precision) only affect the text
    form; they are ignored in comparisons.
    """

    days: int
    hours: int
    minutes: int
    seconds: int
    nanoseconds: int
    lfprec: int = 9
    fsprec: int = 9

    def and_prec(self, lfprec, fsprec):
        """Return a copy with the given leading field and fractional second precisions."""
        return dataclasses.replace(self, lfprec=lfprec, fsprec=fsprec)

    @classmethod
    def parse(cls, text):
        """Parse text such as ``+1 02:03:04.50``.

        The precisions are taken from the number of digits in the day and
        fractional second fields.
        """
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ParseOracleTypeError("IntervalDS")
        sign, day_digits, hour_digits, minute_digits, second_digits, frac_digits = (
            match.groups()
        )
        nanoseconds = 0
        fsprec = 0
        if frac_digits is not None:
            ndigits = len(frac_digits)
            nanoseconds = int(frac_digits)
            if ndigits < 9:
                nanoseconds *= 10 ** (9 - ndigits)
                fsprec = ndigits
            elif ndigits > 9:
                nanoseconds //= 10 ** (ndigits - 9)
                fsprec = 9
            else:
                fsprec = 9
        factor = -1 if sign == "-" else 1
        return cls(
            days=factor * int(day_digits),
            hours=factor * int(hour_digits),
            minutes=factor * int(minute_digits),
            seconds=factor * int(second_digits),
            nanoseconds=factor * nanoseconds,
            lfprec=len(day_digits),
            fsprec=fsprec,
        )

    def _key(self):
        return (self.days, self.hours, self.minutes, self.seconds, self.nanoseconds)

    def __eq__(self, other):
        if not isinstance(other, IntervalDS):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        negative = any(part < 0 for part in self._key())
        sign = "-" if negative else "+"
        days = abs(self.days)
        if 2 <= self.lfprec <= 9:
            day_text = f"{days:0{self.lfprec}d}"
        else:
            day_text = str(days)
        text = (
            f"{sign}{day_text} {abs(self.hours):02d}:"
            f"{abs(self.minutes):02d}:{abs(self.seconds):02d}"
        )
        if 1 <= self.fsprec <= 9:
            fraction = abs(self.nanoseconds) // 10 ** (9 - self.fsprec)
            text += f".{fraction:0{self.fsprec}d}"
        return text