"""The Oracle TIMESTAMP value, with or without a time zone."""

from __future__ import annotations

import dataclasses

from oratypes.errors import ParseOracleTypeError


def _trunc_divmod(value, divisor):
    """Divide rounding toward zero; the remainder takes the sign of ``value``."""
    quotient = abs(value) // divisor
    remainder = abs(value) % divisor
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


class _Scanner:
    """Reads a string one character or one run of digits at a time."""

    def __init__(self, text):
        self._text = text
        self._pos = 0
        self.ndigits = 0

    def char(self):
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def advance(self):
        self._pos += 1

    def read_digits(self):
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] in "0123456789":
            self._pos += 1
        self.ndigits = self._pos - start
        if self.ndigits == 0:
            raise ParseOracleTypeError("Timestamp")
        return int(self._text[start:self._pos])


@dataclasses.dataclass(frozen=True, eq=False)
class Timestamp:
    """A date and time with nanoseconds and an optional time zone offset.

    The precision (number of fractional second digits shown) and the
    ``with_tz`` flag affect only the text form; comparisons ignore them.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    tz_hour_offset: int = 0
    tz_minute_offset: int = 0
    precision: int = 9
    with_tz: bool = False

    def and_tz_offset(self, offset):
        """Return a copy with a time zone offset given in seconds east of UTC."""
        hours, rest = _trunc_divmod(offset, 3600)
        minutes, _ = _trunc_divmod(rest, 60)
        return dataclasses.replace(
            self, tz_hour_offset=hours, tz_minute_offset=minutes, with_tz=True
        )

    def and_tz_hm_offset(self, hour_offset, minute_offset):
        """Return a copy with a time zone offset in hours and minutes."""
        return dataclasses.replace(
            self,
            tz_hour_offset=hour_offset,
            tz_minute_offset=minute_offset,
            with_tz=True,
        )

    def and_prec(self, precision):
        """Return a copy with the given fractional second precision."""
        return dataclasses.replace(self, precision=precision)

    def tz_offset(self):
        """Return the total time zone offset from UTC in seconds."""
        return self.tz_hour_offset * 3600 + self.tz_minute_offset * 60

    @classmethod
    def parse(cls, text):
        """Parse forms such as ``2012-03-04 05:06:07.89 +08:45`` or ``20120304T050607Z``."""
        s = _Scanner(text)
        minus = s.char() == "-"
        if minus:
            s.advance()
        year = s.read_digits()
        month = 1
        day = 1
        c = s.char()
        if c in ("T", " ", None):
            if year > 10000:
                day = year % 100
                month = (year // 100) % 100
                year //= 10000
        elif c == "-":
            s.advance()
            month = s.read_digits()
            if s.char() == "-":
                s.advance()
                day = s.read_digits()
        else:
            raise ParseOracleTypeError("Timestamp")

        hour = minute = second = nanosecond = 0
        tz_hour = tz_minute = 0
        precision = 0
        with_tz = False
        if s.char() is not None:
            if s.char() not in ("T", " "):
                raise ParseOracleTypeError("Timestamp")
            s.advance()
            hour = s.read_digits()
            if s.char() == ":":
                s.advance()
                minute = s.read_digits()
                if s.char() == ":":
                    s.advance()
                    second = s.read_digits()
            elif s.ndigits == 6:
                second = hour % 100
                minute = (hour // 100) % 100
                hour //= 10000
            else:
                raise ParseOracleTypeError("Timestamp")

            if s.char() == ".":
                s.advance()
                nanosecond = s.read_digits()
                ndigits = s.ndigits
                precision = ndigits
                if ndigits < 9:
                    nanosecond *= 10 ** (9 - ndigits)
                elif ndigits > 9:
                    nanosecond //= 10 ** (ndigits - 9)
                    precision = 9

            if s.char() == " ":
                s.advance()
            sign = s.char()
            if sign in ("+", "-"):
                s.advance()
                tz_hour = s.read_digits()
                if s.char() == ":":
                    s.advance()
                    tz_minute = s.read_digits()
                else:
                    tz_minute = tz_hour % 100
                    tz_hour //= 100
                if sign == "-":
                    tz_hour = -tz_hour
                    tz_minute = -tz_minute
                with_tz = True
            elif sign == "Z":
                s.advance()
                with_tz = True
            if s.char() is not None:
                raise ParseOracleTypeError("Timestamp")

        return cls(
            year=-year if minus else year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            nanosecond=nanosecond,
            tz_hour_offset=tz_hour,
            tz_minute_offset=tz_minute,
            precision=precision,
            with_tz=with_tz,
        )

    def _key(self):
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond,
            self.tz_hour_offset,
            self.tz_minute_offset,
        )

    def __eq__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        text = (
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if 1 <= self.precision <= 9:
            fraction = self.nanosecond // 10 ** (9 - self.precision)
            text += f".{fraction:0{self.precision}d}"
        if self.with_tz:
            sign = "-" if self.tz_hour_offset < 0 or self.tz_minute_offset < 0 else "+"
            text += (
                f" {sign}{abs(self.tz_hour_offset):02d}:{abs(self.tz_minute_offset):02d}"
            )
        return text