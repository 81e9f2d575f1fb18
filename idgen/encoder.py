"""Fixed-width decimal packing of (calendar time, block id, seed).

Digits, most significant first::

    YY MM DD hh mm ss BB SSSSS
    17 15 13 11  9  7  5     0   <- power of ten of each field

Calendar fields other than the year are not range checked here; a month of
13 yields a malformed but valid integer. Upstream conversion from epoch
seconds is what keeps them in range.
"""

from typing import NamedTuple

YEAR_MUL = 10**17
MONTH_MUL = 10**15
DAY_MUL = 10**13
HOUR_MUL = 10**11
MINUTE_MUL = 10**9
SECOND_MUL = 10**7
BLOCK_MUL = 10**5


def _rem(value, divisor):
    """Truncated remainder; keeps the sign of value, unlike %."""
    result = abs(value) % divisor
    return -result if value < 0 else result


class CalendarTime(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def from_datetime(cls, dt):
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    @classmethod
    def coerce(cls, value):
        """Accept a CalendarTime, a flat 6-sequence or ((y, m, d), (H, M, S))."""
        if isinstance(value, cls):
            return value
        if len(value) == 2:
            (year, month, day), (hour, minute, second) = value
            return cls(year, month, day, hour, minute, second)
        return cls(*value)


def encode(calendar_time, block_id, seed):
    """Pack the fields into one integer.

    Raises ValueError when year <= 0.
    """
    year, month, day, hour, minute, second = CalendarTime.coerce(calendar_time)
    if year <= 0:
        raise ValueError(f"year must be positive, got {year}")

    return (
        _rem(year, 100) * YEAR_MUL
        + month * MONTH_MUL
        + day * DAY_MUL
        + hour * HOUR_MUL
        + minute * MINUTE_MUL
        + second * SECOND_MUL
        + _rem(block_id, 100) * BLOCK_MUL
        + seed
    )
