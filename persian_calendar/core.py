"""Solar Hijri (Persian) calendar conversion.

This module is the single source of truth for turning a Unix timestamp
into Persian calendar fields.  Years are estimated linearly from Khayam's
mean year length; leap years and weekdays follow the 2820/128-year
intercalation table.

Timestamps are taken as already shifted into the desired local time, no
timezone handling happens here.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

SECONDS_PER_DAY: int = 86400

# Length of a year as calculated by Khayam is 365.2422 days (approx.);
# the value valid from year 1380 / 2000 A.D. is used instead.
KHAYAM_YEAR: float = 365.24218956
# Correcting factor for the year length which Khayam could not reach.
KHAYAM_YEAR_CORRECTION: float = 0.00000006152

# Aligns Unix epoch day 0 with the start of the elapsed-year count.
EPOCH_DAY_OFFSET: int = 288
# Persian year of elapsed-year count 0.
EPOCH_YEAR: int = 1348
# "Rasad" year offset used by the weekday and leap-year tables.
RASAD_OFFSET: int = 2346

GRAND_CYCLE: int = 2820
SUB_CYCLE: int = 128

# Days elapsed before each month of a common year.
MONTH_STARTS: List[int] = [0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336]

# Khayam's leap-year positions inside the 128-year sub-cycle.  The trailing
# 0 is part of the table: sub-cycle position 0 is a leap year.
LEAP_YEAR_POSITIONS: List[int] = [
    5, 9, 13, 17, 21, 25, 29,
    34, 38, 42, 46, 50, 54, 58, 62,
    67, 71, 75, 79, 83, 87, 91, 95,
    100, 104, 108, 112, 116, 120, 124, 0,
]

# Largest magnitude handled before float arithmetic stops being exact.
MAX_ABS_TIMESTAMP: int = 2**53


class TimestampOutOfRange(ValueError):
    """Raised when a timestamp cannot be mapped onto a valid Persian date."""


@dataclass(frozen=True)
class TimeRepresentation:
    """Persian calendar fields of a single instant."""

    second: int
    minute: int
    hour: int
    day: int
    month: int
    year: int
    day_of_year: int

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Return ``(year, month, day, hour, minute, second)``."""

        return self.year, self.month, self.day, self.hour, self.minute, self.second


def _round_half_away(value: float) -> int:
    # Python's round() is banker's rounding; the year table needs half-up.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _as_seconds(timestamp: int | float) -> int:
    if isinstance(timestamp, bool) or not isinstance(timestamp, int | float):
        raise TimestampOutOfRange(f"timestamp must be a number, got {timestamp!r}")
    if isinstance(timestamp, float):
        if not math.isfinite(timestamp):
            raise TimestampOutOfRange(f"timestamp must be finite, got {timestamp!r}")
        timestamp = math.floor(timestamp)
    if abs(timestamp) > MAX_ABS_TIMESTAMP:
        raise TimestampOutOfRange(f"timestamp {timestamp} is out of range")
    return timestamp


def month_of(day_of_year: int) -> int:
    """Return the month (1..12) containing ``day_of_year``."""

    month = 0
    while month < 12 and day_of_year > MONTH_STARTS[month]:
        month += 1
    return month


def convert(timestamp: int | float) -> TimeRepresentation:
    """Convert seconds since the epoch into a :class:`TimeRepresentation`.

    Time-of-day fields use floor division, so negative timestamps count
    backwards from midnight of the previous day.  Finite floats are floored
    to whole seconds.

    Far from the epoch the corrected year estimate drifts away from the
    day count; a day-of-year that falls outside ``1..366`` is carried into
    the neighbouring year.

    Raises :class:`TimestampOutOfRange` for non-numeric, non-finite or huge
    input.
    """

    ts = _as_seconds(timestamp)

    second = ts % 60
    minute = (ts % 3600) // 60
    hour = (ts % SECONDS_PER_DAY) // 3600
    days = ts // SECONDS_PER_DAY + EPOCH_DAY_OFFSET

    years = math.floor(days / KHAYAM_YEAR - days * KHAYAM_YEAR_CORRECTION)
    day_of_year = days - _round_half_away(years * KHAYAM_YEAR)
    if day_of_year == 0:
        # Rounding at the year boundary; keeps the year count unchanged.
        day_of_year = 366

    years += EPOCH_YEAR
    while day_of_year < 1:
        years -= 1
        day_of_year += year_length(years)
    while day_of_year > 366:
        day_of_year -= year_length(years)
        years += 1

    month = month_of(day_of_year)
    day = day_of_year - MONTH_STARTS[month - 1]

    logger.debug("convert %s -> %04d-%02d-%02d (doy %d)", ts, years, month, day, day_of_year)
    return TimeRepresentation(
        second=second,
        minute=minute,
        hour=hour,
        day=day,
        month=month,
        year=years,
        day_of_year=day_of_year,
    )


def leap_key(year: int) -> int:
    """Return the position of ``year`` inside its 128-year sub-cycle."""

    rasad = year + RASAD_OFFSET
    return (rasad % GRAND_CYCLE) % SUB_CYCLE


def is_leap(year: int) -> bool:
    """Return True if ``year`` is a leap year by Khayam's table."""

    return leap_key(year) in LEAP_YEAR_POSITIONS


def day_of_week(year: int, day_of_year: int) -> int:
    """Return weekday index (0=Saturday .. 6=Friday)."""

    rasad = year + RASAD_OFFSET
    count2820 = rasad // GRAND_CYCLE
    mod2820 = rasad % GRAND_CYCLE
    count128 = mod2820 // SUB_CYCLE
    mod128 = mod2820 % SUB_CYCLE

    # Leading run only: the scan stops at the first position not below mod128.
    leap_count = 0
    while leap_count < len(LEAP_YEAR_POSITIONS) and mod128 > LEAP_YEAR_POSITIONS[leap_count]:
        leap_count += 1

    year_start_day = (count2820 + 1) * 3 + count128 * 5 + mod128 + leap_count
    if day_of_year > 0:
        day_of_year -= 1
    return (year_start_day + day_of_year) % 7


def year_length(year: int) -> int:
    """Return the number of days in ``year``."""

    return 366 if is_leap(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return number of days in ``month`` of ``year``."""

    if not 1 <= month <= 12:
        raise ValueError("month out of range")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap(year) else 29
