"""Persian calendar helper utilities."""

from __future__ import annotations

import calendar
import math
from datetime import date
from typing import Any

from . import core


def to_timestamp(value: Any) -> int | float:
    """Return seconds since the epoch for ``value``.

    Accepts multiple input types:

    * ``int``/``float`` → returned unchanged (checked by :func:`core.convert`)
    * ``date``/``datetime`` → wall-clock fields read as seconds since the
      epoch, so an aware ``datetime`` keeps its own local time
    * ``str`` holding an integer
    * any object with a ``timestamp()`` method

    Raises :class:`~persian_calendar.core.TimestampOutOfRange` otherwise.
    """

    if isinstance(value, bool):
        raise core.TimestampOutOfRange(f"Cannot convert {value!r} to a timestamp")

    if isinstance(value, int | float):
        return value

    # ``date`` / ``datetime`` instances ---------------------------------------
    if isinstance(value, date):
        return calendar.timegm(value.timetuple())

    # Strings -------------------------------------------------------------------
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise core.TimestampOutOfRange(f"Cannot convert {value!r} to a timestamp") from exc

    # Anything exposing seconds since the epoch ---------------------------------
    accessor = getattr(value, "timestamp", None)
    if callable(accessor):
        seconds = accessor()
        if isinstance(seconds, float) and not math.isfinite(seconds):
            raise core.TimestampOutOfRange(f"timestamp must be finite, got {seconds!r}")
        return seconds

    raise core.TimestampOutOfRange(f"Cannot convert {value!r} to a timestamp")


def format_timestamp(value: Any, pattern: str | None = None, locale=None) -> str:
    """Shortcut for ``Formatter(locale).set_timestamp(value).format(pattern)``."""

    from .formatter import Formatter

    return Formatter(locale).set_timestamp(value).format(pattern)
