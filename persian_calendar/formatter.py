"""Render Persian calendar fields with a ``date()``-style pattern language.

Supported tokens::

    d   day of month, 2 digits          D   short weekday name
    j   day of month                    jS  ordinal word of the day
    S   ordinal suffix                  l   long weekday name
    N   weekday 1..7                    w   weekday 0..6 (0 = Saturday)
    z   day of year, from 0             F   long month name
    m   month, 2 digits                 M   short month name
    n   month                           L   1 in a leap year, else 0
    o Y year                            y   year modulo 100
    a A meridiem marker                 g   hour % 12
    G   hour                            h   hour % 12, 2 digits
    H   hour, 2 digits                  i   minutes, 2 digits
    s   seconds, 2 digits               u B always 0

``W`` (week of year) and ``t`` (days in month) are recognised but not
implemented.  Any other character is copied verbatim; there is no escape
character, so a literal ``d`` in a pattern is always replaced.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Tuple

from . import conf, core
from .locales import Locale, get_locale
from .utils import to_timestamp

logger = logging.getLogger(__name__)

UNSUPPORTED_TOKENS: Dict[str, str] = {
    "W": "nth week of year",
    "t": "number of days in given month",
}

NUMERIC_TOKENS = frozenset("djNwzmnLoYygGhHisuB")
WORD_TOKENS = frozenset({"D", "jS", "S", "l", "F", "M", "a", "A"})
TOKENS = NUMERIC_TOKENS | WORD_TOKENS | frozenset(UNSUPPORTED_TOKENS)
_LONGEST_TOKEN = max(len(t) for t in TOKENS)


class UnsupportedTokenError(ValueError):
    """Raised for pattern tokens that are recognised but not implemented."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Format token {token!r} is not supported")


def tokenize(pattern: str) -> Iterator[Tuple[bool, str]]:
    """Split ``pattern`` into ``(is_token, text)`` pieces.

    At every position the longest recognised token wins, so ``jS`` is one
    token rather than ``j`` followed by ``S``.  Consecutive literal
    characters are yielded together.
    """

    literal: list[str] = []
    pos = 0
    while pos < len(pattern):
        for size in range(_LONGEST_TOKEN, 0, -1):
            candidate = pattern[pos : pos + size]
            if len(candidate) == size and candidate in TOKENS:
                if literal:
                    yield False, "".join(literal)
                    literal = []
                yield True, candidate
                pos += size
                break
        else:
            literal.append(pattern[pos])
            pos += 1
    if literal:
        yield False, "".join(literal)


class Formatter:
    """Hold one converted timestamp and render it with patterns.

    ``locale`` is a :class:`~persian_calendar.locales.Locale` or a registered
    locale code; ``strict`` decides whether ``W``/``t`` raise
    :class:`UnsupportedTokenError` or render placeholder text.  Both default
    to the ``PERSIAN_CALENDAR_*`` settings.

    Instances are not thread-safe: ``set_timestamp`` replaces the stored
    representation that ``format`` reads.
    """

    def __init__(self, locale: Locale | str | None = None, *, strict: bool | None = None):
        self.locale = get_locale(conf.locale_code() if locale is None else locale)
        self.strict = conf.strict_tokens() if strict is None else strict
        self._representation: core.TimeRepresentation | None = None

    def set_timestamp(self, timestamp) -> "Formatter":
        """Convert ``timestamp`` and keep the result; returns ``self``."""

        self._representation = core.convert(to_timestamp(timestamp))
        return self

    @property
    def representation(self) -> core.TimeRepresentation:
        if self._representation is None:
            raise RuntimeError("Formatter has no timestamp; call set_timestamp() first")
        return self._representation

    def day_of_week(self) -> int:
        rep = self.representation
        return core.day_of_week(rep.year, rep.day_of_year)

    def is_leap(self) -> bool:
        return core.is_leap(self.representation.year)

    def format(self, pattern: str | None = None) -> str:
        """Render ``pattern`` (default: ``PERSIAN_CALENDAR_DEFAULT_FORMAT``)."""

        if pattern is None:
            pattern = conf.default_format()
        values = self._values()
        parts = []
        for is_token, text in tokenize(pattern):
            if not is_token:
                parts.append(text)
            elif text in UNSUPPORTED_TOKENS:
                parts.append(self._unsupported(text))
            elif text in NUMERIC_TOKENS:
                parts.append(self.locale.localize_digits(values[text]))
            else:
                parts.append(values[text])
        return "".join(parts)

    def _unsupported(self, token: str) -> str:
        if self.strict:
            raise UnsupportedTokenError(token)
        logger.warning("Format token %r is not implemented; rendering placeholder", token)
        return UNSUPPORTED_TOKENS[token]

    def _values(self) -> Dict[str, str]:
        rep = self.representation
        loc = self.locale
        weekday = self.day_of_week()
        hour12 = rep.hour % 12
        meridiem = loc.meridiem(rep.hour)

        return {
            # Day
            "d": f"{rep.day:02d}",
            "D": loc.weekday_name(weekday, short=True),
            "jS": loc.ordinals[rep.day],
            "j": str(rep.day),
            "S": loc.suffixes[rep.day],
            "l": loc.weekday_name(weekday),
            "N": str(weekday + 1),
            "w": str(weekday),
            "z": str(rep.day_of_year - 1),
            # Month
            "F": loc.month_name(rep.month),
            "m": f"{rep.month:02d}",
            "M": loc.month_name(rep.month, short=True),
            "n": str(rep.month),
            # Year
            "L": str(int(self.is_leap())),
            "o": str(rep.year),
            "Y": str(rep.year),
            "y": str(rep.year % 100),
            # Time
            "a": meridiem,
            "A": meridiem,
            "g": str(hour12),
            "G": str(rep.hour),
            "h": f"{hour12:02d}",
            "H": f"{rep.hour:02d}",
            "i": f"{rep.minute:02d}",
            "s": f"{rep.second:02d}",
            "u": "0",
            "B": "0",
        }
