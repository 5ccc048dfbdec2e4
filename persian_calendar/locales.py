"""Word tables used when rendering Persian dates.

A :class:`Locale` bundles month and weekday names, ordinal words, the
meridiem markers and an optional digit set.  Locales are immutable and
looked up by code from a small registry so that formatting code never
hardwires a language.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

_ENGLISH_SUFFIXES: Tuple[str, ...] = tuple(
    "th" if 10 <= n % 100 <= 20 else {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    for n in range(32)
)


@dataclass(frozen=True)
class Locale:
    """Immutable word tables for one language/script.

    Index 0 of the month tables is month 1, index 0 of the weekday tables
    is Saturday.  ``ordinals`` and ``suffixes`` are indexed by day of month
    (0..31).  ``digits`` maps ``0..9`` when numbers should be rendered in a
    non-Latin script.
    """

    code: str
    month_long: Tuple[str, ...]
    month_short: Tuple[str, ...]
    weekday_long: Tuple[str, ...]
    weekday_short: Tuple[str, ...]
    ordinals: Tuple[str, ...]
    suffixes: Tuple[str, ...]
    am: str
    pm: str
    digits: str | None = None
    _digit_table: Dict[int, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        sizes = {
            "month_long": 12,
            "month_short": 12,
            "weekday_long": 7,
            "weekday_short": 7,
            "ordinals": 32,
            "suffixes": 32,
        }
        for name, size in sizes.items():
            value = tuple(getattr(self, name))
            if len(value) != size:
                raise ValueError(f"{self.code}: {name} needs {size} entries, got {len(value)}")
            object.__setattr__(self, name, value)
        if self.digits is not None and len(self.digits) != 10:
            raise ValueError(f"{self.code}: digits needs 10 characters")
        table = str.maketrans("0123456789", self.digits) if self.digits else {}
        object.__setattr__(self, "_digit_table", table)

    def month_name(self, month: int, *, short: bool = False) -> str:
        names = self.month_short if short else self.month_long
        return names[month - 1]

    def weekday_name(self, weekday: int, *, short: bool = False) -> str:
        names = self.weekday_short if short else self.weekday_long
        return names[weekday]

    def meridiem(self, hour: int) -> str:
        return self.am if hour < 12 else self.pm

    def localize_digits(self, text: str) -> str:
        """Return ``text`` with Latin digits replaced by the locale's digits."""

        if not self._digit_table:
            return text
        return text.translate(self._digit_table)


PERSIAN = Locale(
    code="fa",
    month_long=(
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    month_short=(
        "فرو", "ارد", "خرد", "تیر", "مر", "شهر",
        "مهر", "آبا", "آذر", "دی", "بهم", "اسفـ",
    ),
    weekday_long=("شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه"),
    weekday_short=("ش", "ی", "د", "س", "چ", "پ", "ج"),
    ordinals=(
        "صفرم", "یکم", "دوم", "سوم", "چهارم", "پنجم", "ششم", "هفتم", "هشتم", "نهم", "دهم",
        "یازدهم", "دوازدهم", "سیزدهم", "چهاردهم", "پانزدهم", "شانزدهم", "هفدهم", "هجدهم",
        "نوزدهم", "بیستم", "بیست و یکم", "بیست و دوم", "بیست و سوم", "بیست و چهارم",
        "بیست و پنجم", "بیست و ششم", "بیست و هفتم", "بیست و هشتم", "بیست و نهم",
        "سی‌ام", "سی و یکم",
    ),
    suffixes=("ام",) * 32,
    am="ق.ظ",
    pm="ب.ظ",
)

PERSIAN_DIGITS = Locale(
    code="fa-digits",
    month_long=PERSIAN.month_long,
    month_short=PERSIAN.month_short,
    weekday_long=PERSIAN.weekday_long,
    weekday_short=PERSIAN.weekday_short,
    ordinals=PERSIAN.ordinals,
    suffixes=PERSIAN.suffixes,
    am=PERSIAN.am,
    pm=PERSIAN.pm,
    digits="۰۱۲۳۴۵۶۷۸۹",
)

ENGLISH = Locale(
    code="en",
    month_long=(
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    month_short=(
        "Far", "Ord", "Kho", "Tir", "Mor", "Sha",
        "Meh", "Aba", "Aza", "Dey", "Bah", "Esf",
    ),
    weekday_long=("Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"),
    weekday_short=("Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"),
    ordinals=tuple(f"{n}{_ENGLISH_SUFFIXES[n]}" for n in range(32)),
    suffixes=_ENGLISH_SUFFIXES,
    am="AM",
    pm="PM",
)

_REGISTRY: Dict[str, Locale] = {loc.code: loc for loc in (PERSIAN, PERSIAN_DIGITS, ENGLISH)}


def register_locale(locale: Locale) -> None:
    """Make ``locale`` available under its code, replacing any previous one."""

    _REGISTRY[locale.code] = locale


def available_locales() -> list[str]:
    return sorted(_REGISTRY)


def get_locale(code: str | Locale) -> Locale:
    """Return the registered locale for ``code``.

    A :class:`Locale` instance is returned unchanged.  Unknown codes raise
    :class:`ValueError`.
    """

    if isinstance(code, Locale):
        return code
    try:
        return _REGISTRY[code]
    except KeyError:
        raise ValueError(
            f"Unknown locale {code!r}; available: {', '.join(available_locales())}"
        ) from None
