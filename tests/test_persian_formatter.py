from datetime import date, datetime, timezone

import pytest
from django.test import override_settings

from persian_calendar.formatter import Formatter, UnsupportedTokenError, tokenize
from persian_calendar.locales import ENGLISH

DAY = 86400
RECENT = 1_700_000_000  # 1402-08-24 22:13:20, Wednesday


def fa(ts):
    return Formatter("fa").set_timestamp(ts)


def test_epoch_renders_zero_padded():
    assert fa(0).format("Y-m-d H:i:s") == "1348-10-12 00:00:00"


def test_default_pattern_from_settings():
    assert Formatter().set_timestamp(0).format() == "1348/10/12 00:00"


@override_settings(PERSIAN_CALENDAR_DEFAULT_FORMAT="d.m.Y")
def test_default_pattern_override():
    assert Formatter().set_timestamp(0).format() == "12.10.1348"


def test_day_tokens():
    f = fa(0)
    assert f.format("d") == "12"
    assert f.format("j") == "12"
    assert f.format("jS") == "دوازدهم"
    assert f.format("S") == "ام"
    assert f.format("z") == "287"


def test_ordinal_word_for_first_day():
    f = fa(809 * DAY)
    assert f.format("jS") == "یکم"
    assert f.format("d/j") == "01/1"


def test_weekday_tokens():
    f = fa(0)
    assert f.day_of_week() == 6
    assert f.format("l") == "جمعه"
    assert f.format("D") == "ج"
    assert f.format("N") == "7"
    assert f.format("w") == "6"
    assert fa(RECENT).format("l") == "چهارشنبه"


def test_month_tokens():
    f = fa(RECENT)
    assert f.format("F") == "آبان"
    assert f.format("M") == "آبا"
    assert f.format("m") == "08"
    assert f.format("n") == "8"


def test_year_tokens():
    f = fa(0)
    assert f.format("Y") == "1348"
    assert f.format("o") == "1348"
    assert f.format("y") == "48"
    assert f.format("L") == "0"
    assert fa(807 * DAY).format("L") == "1"


def test_time_tokens():
    f = fa(13 * 3600 + 5 * 60 + 9)
    assert f.format("g G h H i s") == "1 13 01 13 05 09"
    assert f.format("a") == "ب.ظ"
    assert f.format("A") == "ب.ظ"
    assert fa(0).format("a") == "ق.ظ"


def test_twelve_hour_clock_keeps_zero():
    assert fa(0).format("g h") == "0 00"
    assert fa(12 * 3600).format("g h") == "0 00"


def test_unsupported_fields_render_zero():
    assert fa(RECENT).format("u B") == "0 0"


def test_full_pattern():
    assert fa(RECENT).format("l j F Y") == "چهارشنبه 24 آبان 1402"


def test_no_escape_for_token_letters():
    assert fa(0).format("day") == "12ق.ظ48"


def test_substituted_words_are_not_rescanned():
    f = Formatter(ENGLISH).set_timestamp(0)
    assert f.format("D") == "Fri"
    assert f.format("l") == "Friday"
    assert f.format("l, jS F Y") == "Friday, 12th Dey 1348"


def test_english_locale():
    f = Formatter("en").set_timestamp(RECENT)
    assert f.format("D M jS") == "Wed Aba 24th"
    assert f.format("g:i A") == "10:13 PM"
    assert Formatter("en").set_timestamp(809 * DAY).format("jS") == "1st"


def test_persian_digits_apply_to_numbers_only():
    f = Formatter("fa-digits").set_timestamp(RECENT)
    assert f.format("Y/m/d") == "۱۴۰۲/۰۸/۲۴"
    assert f.format("F 2") == "آبان 2"


def test_strict_mode_rejects_week_and_month_length():
    f = fa(0)
    with pytest.raises(UnsupportedTokenError) as excinfo:
        f.format("W")
    assert excinfo.value.token == "W"
    with pytest.raises(UnsupportedTokenError):
        f.format("Y t")


def test_lenient_mode_renders_placeholders(caplog):
    f = Formatter("fa", strict=False).set_timestamp(0)
    assert f.format("W") == "nth week of year"
    assert f.format("t") == "number of days in given month"
    assert "not implemented" in caplog.text


@override_settings(PERSIAN_CALENDAR_STRICT_TOKENS=False)
def test_lenient_mode_from_settings():
    assert Formatter().set_timestamp(0).format("W") == "nth week of year"


@override_settings(PERSIAN_CALENDAR_LOCALE="en")
def test_locale_from_settings():
    assert Formatter().set_timestamp(0).format("F") == "Dey"


def test_format_requires_timestamp():
    with pytest.raises(RuntimeError):
        Formatter("fa").format("Y")


def test_format_does_not_change_state():
    f = fa(RECENT)
    before = f.representation
    assert f.format("Y-m-d l") == f.format("Y-m-d l")
    assert f.representation == before


def test_set_timestamp_replaces_and_chains():
    f = Formatter("fa")
    assert f.set_timestamp(0) is f
    f.set_timestamp(RECENT)
    assert f.representation.as_tuple() == (1402, 8, 24, 22, 13, 20)


def test_accepts_date_and_datetime():
    assert fa(datetime(1970, 1, 1, tzinfo=timezone.utc)).format("Y-m-d") == "1348-10-12"
    assert fa(datetime(2023, 11, 14, 22, 13, 20)).format("Y-m-d H:i:s") == "1402-08-24 22:13:20"
    assert fa(date(1970, 1, 2)).format("Y-m-d") == "1348-10-13"


def test_tokenize_prefers_longest_token():
    assert list(tokenize("jS/j")) == [(True, "jS"), (False, "/"), (True, "j")]
    assert list(tokenize("x-y")) == [(False, "x-"), (True, "y")]
    assert list(tokenize("")) == []


def test_weekday_tokens_agree_within_one_pattern():
    assert fa(0).format("l D w N") == "جمعه ج 6 7"


def test_dates_before_1901_render():
    f = fa(-25_125 * DAY + 43200)
    assert 1 <= f.representation.day_of_year <= 366
    assert f.format("Y").startswith("12")
