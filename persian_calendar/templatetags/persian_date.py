import logging
from datetime import datetime

from django import template
from django.utils import timezone

from persian_calendar.locales import PERSIAN_DIGITS
from persian_calendar.utils import format_timestamp

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter
def persian_date(value, pattern=None):
    """Render a timestamp, ``date`` or ``datetime`` as a Persian date.

    Aware datetimes are shifted to the current Django timezone first.
    Invalid input renders as an empty string.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime) and timezone.is_aware(value):
        value = timezone.localtime(value)
    try:
        return format_timestamp(value, pattern)
    except ValueError as exc:
        logger.warning("persian_date: cannot render %r: %s", value, exc)
        return ""


@register.filter
def persian_digits(value):
    """Replace Latin digits with Persian ones."""
    if value is None:
        return ""
    return PERSIAN_DIGITS.localize_digits(str(value))
