from django.conf import settings

DEFAULT_LOCALE = "fa"
DEFAULT_FORMAT = "Y/m/d H:i"


def locale_code() -> str:
    return getattr(settings, "PERSIAN_CALENDAR_LOCALE", DEFAULT_LOCALE)


def strict_tokens() -> bool:
    return bool(getattr(settings, "PERSIAN_CALENDAR_STRICT_TOKENS", True))


def default_format() -> str:
    return getattr(settings, "PERSIAN_CALENDAR_DEFAULT_FORMAT", DEFAULT_FORMAT)
