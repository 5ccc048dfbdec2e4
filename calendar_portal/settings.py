import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-secret-key")
DEBUG = _to_bool(os.getenv("DJANGO_DEBUG"), default=True)
ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "persian_calendar.apps.PersianCalendarConfig",
    "django.contrib.contenttypes",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_DB_PATH", str(BASE_DIR / "db_dev.sqlite3")),
    }
}

LANGUAGE_CODE = "fa"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Persian calendar
PERSIAN_CALENDAR_LOCALE = os.getenv("PERSIAN_CALENDAR_LOCALE", "fa")
PERSIAN_CALENDAR_STRICT_TOKENS = _to_bool(
    os.getenv("PERSIAN_CALENDAR_STRICT_TOKENS"), default=True
)
PERSIAN_CALENDAR_DEFAULT_FORMAT = os.getenv("PERSIAN_CALENDAR_DEFAULT_FORMAT", "Y/m/d H:i")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "persian_calendar": {
            "handlers": ["console"],
            "level": os.getenv("PERSIAN_CALENDAR_LOG_LEVEL", "INFO"),
        },
    },
}
