import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class PersianCalendarConfig(AppConfig):
    name = "persian_calendar"
    verbose_name = "Persian calendar"

    def ready(self) -> None:
        from . import conf
        from .locales import get_locale

        code = conf.locale_code()
        try:
            get_locale(code)
        except ValueError as exc:
            logger.error("PERSIAN_CALENDAR_LOCALE=%r is not a registered locale", code)
            raise ImproperlyConfigured(str(exc)) from exc
