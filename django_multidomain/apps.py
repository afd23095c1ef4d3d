from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

from .conf import settings
from .constants import constants
from .exceptions import MalformedURL
from .parsing import host_of


class DjangoMultiDomainConfig(AppConfig):
    name = "django_multidomain"
    verbose_name = "Multiple Domain"

    def ready(self):
        home_url: str = settings.HOME_URL
        if not home_url:
            raise ImproperlyConfigured(
                f"MULTIDOMAIN_CONFIG must define '{constants.HOME_URL}'. Example:\n"
                f"MULTIDOMAIN_CONFIG = {{ '{constants.HOME_URL}': 'https://example.com' }}"
            )
        try:
            host_of(home_url)
        except MalformedURL:
            raise ImproperlyConfigured(
                f"'{constants.HOME_URL}' must be an absolute URL, got {home_url!r}. "
                f"Check your MULTIDOMAIN_CONFIG in settings.py."
            )
