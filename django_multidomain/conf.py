from django.conf import settings as django_settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import cached_property

from .constants import constants

DEFAULT_ADMIN_URL_PATTERN = r"/wp-admin/"
DEFAULT_REDIRECT_EXCLUDE_PATTERN = r"^wp-[a-z]+(\.php|/|$)"


class _WrappedSettings:
    def __getattr__(self, item):
        return getattr(django_settings, item)

    def __setattr__(self, key, value):
        if key in self.__dict__:
            raise ValueError("Item assignment is not supported")

        setattr(django_settings, key, value)

    def _reset(self):
        # cached_property stores its value in the instance dict
        self.__dict__.clear()

    @cached_property
    def MULTIDOMAIN_CONFIG(self) -> dict:
        return getattr(django_settings, constants.MULTIDOMAIN_CONFIG, {})

    @cached_property
    def HOME_URL(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(constants.HOME_URL, "")

    @cached_property
    def LOW_MEMORY(self) -> bool:
        return bool(self.MULTIDOMAIN_CONFIG.get(constants.LOW_MEMORY, False))

    @cached_property
    def OVERRIDE_HOST_HEADER(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(constants.OVERRIDE_HOST_HEADER, "X-Host")

    @cached_property
    def DOMAIN_RESOLVER(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(
            constants.DOMAIN_RESOLVER,
            "django_multidomain.resolvers.HeaderDomainResolver",
        )

    @cached_property
    def OPTION_STORE(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(
            constants.OPTION_STORE,
            "django_multidomain.stores.SettingsOptionStore",
        )

    @cached_property
    def CACHE_ALIAS(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(constants.CACHE_ALIAS, "default")

    @cached_property
    def ADMIN_URL_PATTERN(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(
            constants.ADMIN_URL_PATTERN, DEFAULT_ADMIN_URL_PATTERN
        )

    @cached_property
    def REDIRECT_EXCLUDE_PATTERN(self) -> str:
        return self.MULTIDOMAIN_CONFIG.get(
            constants.REDIRECT_EXCLUDE_PATTERN, DEFAULT_REDIRECT_EXCLUDE_PATTERN
        )

    @cached_property
    def REWRITE_CONTENT_TYPES(self) -> tuple:
        return tuple(
            self.MULTIDOMAIN_CONFIG.get(constants.REWRITE_CONTENT_TYPES, ())
        )

    @cached_property
    def SEND_CORS_HEADERS(self) -> bool:
        return bool(self.MULTIDOMAIN_CONFIG.get(constants.SEND_CORS_HEADERS, False))


settings = _WrappedSettings()


@receiver(setting_changed)
def _reset_wrapped_settings(setting, **kwargs):
    if setting == constants.MULTIDOMAIN_CONFIG:
        settings._reset()
