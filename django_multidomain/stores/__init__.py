from django_multidomain.conf import settings
from django_multidomain.utils import import_class
from .base import BaseOptionStore, activate
from .cache_store import CacheOptionStore
from .settings_store import SettingsOptionStore


def get_option_store() -> BaseOptionStore:
    """Instantiate the store configured by ``OPTION_STORE``."""
    return import_class(settings.OPTION_STORE, "option store")()


__all__ = [
    "BaseOptionStore",
    "CacheOptionStore",
    "SettingsOptionStore",
    "activate",
    "get_option_store",
]
