import logging

from django.core.cache import caches

from django_multidomain.conf import settings
from .base import BaseOptionStore

logger = logging.getLogger(__name__)

_MISSING = object()


class CacheOptionStore(BaseOptionStore):
    """
    Keep options in a Django cache.

    Entries never expire. Use a persistent cache backend (database, Redis)
    when domains are managed with the ``adddomain`` command.
    """

    def __init__(self, alias=None):
        self.alias = alias or settings.CACHE_ALIAS

    @property
    def cache(self):
        return caches[self.alias]

    def has_option(self, name) -> bool:
        return self.cache.get(name, _MISSING) is not _MISSING

    def get_option(self, name, default=None):
        return self.cache.get(name, default)

    def update_option(self, name, value):
        logger.info(f"Storing option {name} in cache {self.alias!r}")
        self.cache.set(name, value, timeout=None)
