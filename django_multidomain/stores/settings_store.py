import copy

from django_multidomain.conf import settings
from django_multidomain.constants import constants
from .base import BaseOptionStore

OPTION_TO_SETTING = {
    constants.OPTION_DOMAINS: constants.DOMAINS,
    constants.OPTION_IGNORE_DEFAULT_PORTS: constants.IGNORE_DEFAULT_PORTS,
    constants.OPTION_ADD_CANONICAL: constants.ADD_CANONICAL,
}


class SettingsOptionStore(BaseOptionStore):
    """
    Read options from ``MULTIDOMAIN_CONFIG``.

    ``DOMAINS``, ``IGNORE_DEFAULT_PORTS`` and ``ADD_CANONICAL`` back the
    persisted options. Updates are kept on the instance only: Django settings
    are code, so nothing outlives the process.
    """

    def __init__(self):
        self._overrides = {}

    def _setting_name(self, name):
        return OPTION_TO_SETTING.get(name, name)

    def has_option(self, name) -> bool:
        return (
            name in self._overrides
            or self._setting_name(name) in settings.MULTIDOMAIN_CONFIG
        )

    def get_option(self, name, default=None):
        if name in self._overrides:
            value = self._overrides[name]
        else:
            value = settings.MULTIDOMAIN_CONFIG.get(self._setting_name(name), default)
        return copy.deepcopy(value)

    def update_option(self, name, value):
        self._overrides[name] = copy.deepcopy(value)
