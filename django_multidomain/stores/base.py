"""
Option Store Base Module

Persisted configuration lives in a key-value store. The plugin only needs
three options:

    - ``multidomain-domains``: ordered list of ``{host, base, lang, protocol}``
    - ``multidomain-ignore-default-ports``: bool
    - ``multidomain-add-canonical``: bool

Writes are last-write-wins; stores do no locking of their own.
"""
from django_multidomain.constants import constants

ACTIVATION_DEFAULTS = (
    (constants.OPTION_DOMAINS, []),
    (constants.OPTION_IGNORE_DEFAULT_PORTS, True),
    (constants.OPTION_ADD_CANONICAL, False),
)


class BaseOptionStore:
    def get_option(self, name, default=None):
        raise NotImplementedError("Subclasses must implement get_option()")

    def update_option(self, name, value):
        raise NotImplementedError("Subclasses must implement update_option()")

    def has_option(self, name) -> bool:
        raise NotImplementedError("Subclasses must implement has_option()")

    def add_option(self, name, value) -> bool:
        """Store ``value`` only when ``name`` is not set yet."""
        if self.has_option(name):
            return False
        self.update_option(name, value)
        return True


def activate(store):
    """Add the default options to ``store`` without overwriting anything."""
    return [name for name, value in ACTIVATION_DEFAULTS if store.add_option(name, value)]
