from importlib import import_module

from django.core.exceptions import ImproperlyConfigured


def import_class(path, kind="class"):
    """Import ``package.module.ClassName`` and return the class."""
    module_name, _, class_name = path.rpartition(".")
    try:
        module = import_module(module_name)
        return getattr(module, class_name)
    except (ImportError, AttributeError, ValueError) as e:
        raise ImproperlyConfigured(f"Unable to import {kind} {path} due to: {e}") from e


def get_request_protocol(request) -> str:
    """Return ``https`` for secure requests, ``http`` otherwise."""
    return "https" if request is not None and request.is_secure() else "http"
