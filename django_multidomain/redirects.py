"""Base path restriction: decide whether a request must be redirected."""
import re
from dataclasses import dataclass
from functools import lru_cache

from .conf import DEFAULT_REDIRECT_EXCLUDE_PATTERN


@dataclass(frozen=True)
class RedirectTo:
    """Redirect to ``path`` (relative to the home URL, no leading slash)."""

    path: str


NO_ACTION = None


@lru_cache(maxsize=16)
def _compile_exclude(pattern):
    return re.compile(pattern, re.IGNORECASE)


def decide(base, request_path, exclude_pattern=DEFAULT_REDIRECT_EXCLUDE_PATTERN):
    """
    Return ``RedirectTo(base)`` when ``request_path`` is outside the domain's
    base path, ``NO_ACTION`` otherwise.

    Framework routes matching ``exclude_pattern`` (``wp-login.php``,
    ``wp-admin/``, ...) are never redirected, and neither is any request on
    a domain without a base path.
    """
    base = (base or "").removeprefix("/")
    path = (request_path or "").removeprefix("/")

    if not base or _compile_exclude(exclude_pattern).search(path):
        return NO_ACTION

    if not path.startswith(base):
        return RedirectTo(base)

    return NO_ACTION
