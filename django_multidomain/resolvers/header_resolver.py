import logging
import re

from requests.structures import CaseInsensitiveDict

from django_multidomain.conf import settings
from django_multidomain.parsing import is_default_port
from .base import BaseDomainResolver

logger = logging.getLogger(__name__)

HOST_WITH_PORT = re.compile(r"^(.*):(\d+)$")


def get_host_header(headers, override_header="X-Host") -> str:
    """
    Return the ``X-Host`` header (or the configured override header) when
    present, falling back to the regular ``Host`` header, or ``""``.
    """
    headers = CaseInsensitiveDict(headers or {})

    for name in (override_header, "Host"):
        value = (headers.get(name) or "").strip() if name else ""
        if value:
            return value

    return ""


def resolve_host(headers, override_header="X-Host") -> str:
    """
    Return the request domain from ``headers``.

    Ports 80 and 443 are dropped whatever the request scheme is, so
    ``example.com:443`` on a plain HTTP request still resolves to
    ``example.com``. Any other port is kept.
    """
    domain = get_host_header(headers, override_header)
    if not domain:
        return ""

    match = HOST_WITH_PORT.match(domain)
    if match and is_default_port(match.group(2)):
        domain = match.group(1)

    return domain


class HeaderDomainResolver(BaseDomainResolver):
    def resolve(self, request) -> str:
        domain = resolve_host(request.headers, settings.OVERRIDE_HOST_HEADER)
        logger.debug(f"Resolved request domain {domain!r}")
        return domain
