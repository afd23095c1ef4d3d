"""Host extraction from URLs and default port handling."""
from urllib.parse import urlsplit

from .constants import constants
from .exceptions import MalformedURL


def is_default_port(port) -> bool:
    """Return ``True`` for the default HTTP (80) and HTTPS (443) ports."""
    try:
        return int(port) in constants.DEFAULT_PORTS
    except (TypeError, ValueError):
        return False


def _split_host(netloc) -> str:
    # Drop "user:pass@" and the port, keep the host exactly as written
    hostport = netloc.rpartition("@")[2]

    if hostport.startswith("["):
        end = hostport.find("]")
        return hostport if end == -1 else hostport[: end + 1]

    return hostport.partition(":")[0]


def host_of(url, ignore_default_ports=False) -> str:
    """
    Return the host of ``url``, followed by ``:<port>`` when the URL carries
    an explicit port that is not ignored.

    A default port (80 or 443) is dropped only when ``ignore_default_ports``
    is set; any other port is always kept.

        >>> host_of("http://example.com:80/", ignore_default_ports=True)
        'example.com'
        >>> host_of("http://example.com:80/")
        'example.com:80'

    Raises ``MalformedURL`` when the URL has no host or a non numeric port.
    """
    try:
        parts = urlsplit(str(url))
        # Accessing .port validates it
        port = parts.port
    except ValueError as e:
        raise MalformedURL(url, str(e)) from e

    host = _split_host(parts.netloc)
    if not host:
        raise MalformedURL(url)

    if port is not None and not (ignore_default_ports and is_default_port(port)):
        host = f"{host}:{port}"

    return host
