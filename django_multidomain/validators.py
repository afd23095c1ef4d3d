import logging
import re

from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _
from requests.structures import CaseInsensitiveDict

from .constants import constants

logger = logging.getLogger(__name__)

SCHEME_PREFIX = re.compile(r"^https?://", re.IGNORECASE)
VALID_DOMAIN_HOST = re.compile(
    r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*(:\d{1,5})?$"
)


def strip_scheme(host):
    """Remove a leading ``http://`` or ``https://`` typed into a host field."""
    return SCHEME_PREFIX.sub("", host)


def normalize_protocol(protocol) -> str:
    """Return ``http`` or ``https`` when configured as such, ``auto`` otherwise."""
    protocol = str(protocol or "")
    if protocol in (constants.PROTOCOL_HTTP, constants.PROTOCOL_HTTPS):
        return protocol
    return constants.PROTOCOL_AUTO


def validate_domain_host(value):
    """
    Validate a configured host: dot separated DNS labels with an optional
    numeric port. No scheme, no path and no trailing slash.
    """
    if not VALID_DOMAIN_HOST.match(value or ""):
        raise ValidationError(
            _("%(value)s is not a valid domain."),
            params={"value": value},
        )


def validate_protocol(value):
    if value not in constants.PROTOCOLS:
        raise ValidationError(
            _("%(value)s is not a valid protocol. Use http, https or auto."),
            params={"value": value},
        )


FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def cast_to_bool(value) -> bool:
    """Stored flags may be strings; ``"0"`` and ``"false"`` are false."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def _iter_rows(value):
    # Legacy mapping format: {host: {"base": ..., ...}} or {host: "base"}
    if isinstance(value, dict):
        for host, options in value.items():
            if isinstance(options, str):
                yield {"host": host, "base": options}
            elif isinstance(options, dict):
                yield {**options, "host": host}
            else:
                yield {"host": host}
        return

    for row in value:
        yield row


def sanitize_domains(value) -> list[dict]:
    """
    Turn a persisted or user supplied ``domains`` option into an ordered list
    of ``{host, base, lang, protocol}`` records.

    Accepted input shapes:
        - a list of records (``[{"host": "a.com", "lang": "en"}]``)
        - the legacy mapping (``{"a.com": {"lang": "en"}}``)
        - the oldest mapping where the value is the base path
          (``{"a.com": "/base"}``)

    Rows without a valid host are dropped, a leading ``http(s)://`` is removed from
    the host, empty values become ``None`` and the protocol falls back to
    ``auto``. A later row for the same host replaces the earlier one.
    """
    if not isinstance(value, (list, tuple, dict)):
        return []

    domains = {}
    for row in _iter_rows(value):
        if not isinstance(row, dict):
            logger.warning(f"Skipping domain row {row!r}: not a mapping")
            continue

        row = CaseInsensitiveDict(row)
        if not row.get("host"):
            continue

        host = strip_scheme(str(row["host"]).strip()).rstrip("/")
        if not host:
            continue

        try:
            validate_domain_host(host)
        except ValidationError:
            logger.warning(f"Skipping domain row {host!r}: not a valid domain")
            continue

        domains[host] = {
            "host": host,
            "base": row.get("base") or None,
            "lang": row.get("lang") or None,
            "protocol": normalize_protocol(row.get("protocol")),
        }

    return list(domains.values())
