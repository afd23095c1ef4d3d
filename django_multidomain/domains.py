"""
Domain Table Module

The domain table is the in-memory list of domains a deployment answers to.
Each domain is keyed by its host (optionally with a non default port, e.g.
``"example.com:8080"``) and carries three attributes:

    - ``base``: a path prefix every request on the domain must start with
    - ``lang``: a locale code used for ``hreflang`` tags
    - ``protocol``: ``http``, ``https`` or ``auto`` (reuse the request scheme)

The table keeps insertion order. That order drives the order of hreflang
tags and CORS origins, it has no effect on rewriting results.

Lifecycle:
    The table is built once from the persisted configuration
    (see :func:`DomainTable.from_records`) and is read-only while a request
    is handled. ``add`` and ``reset`` are only used from administrative code
    (management commands), and nothing is written back unless the caller
    explicitly stores the table.

Usage:
    ```python
    table = DomainTable("example.com")
    table.reset()                      # {"example.com": auto}
    table.add("example.de", lang="de_DE", protocol="https")
    table.protocol_of("example.de")    # "https"
    ```
"""
import logging
from dataclasses import asdict, dataclass

from django.core.exceptions import ValidationError
from requests.structures import CaseInsensitiveDict

from .constants import constants
from .exceptions import InvalidDomainEntry
from .validators import normalize_protocol, validate_domain_host

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainEntry:
    host: str
    base: str | None = None
    lang: str | None = None
    protocol: str = constants.PROTOCOL_AUTO

    def __post_init__(self):
        if not self.host or not isinstance(self.host, str):
            raise InvalidDomainEntry(self.host, "A domain entry needs a host")
        # frozen dataclass, hence object.__setattr__
        object.__setattr__(self, "base", self.base or None)
        object.__setattr__(self, "lang", self.lang or None)
        object.__setattr__(self, "protocol", normalize_protocol(self.protocol))

    @classmethod
    def from_record(cls, record) -> "DomainEntry":
        if not isinstance(record, dict):
            raise InvalidDomainEntry(record)
        record = CaseInsensitiveDict(record)
        try:
            validate_domain_host(record.get("host"))
        except ValidationError as e:
            raise InvalidDomainEntry(record.get("host"), " ".join(e.messages)) from e
        return cls(
            host=record.get("host"),
            base=record.get("base"),
            lang=record.get("lang"),
            protocol=record.get("protocol"),
        )

    def to_record(self) -> dict:
        return asdict(self)


class DomainTable:
    """Ordered ``host -> DomainEntry`` mapping with at most one entry per host."""

    def __init__(self, original_domain=None):
        self.original_domain = original_domain
        self._entries: dict[str, DomainEntry] = {}

    @classmethod
    def from_records(cls, records, original_domain=None) -> "DomainTable":
        """
        Build a table holding the original domain followed by every valid
        record. Invalid records are skipped with a warning.
        """
        table = cls(original_domain)
        table.reset()

        for record in records or ():
            try:
                entry = DomainEntry.from_record(record)
            except InvalidDomainEntry as e:
                logger.warning(f"Skipping domain configuration: {e}")
                continue
            table._entries[entry.host] = entry

        return table

    def reset(self, keep_original=True):
        """
        Empty the table. When ``keep_original`` is set (default) and there is
        an original domain, the table keeps that single domain with the
        ``auto`` protocol.
        """
        self._entries = {}
        if keep_original and self.original_domain:
            self._entries[self.original_domain] = DomainEntry(self.original_domain)

    def add(self, host, base=None, lang=None, protocol=constants.PROTOCOL_AUTO):
        """Insert ``host``, or replace its attributes when already present."""
        entry = DomainEntry(host, base, lang, protocol)
        self._entries[host] = entry
        return entry

    def get(self, host) -> DomainEntry | None:
        if not host:
            return None
        return self._entries.get(host)

    def hosts(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[DomainEntry]:
        return list(self._entries.values())

    def base_of(self, host) -> str | None:
        entry = self.get(host)
        return entry.base if entry else None

    def lang_of(self, host) -> str | None:
        entry = self.get(host)
        return entry.lang if entry else None

    def protocol_of(self, host) -> str:
        entry = self.get(host)
        return entry.protocol if entry else constants.PROTOCOL_AUTO

    def to_records(self) -> list[dict]:
        return [entry.to_record() for entry in self._entries.values()]

    def __contains__(self, host):
        return host in self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"<DomainTable original={self.original_domain!r} hosts={self.hosts()!r}>"
