"""
Domain Context Module

``DomainContext`` is the resolved state of one request: the original
domain, the current domain, the domain table, the two option flags and the
rewrite strategy. It is built once per request by the middleware, attached
to ``request.multidomain`` and passed explicitly to everything that needs
it. Nothing here is global.

Invariant:
    ``current_domain`` is always a key of ``domains``. A request for an
    unknown host is served as the original domain.

Filter points:
    ``apply_filter(name, value)`` dispatches the named extension points a
    host application calls for its URL bearing values::

        context.apply_filter("option_home", "http://example.com/")
        context.apply_filter("the_content", "<a href='http://example.com/'>")

    The URL filters (``URL_FILTERS``) all go through ``fix_url``.
"""
import logging
import re

from .conf import settings
from .constants import constants
from .domains import DomainTable
from .exceptions import MalformedURL, UnknownFilter
from .parsing import host_of
from .redirects import RedirectTo, decide
from .rewriters import get_rewriter
from .signals import domains_stored
from .utils import get_request_protocol
from .validators import cast_to_bool, sanitize_domains

logger = logging.getLogger(__name__)

URL_FILTERS = (
    "content_url",
    "option_siteurl",
    "option_home",
    "plugins_url",
    "wp_get_attachment_url",
    "get_the_guid",
)

NON_ALNUM = re.compile(r"[^a-z0-9]+", re.IGNORECASE)


class DomainContext:
    def __init__(
        self,
        original_domain,
        domains: DomainTable,
        current_domain=None,
        ignore_default_ports=False,
        add_canonical=False,
        low_memory=False,
        home_url="",
        protocol="http",
        store=None,
    ):
        self.original_domain = original_domain
        self.domains = domains
        self.ignore_default_ports = ignore_default_ports
        self.add_canonical = add_canonical
        self.home_url = home_url
        self.protocol = protocol
        self.store = store
        self.rewriter = get_rewriter(low_memory)

        if current_domain not in domains:
            if current_domain:
                logger.debug(
                    f"Unknown domain {current_domain!r}, using {original_domain!r}"
                )
            current_domain = original_domain
        self.current_domain = current_domain

    @classmethod
    def from_store(cls, store, current_domain=None, request=None) -> "DomainContext":
        """
        Build the context from persisted options.

        The original domain comes from ``HOME_URL``; when ``request`` is
        given, ``auto`` protocols resolve to its scheme.
        """
        ignore_default_ports = cast_to_bool(
            store.get_option(constants.OPTION_IGNORE_DEFAULT_PORTS, False)
        )
        home_url = settings.HOME_URL

        try:
            original_domain = host_of(home_url, ignore_default_ports)
        except MalformedURL:
            logger.warning(f"HOME_URL {home_url!r} has no host")
            original_domain = None

        records = sanitize_domains(store.get_option(constants.OPTION_DOMAINS, []))
        domains = DomainTable.from_records(records, original_domain)

        return cls(
            original_domain,
            domains,
            current_domain=current_domain,
            ignore_default_ports=ignore_default_ports,
            add_canonical=cast_to_bool(
                store.get_option(constants.OPTION_ADD_CANONICAL, False)
            ),
            low_memory=settings.LOW_MEMORY,
            home_url=home_url,
            protocol=get_request_protocol(request),
            store=store,
        )

    # --- Domain attributes ---
    def get_domain_base(self, domain=None):
        return self.domains.base_of(domain or self.current_domain)

    def get_domain_lang(self, domain=None):
        return self.domains.lang_of(domain or self.current_domain)

    def get_domain_protocol(self, domain=None) -> str:
        return self.domains.protocol_of(domain or self.current_domain)

    def resolve_protocol(self, domain=None) -> str:
        """Return the domain protocol with ``auto`` replaced by the request scheme."""
        protocol = self.get_domain_protocol(domain)
        if protocol == constants.PROTOCOL_AUTO:
            return self.protocol
        return protocol

    # --- Rewriting ---
    def replace_domain(self, domain, content) -> str:
        """Point every reference to ``domain`` in ``content`` to the current domain."""
        if domain not in self.domains:
            return content

        return self.rewriter.rewrite(
            content,
            domain,
            self.current_domain,
            self.get_domain_protocol(self.current_domain),
        )

    def is_admin_url(self, url) -> bool:
        return re.search(settings.ADMIN_URL_PATTERN, url) is not None

    def fix_url(self, url) -> str:
        """
        Return ``url`` with its domain replaced by the current domain.

        Admin URLs, URLs without a host and URLs on a domain that is not
        configured are returned unchanged.
        """
        url = "" if url is None else str(url)

        if self.is_admin_url(url):
            return url

        try:
            domain = host_of(url)
        except MalformedURL:
            logger.debug(f"Not rewriting {url!r}: no host")
            return url

        return self.replace_domain(domain, url)

    def fix_content_urls(self, content) -> str:
        """Point references to any configured domain in ``content`` to the current domain."""
        content = "" if content is None else str(content)

        for domain in self.domains:
            content = self.replace_domain(domain, content)

        return content

    def fix_upload_dir(self, uploads) -> dict:
        uploads = dict(uploads or {})

        for key in ("url", "baseurl"):
            if key in uploads:
                uploads[key] = self.fix_url(uploads[key])

        return uploads

    # --- Other filters ---
    def add_allowed_origins(self, origins=None) -> list[str]:
        """Append ``https://`` and ``http://`` origins for every configured domain."""
        origins = list(origins or [])

        for domain in self.domains:
            origins.append(f"https://{domain}")
            origins.append(f"http://{domain}")

        return list(dict.fromkeys(origins))

    def get_body_class(self) -> str:
        return constants.BODY_CLASS_PREFIX + NON_ALNUM.sub("-", self.current_domain or "")

    def add_domain_body_class(self, classes=None) -> list[str]:
        classes = list(classes or [])
        classes.append(self.get_body_class())
        return classes

    def filter_canonical_url(self, url) -> str:
        """Drop other canonical URLs when this app emits its own canonical tag."""
        return "" if self.add_canonical else str(url or "")

    def apply_filter(self, name, value):
        if name in URL_FILTERS:
            return self.fix_url(value)

        handlers = {
            "the_content": self.fix_content_urls,
            "upload_dir": self.fix_upload_dir,
            "allowed_http_origins": self.add_allowed_origins,
            "body_class": self.add_domain_body_class,
            "get_canonical_url": self.filter_canonical_url,
        }
        try:
            handler = handlers[name]
        except KeyError:
            raise UnknownFilter(name) from None

        return handler(value)

    # --- Redirects ---
    def redirect_url(self, request_path) -> str | None:
        """Return the URL to redirect to, or ``None`` to serve the request."""
        decision = decide(
            self.get_domain_base(),
            request_path,
            settings.REDIRECT_EXCLUDE_PATTERN,
        )
        if not isinstance(decision, RedirectTo):
            return None

        home = self.fix_url(self.home_url).rstrip("/")
        return f"{home}/{decision.path}"

    # --- Persistence ---
    def reset_domains(self, keep_original=True):
        self.domains.reset(keep_original)

    def add_domain(self, domain, base=None, lang=None, protocol=constants.PROTOCOL_AUTO):
        return self.domains.add(domain, base, lang, protocol)

    def store_domains(self, store=None):
        """Persist the domain table. Nothing is saved unless this is called."""
        store = store or self.store
        records = self.domains.to_records()
        store.update_option(constants.OPTION_DOMAINS, records)
        logger.info(f"Stored {len(records)} domain(s)")
        domains_stored.send(sender=self.__class__, records=records, store=store)
        return records

    def __repr__(self):
        return (
            f"<DomainContext current={self.current_domain!r} "
            f"original={self.original_domain!r}>"
        )
