"""
SEO link tags for multi-domain pages.

Two tags are produced for the ``<head>`` of a page:

    - ``hreflang`` alternates: one per configured domain that has a
      language, plus one ``x-default`` for the original domain
    - ``canonical``: a single link to the page on the original domain, only
      when ``ADD_CANONICAL`` is enabled; the query string is left out

Output for a request to ``/about`` with ``{"a.com": en, "example.com": -}``:

    <link rel="alternate" href="http://a.com/about/" hreflang="en" />
    <link rel="alternate" href="http://example.com/about/" hreflang="x-default" />
"""
from django.utils.html import format_html

from .constants import constants

HREFLANG_TEMPLATE = '<link rel="alternate" href="{}" hreflang="{}" />'
CANONICAL_TEMPLATE = '<link rel="canonical" href="{}" />'


def get_canonical_path(request) -> str:
    """Current path with leading and trailing slashes, without the query string."""
    if request is None:
        return "/"

    path = "/" + request.path.lstrip("/")
    if not path.endswith("/"):
        path += "/"
    return path


def get_localized_path(request) -> str:
    """Current path with leading and trailing slashes, plus the query string."""
    path = get_canonical_path(request)
    if request is None:
        return path

    query = request.META.get("QUERY_STRING", "")
    if query:
        path = f"{path}?{query}"

    return path


def format_lang(lang) -> str:
    return str(lang).replace("_", "-")


def href_lang_tag(url, lang=constants.HREFLANG_DEFAULT) -> str:
    return format_html(HREFLANG_TEMPLATE, url, format_lang(lang))


def canonical_link_tag(url) -> str:
    return format_html(CANONICAL_TEMPLATE, url)


def hreflang_tags(context, request) -> list[str]:
    """Return the ``hreflang`` link tags for every configured domain."""
    path = get_localized_path(request)
    tags = []

    for domain in context.domains:
        url = f"{context.resolve_protocol(domain)}://{domain}{path}"

        lang = context.get_domain_lang(domain)
        if lang:
            tags.append(href_lang_tag(url, lang))

        if domain == context.original_domain:
            tags.append(href_lang_tag(url))

    return tags


def canonical_tag(context, request) -> str:
    """Return the canonical link tag, or ``""`` when canonical links are disabled."""
    if not context.add_canonical or not context.original_domain:
        return ""

    domain = context.original_domain
    url = f"{context.resolve_protocol(domain)}://{domain}{get_canonical_path(request)}"
    return canonical_link_tag(url)
