"""
Custom Exception Classes for django-multidomain

This module defines the exceptions raised by the domain resolution and URL
rewriting engine. None of them is meant to reach a visitor: the rewriting
entry points catch them and degrade to "pass the value through unmodified"
or "use the original domain".

Exceptions in this module:
    - MultiDomainError: Base class for every error raised by this package
    - MalformedURL: Raised when a URL has no parseable host
    - InvalidDomainEntry: Raised when a configured domain record is unusable
    - UnknownFilter: Raised when a filter point name is not registered

Usage:
    from django_multidomain.exceptions import MalformedURL

    try:
        host = host_of(url)
    except MalformedURL:
        # Leave the URL as it is
        logger.debug(f"Skipping rewrite of {url!r}")
"""


class MultiDomainError(Exception):
    """Base exception for django-multidomain."""
    pass


class MalformedURL(MultiDomainError, ValueError):
    """
    Exception raised when a URL cannot be reduced to a host.

    This exception is raised when:
    - The URL has no scheme/authority part (e.g. "example.com/path")
    - The authority part is empty (e.g. "http:///path")
    - The port is not a number (e.g. "http://example.com:abc/")

    Attributes:
        url (str): The offending URL

    Examples:
        ```python
        from django_multidomain.parsing import host_of
        from django_multidomain.exceptions import MalformedURL

        try:
            host_of("/relative/path")
        except MalformedURL as e:
            print(e.url)
        ```

    Note:
        ``DomainContext.fix_url`` never lets this exception escape; it returns
        the URL unchanged instead.
    """

    def __init__(self, url, message=None):
        self.url = url
        super().__init__(message or f"Unable to parse a host from URL {url!r}")


class InvalidDomainEntry(MultiDomainError, ValueError):
    """
    Exception raised when a domain record cannot enter the domain table.

    The configuration loader skips such records with a warning, so this is
    only seen by code building ``DomainEntry`` objects directly.
    """

    def __init__(self, record, message=None):
        self.record = record
        super().__init__(message or f"Invalid domain entry: {record!r}")


class UnknownFilter(MultiDomainError, KeyError):
    """Raised by ``DomainContext.apply_filter`` for an unregistered filter name."""
    pass
