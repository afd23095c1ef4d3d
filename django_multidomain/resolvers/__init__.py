from .base import BaseDomainResolver
from .header_resolver import HeaderDomainResolver, get_host_header, resolve_host

__all__ = ["BaseDomainResolver", "HeaderDomainResolver", "get_host_header", "resolve_host"]
