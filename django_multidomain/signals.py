"""
Django Signals for Multi-Domain Events

Signals let projects observe or extend domain handling without changing
django-multidomain itself.

Signal Documentation:
    - domain_redirect: Sent before the base path restriction is checked
    - domains_stored: Sent after the domain list was written to the store

Usage:
    ```python
    from django.dispatch import receiver
    from django_multidomain.signals import domain_redirect

    @receiver(domain_redirect)
    def log_domain(sender, domain, request, **kwargs):
        logger.info(f"Serving {request.path} on {domain}")
    ```
"""
from django.dispatch import Signal

domain_redirect = Signal()
"""
Sent by ``MultiDomainMiddleware`` once the current domain is resolved and
before the redirect decision is made.

Sender: The middleware class

Providing Arguments:
    - domain (str): The resolved current domain
    - request (HttpRequest): The request being handled
    - context (DomainContext): The resolved request context

Return values of receivers are ignored. A receiver that wants to take over
redirection can raise an exception handled by the project or set
``request.multidomain_skip_redirect = True``.
"""

domains_stored = Signal()
"""
Sent by ``DomainContext.store_domains`` after the domain list was persisted.

Providing Arguments:
    - records (list[dict]): The stored ``{host, base, lang, protocol}`` rows
    - store (BaseOptionStore): The store written to
"""
