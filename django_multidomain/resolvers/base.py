"""
Domain Resolver Base Module

A resolver looks at an incoming request and returns the domain the request
was addressed to, as a ``host[:port]`` string, or ``""`` when the request
carries no usable signal.

The middleware compares the resolved value against the domain table; an
empty or unknown value means "serve the original domain", so a resolver
never has to raise.

Resolver Integration:
    The resolver class is configured in Django settings and imported by the
    middleware at start-up:

    ```python
    MULTIDOMAIN_CONFIG = {
        'DOMAIN_RESOLVER': 'path.to.CustomResolver',
    }
    ```

    A custom resolver only needs a ``resolve(request)`` method:

    ```python
    from django_multidomain.resolvers import BaseDomainResolver

    class ForwardedHostResolver(BaseDomainResolver):
        def resolve(self, request):
            return request.headers.get("X-Forwarded-Host", "")
    ```
"""


class BaseDomainResolver:
    def resolve(self, request) -> str:
        """
        Return the domain for ``request``.

        Args:
            request (django.http.HttpRequest): The incoming request

        Returns:
            str: ``host`` or ``host:port``; ``""`` when unknown

        Raises:
            NotImplementedError: Always raised by base class
        """
        raise NotImplementedError("Subclasses must implement resolve()")
