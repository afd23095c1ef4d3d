import logging
from typing import Callable

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.utils.cache import patch_vary_headers
from django.utils.deprecation import MiddlewareMixin

from .conf import settings
from .context import DomainContext
from .signals import domain_redirect
from .stores import get_option_store
from .utils import import_class

logger = logging.getLogger(__name__)


class MultiDomainMiddleware(MiddlewareMixin):
    """
    Resolve the current domain, enforce its base path and rewrite the
    outgoing HTML so every link points to the domain that served it.

    Place it near the top of ``MIDDLEWARE``, after ``SecurityMiddleware``,
    so it sees the final response body.

    The body is read after the view returns, so the middleware is sync only;
    under ASGI Django runs it in a thread.
    """

    sync_capable = True
    async_capable = False

    def __init__(
        self, get_response: Callable[[HttpRequest], HttpResponse] | None = ...
    ) -> None:
        resolver_class = import_class(settings.DOMAIN_RESOLVER, "resolver")
        self.resolver = resolver_class()
        self.store = get_option_store()

        super().__init__(get_response)

    def __call__(self, request):
        context = DomainContext.from_store(
            self.store,
            current_domain=self.resolver.resolve(request),
            request=request,
        )
        request.multidomain = context

        domain_redirect.send(
            sender=self.__class__,
            domain=context.current_domain,
            request=request,
            context=context,
        )

        if not getattr(request, "multidomain_skip_redirect", False):
            redirect_url = context.redirect_url(request.path_info)
            if redirect_url:
                logger.info(
                    f"Redirecting {request.path_info!r} on {context.current_domain} "
                    f"to {redirect_url}"
                )
                return HttpResponseRedirect(redirect_url)

        response = self.get_response(request)

        self.rewrite_response(context, response)
        if settings.SEND_CORS_HEADERS:
            self.add_cors_headers(context, request, response)

        return response

    def rewrite_response(self, context, response):
        if response.streaming or response.has_header("Content-Encoding"):
            return

        content_type = response.get("Content-Type", "").split(";")[0].strip()
        if content_type not in settings.REWRITE_CONTENT_TYPES:
            return

        charset = response.charset
        try:
            content = response.content.decode(charset)
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Not rewriting response body: cannot decode as {charset}")
            return

        rewritten = context.fix_content_urls(content)

        if rewritten != content:
            response.content = rewritten.encode(charset)
            if response.has_header("Content-Length"):
                response["Content-Length"] = str(len(response.content))

    def add_cors_headers(self, context, request, response):
        origin = request.headers.get("Origin")
        if not origin:
            return

        if origin in context.add_allowed_origins():
            response["Access-Control-Allow-Origin"] = origin
        patch_vary_headers(response, ("Origin",))
