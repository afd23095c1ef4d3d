"""
Template tags for multi-domain pages.

Usage in templates:
    {% load multidomain_tags %}

    In <head>:
        {% hreflang_tags %}
        {% canonical_tag %}

    In <body>:
        <body class="{% multidomain_body_class 'home' %}">
        <img src="{% multidomain_url image_url %}">
        {% multidomain_content post.body %}
        Served by {% current_domain %}

All tags need the ``request`` in the template context
(``django.template.context_processors.request``) and
``MultiDomainMiddleware`` in ``MIDDLEWARE``. Without them the head tags
render nothing and the other tags return their argument unchanged.
"""
from django import template
from django.utils.safestring import SafeData, mark_safe

from django_multidomain import seo

register = template.Library()


def _get_context(template_context):
    request = template_context.get("request")
    return request, getattr(request, "multidomain", None)


def _keep_safe(original, value):
    return mark_safe(value) if isinstance(original, SafeData) else value


@register.simple_tag(takes_context=True)
def hreflang_tags(context):
    request, domain_context = _get_context(context)
    if domain_context is None:
        return ""

    return mark_safe("\n".join(seo.hreflang_tags(domain_context, request)))


@register.simple_tag(takes_context=True)
def canonical_tag(context):
    request, domain_context = _get_context(context)
    if domain_context is None:
        return ""

    return seo.canonical_tag(domain_context, request)


@register.simple_tag(takes_context=True)
def current_domain(context):
    _, domain_context = _get_context(context)
    return domain_context.current_domain if domain_context else ""


@register.simple_tag(takes_context=True)
def multidomain_url(context, url):
    _, domain_context = _get_context(context)
    if domain_context is None:
        return url
    return _keep_safe(url, domain_context.fix_url(url))


@register.simple_tag(takes_context=True)
def multidomain_content(context, content):
    _, domain_context = _get_context(context)
    if domain_context is None:
        return content
    return _keep_safe(content, domain_context.fix_content_urls(content))


@register.simple_tag(takes_context=True)
def multidomain_body_class(context, *classes):
    _, domain_context = _get_context(context)
    if domain_context is None:
        return " ".join(classes)
    return " ".join(domain_context.add_domain_body_class(classes))
