def multidomain(request):
    """
    Expose the resolved domains to templates.

    Add ``django_multidomain.context_processors.multidomain`` to the
    ``context_processors`` option of the template engine.
    """
    context = getattr(request, "multidomain", None)
    if context is None:
        return {}

    return {
        "MULTIDOMAIN_DOMAIN": context.current_domain,
        "MULTIDOMAIN_ORIGINAL_DOMAIN": context.original_domain,
        "MULTIDOMAIN_DOMAIN_LANG": context.get_domain_lang(),
    }
