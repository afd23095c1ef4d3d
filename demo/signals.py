from django.dispatch import receiver

from django_multidomain.signals import domain_redirect, domains_stored

HEALTH_CHECK_PATHS = ("/healthz/", "/healthz")


@receiver(domain_redirect)
def skip_health_check_redirect(sender, domain, request, **kwargs):
    # Load balancers probe every domain on the same path
    if request.path in HEALTH_CHECK_PATHS:
        request.multidomain_skip_redirect = True


@receiver(domains_stored)
def stored_signal(sender, records, **kwargs):
    print(f"stored {len(records)} domain(s)")
