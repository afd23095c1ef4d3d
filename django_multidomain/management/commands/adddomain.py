from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from django_multidomain.constants import constants
from django_multidomain.context import DomainContext
from django_multidomain.stores import activate, get_option_store
from django_multidomain.validators import (
    strip_scheme,
    validate_domain_host,
    validate_protocol,
)


class Command(BaseCommand):
    help = "Add a domain (or update an existing one) and store the domain list"

    def add_arguments(self, parser):
        parser.add_argument("host", help="Domain, optionally with a port (example.com:8080)")
        parser.add_argument("--base", help="Base path every request must start with")
        parser.add_argument("--lang", help="Locale code used in hreflang tags (en_US)")
        parser.add_argument(
            "--protocol",
            default=constants.PROTOCOL_AUTO,
            help="http, https or auto (default: auto)",
        )
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Remove every other domain before adding this one",
        )
        parser.add_argument(
            "--no-keep-original",
            action="store_true",
            help="With --reset, remove the original domain as well",
        )

    def handle(self, *args, **options):
        host = strip_scheme(options["host"].strip()).rstrip("/")
        protocol = options["protocol"]

        try:
            validate_domain_host(host)
            validate_protocol(protocol)
        except ValidationError as e:
            raise CommandError(" ".join(e.messages))

        store = get_option_store()
        added = activate(store)
        if added:
            self.stdout.write(self.style.WARNING(f"Initialized options: {', '.join(added)}"))

        context = DomainContext.from_store(store)

        if options["reset"]:
            context.reset_domains(keep_original=not options["no_keep_original"])

        updating = host in context.domains
        context.add_domain(host, options["base"], options["lang"], protocol)
        context.store_domains()

        verb = "Updated" if updating else "Added"
        self.stdout.write(self.style.SUCCESS(f"{verb} domain {host} ({len(context.domains)} total)"))
