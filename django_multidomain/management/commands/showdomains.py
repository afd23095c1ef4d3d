import csv
import json

from django.core.management.base import BaseCommand

from django_multidomain.context import DomainContext
from django_multidomain.stores import get_option_store


class Command(BaseCommand):
    help = "List the configured domains with their base path, language and protocol"

    def add_arguments(self, parser):
        parser.add_argument(
            "--format",
            type=str,
            choices=["table", "json", "csv"],
            default="table",
            help="Output format (default: table)",
        )

    def handle(self, *args, **options):
        context = DomainContext.from_store(get_option_store())
        records = context.domains.to_records()

        if not records:
            self.stdout.write(self.style.WARNING("No domains configured."))
            return

        output_format = options.get("format")
        if output_format == "json":
            self.stdout.write(json.dumps(records, indent=2))
        elif output_format == "csv":
            self._output_csv(records)
        else:
            self._output_table(context, records)

    def _output_table(self, context, records):
        """Display domains in a formatted table"""
        self.stdout.write(self.style.SUCCESS(f"\nFound {len(records)} domain(s):\n"))

        header = f"{'Domain':<30} {'Base path':<20} {'Language':<10} {'Protocol':<10}"
        self.stdout.write(self.style.SUCCESS(header))
        self.stdout.write(self.style.SUCCESS("-" * len(header)))

        for record in records:
            row = (
                f"{record['host']:<30} {record['base'] or '-':<20} "
                f"{record['lang'] or '-':<10} {record['protocol']:<10}"
            )
            if record["host"] == context.original_domain:
                row += " (original)"
            self.stdout.write(row)

    def _output_csv(self, records):
        """Display domains in CSV format"""
        writer = csv.writer(self.stdout)
        writer.writerow(["Host", "Base", "Lang", "Protocol"])
        for record in records:
            writer.writerow(
                [record["host"], record["base"] or "", record["lang"] or "", record["protocol"]]
            )
