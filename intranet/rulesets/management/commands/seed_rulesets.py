from django.core.management.base import BaseCommand
from django.db import transaction

from intranet.rulesets.defaults import get_default_payload, get_default_ruleset_name
from intranet.rulesets.keys import SimulatorKey
from intranet.rulesets.models import RuleSet


class Command(BaseCommand):
    help = "Idempotently create the global version-1 RuleSet of every simulator from the default payloads"

    def add_arguments(self, parser):
        parser.add_argument(
            "--no-activate",
            action="store_true",
            help="Create the rows inactive (the defaults still apply through the fallback)",
        )

    def handle(self, *args, **options):
        activate = not options["no_activate"]
        created = 0

        for key in SimulatorKey:
            with transaction.atomic():
                exists = RuleSet.objects.filter(tenant__isnull=True, simulator_key=key.value).exists()
                if exists:
                    self.stdout.write(f"{key.value}: global ruleset already present, skipping")
                    continue

                RuleSet.objects.create(
                    tenant=None,
                    simulator_key=key.value,
                    version=1,
                    name=get_default_ruleset_name(key),
                    payload=get_default_payload(key),
                    is_active=activate,
                )
                created += 1
                self.stdout.write(f"{key.value}: created global v1")

        self.stdout.write(self.style.SUCCESS(f"Done. {created} ruleset(s) created."))
