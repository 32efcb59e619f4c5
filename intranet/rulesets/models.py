import uuid

from django.db import models
from django.utils import timezone

from intranet.rulesets.keys import SimulatorKey
from intranet.tenants.models import Tenant


class RuleSet(models.Model):
    """
    A named, versioned parameter payload for one simulator.

    tenant NULL marks a global row, visible to every tenant and used when a
    tenant has no active row of its own.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name="rulesets", null=True, blank=True)

    simulator_key = models.CharField(max_length=32, choices=SimulatorKey.choices)
    version = models.PositiveIntegerField()
    name = models.CharField(max_length=120)
    payload = models.JSONField(default=dict)
    is_active = models.BooleanField(default=False)

    created_by = models.BigIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["simulator_key", "-version"]
        indexes = [
            models.Index(fields=["tenant", "simulator_key", "is_active"], name="ruleset_tenant_key_active_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["tenant", "simulator_key", "version"],
                name="uq_ruleset_tenant_key_version",
            ),
            models.UniqueConstraint(
                fields=["tenant", "simulator_key"],
                name="uq_ruleset_one_active",
                condition=models.Q(is_active=True),
            ),
            models.UniqueConstraint(
                fields=["simulator_key", "version"],
                name="uq_ruleset_global_key_version",
                condition=models.Q(tenant__isnull=True),
            ),
            models.UniqueConstraint(
                fields=["simulator_key"],
                name="uq_ruleset_global_one_active",
                condition=models.Q(tenant__isnull=True, is_active=True),
            ),
        ]

    def __str__(self):
        return f"{self.simulator_key} v{self.version} ({self.name})"

    @property
    def is_global(self) -> bool:
        return self.tenant_id is None
