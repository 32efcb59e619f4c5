from django.db import models
from django.utils import timezone


class AuditLog(models.Model):
    """
    Append-only trail of administrative actions and simulation runs.
    Rows older than settings.AUDIT_RETENTION_DAYS are pruned.
    """
    ACTION_RULESET_CREATED = "RULESET_CREATED"
    ACTION_RULESET_UPDATED = "RULESET_UPDATED"
    ACTION_RULESET_ACTIVATED = "RULESET_ACTIVATED"
    ACTION_SIMULATION_RUN = "SIMULATION_RUN"

    id = models.BigAutoField(primary_key=True)

    tenant_id = models.UUIDField(null=True, blank=True, db_index=True)
    actor_user_id = models.BigIntegerField(null=True, blank=True)
    actor_email = models.CharField(max_length=254, blank=True, default="")

    action = models.CharField(max_length=64, db_index=True)
    entity_type = models.CharField(max_length=64)
    entity_id = models.CharField(max_length=64, null=True, blank=True)

    data_json = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        indexes = [
            models.Index(fields=["tenant_id", "created_at"], name="audit_tenant_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.action} {self.entity_type}:{self.entity_id}"
