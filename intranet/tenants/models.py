import uuid
from django.db import models


class Tenant(models.Model):
    """
    An accounting firm's workspace. RuleSets and audit rows are scoped to it.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    status = models.CharField(max_length=32, default="active")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [models.Index(fields=["status"], name="tenants_ten_status_idx")]

    def __str__(self) -> str:
        return self.name
