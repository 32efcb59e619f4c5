import logging
from datetime import timedelta

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from intranet.audit.models import AuditLog

logger = logging.getLogger(__name__)


def audit(
    tenant_id,
    action,
    entity_type,
    entity_id=None,
    actor_user_id=None,
    actor_email="",
    data=None,
):
    """
    Best-effort write: a failure is logged and never propagates to the
    operation being audited. Returns the row, or None when the write failed.
    """
    try:
        with transaction.atomic():
            return AuditLog.objects.create(
                tenant_id=tenant_id,
                action=action,
                entity_type=entity_type,
                entity_id=str(entity_id) if entity_id is not None else None,
                actor_user_id=actor_user_id,
                actor_email=actor_email or "",
                data_json=data or {},
            )
    except DatabaseError:
        logger.exception("audit write failed action=%s entity=%s:%s", action, entity_type, entity_id)
        return None


def audit_request(request, action, entity_type, entity_id=None, data=None):
    user = getattr(request, "user", None)
    return audit(
        tenant_id=getattr(request, "tenant_id", None),
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        actor_user_id=getattr(user, "id", None),
        actor_email=getattr(user, "email", "") or "",
        data=data,
    )


def retention_cutoff(now=None):
    now = now or timezone.now()
    return now - timedelta(days=int(settings.AUDIT_RETENTION_DAYS))
