import logging

from celery import shared_task

from intranet.audit.models import AuditLog
from intranet.audit.utils import retention_cutoff

logger = logging.getLogger(__name__)


@shared_task(name="intranet.audit.tasks.prune_audit_logs")
def prune_audit_logs() -> int:
    """
    Runs daily. Deletes audit rows older than AUDIT_RETENTION_DAYS.
    """
    cutoff = retention_cutoff()
    deleted, _ = AuditLog.objects.filter(created_at__lt=cutoff).delete()
    if deleted:
        logger.info("pruned %s audit rows older than %s", deleted, cutoff.isoformat())
    return deleted
