from django.urls import path
from intranet.audit.api import audit_logs, audit_create

urlpatterns = [
    path("audit", audit_create, name="audit-create"),
    path("audit/logs", audit_logs, name="audit-logs"),
]
