from django.db.models import Q
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from intranet.audit.models import AuditLog
from intranet.audit.serializers import AuditLogSerializer, AuditCreateSerializer
from intranet.audit.utils import audit_request, retention_cutoff
from intranet.iam.access import require_tenant_and_membership
from intranet.iam.models import TenantMembership
from intranet.iam.permissions import IsTenantMember, HasRole


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsTenantMember, HasRole.with_roles(*TenantMembership.ADMIN_ROLES)])
def audit_logs(request):
    """
    GET /v1/audit/logs
    Headers: Authorization: Bearer <jwt>, X-Tenant-Id: <uuid>

    Query:
      search=<actor email or entity id, optional>
      action=<action, optional; ALL = no filter>
      entity=<entity type, optional; ALL = no filter>
      page=<int, default 1>
      page_size=<int, default 15, max 100>
    """
    tenant_id = getattr(request, "tenant_id", None)

    search = (request.query_params.get("search") or "").strip()
    action = (request.query_params.get("action") or "").strip()
    entity = (request.query_params.get("entity") or "").strip()

    try:
        page = int(request.query_params.get("page") or 1)
    except ValueError:
        page = 1
    page = max(1, page)

    try:
        page_size = int(request.query_params.get("page_size") or 15)
    except ValueError:
        page_size = 15
    page_size = max(1, min(100, page_size))

    qs = AuditLog.objects.filter(tenant_id=tenant_id, created_at__gte=retention_cutoff()).order_by("-created_at", "-id")

    if search:
        qs = qs.filter(Q(actor_email__icontains=search) | Q(entity_id__icontains=search))
    if action and action != "ALL":
        qs = qs.filter(action=action)
    if entity and entity != "ALL":
        qs = qs.filter(entity_type=entity)

    total = qs.count()
    offset = (page - 1) * page_size
    items = qs[offset: offset + page_size]

    return Response({
        "items": AuditLogSerializer(items, many=True).data,
        "page": {"page": page, "page_size": page_size, "total": total},
    })


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def audit_create(request):
    """
    POST /v1/audit
    Body: { "action": "...", "entity_type": "...", "entity_id": "...", "metadata": {...} }
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    s = AuditCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data

    row = audit_request(
        request,
        action=data["action"],
        entity_type=data["entity_type"],
        entity_id=data.get("entity_id") or None,
        data=data.get("metadata") or {},
    )
    return Response({"ok": row is not None}, status=201)
