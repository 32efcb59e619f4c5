from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from intranet.common.errors import error_response
from intranet.iam.access import require_tenant_and_membership, is_admin
from intranet.tenants.models import Tenant


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def tenant_me(request):
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    tenant = Tenant.objects.filter(id=tenant_id).first()
    if not tenant:
        return error_response("TENANT_NOT_FOUND", "Tenant not found", 404)

    return Response({
        "tenant": {"id": str(tenant.id), "name": tenant.name, "status": tenant.status},
        "membership": {"role": member.role, "is_admin": is_admin(member)},
        "user": {"id": request.user.id, "email": request.user.email},
    })
