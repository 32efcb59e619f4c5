from intranet.common.errors import error_response
from intranet.iam.models import TenantMembership


def require_tenant_and_membership(request):
    """
    Returns (tenant_id, membership, error_response). Exactly one of
    membership / error_response is set.
    """
    tenant_id = getattr(request, "tenant_id", None)
    if not tenant_id:
        return None, None, error_response("TENANT_REQUIRED", "X-Tenant-Id header is required", 400)

    member = TenantMembership.objects.filter(tenant_id=tenant_id, user_id=request.user.id).first()
    if not member:
        return tenant_id, None, error_response("FORBIDDEN", "User is not a member of this tenant", 403)
    return tenant_id, member, None


def is_admin(member: TenantMembership) -> bool:
    # owner/admin manage rulesets and read the audit trail
    return member.role in TenantMembership.ADMIN_ROLES
