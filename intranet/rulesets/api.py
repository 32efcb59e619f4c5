from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from intranet.common.errors import domain_error_response, error_response
from intranet.iam.access import is_admin, require_tenant_and_membership
from intranet.rulesets.defaults import get_default_payload, get_default_ruleset_name
from intranet.rulesets.exceptions import RuleSetError
from intranet.rulesets.keys import coerce_key
from intranet.rulesets.providers import DatabasePayloadProvider
from intranet.rulesets.serializers import (
    RuleSetCloneSerializer,
    RuleSetCreateSerializer,
    RuleSetSerializer,
    RuleSetUpdateSerializer,
)
from intranet.rulesets.services import (
    activate_ruleset,
    clone_ruleset,
    create_ruleset,
    get_ruleset_for_tenant,
    list_rulesets,
    update_ruleset,
)


def _forbidden():
    return error_response("FORBIDDEN", "Only workspace admins can manage rulesets", 403)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def rulesets_collection(request):
    """
    GET  /v1/rulesets?simulator_key=<key, optional>
    POST /v1/rulesets  (owner/admin)
    Headers: Authorization: Bearer <jwt>, X-Tenant-Id: <uuid>
    Body: { "simulator_key": "HONORARIOS", "name": "...", "payload": {...} }
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    if request.method == "GET":
        try:
            qs = list_rulesets(tenant_id, request.query_params.get("simulator_key") or None)
        except RuleSetError as exc:
            return domain_error_response(exc)
        return Response({"items": RuleSetSerializer(qs, many=True).data})

    if not is_admin(member):
        return _forbidden()

    s = RuleSetCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data

    try:
        ruleset = create_ruleset(
            tenant_id=tenant_id,
            simulator_key=data["simulator_key"],
            payload=data["payload"],
            name=data.get("name") or "",
            actor=request.user,
        )
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response({"ruleset": RuleSetSerializer(ruleset).data}, status=201)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def ruleset_active(request):
    """
    GET /v1/rulesets/active?simulator_key=<key>

    ruleset is null when the defaults are in use (is_fallback=true).
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    try:
        resolved = DatabasePayloadProvider(tenant_id).resolve(request.query_params.get("simulator_key"))
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response({
        "simulator_key": resolved.simulator_key.value,
        "ruleset": RuleSetSerializer(resolved.ruleset).data if resolved.ruleset else None,
        "payload": resolved.raw,
        "is_fallback": resolved.is_fallback,
    })


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def ruleset_defaults(request, simulator_key: str):
    """GET /v1/rulesets/defaults/<key> - seed content for the editor."""
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    try:
        key = coerce_key(simulator_key)
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response({
        "simulator_key": key.value,
        "name": get_default_ruleset_name(key),
        "payload": get_default_payload(key),
    })


@api_view(["GET", "PATCH"])
@permission_classes([IsAuthenticated])
def ruleset_detail(request, ruleset_id):
    """
    GET   /v1/rulesets/<id>
    PATCH /v1/rulesets/<id>  (owner/admin)
    Body: { "name": "...", "payload": {...} }  both optional, at least one

    PATCH edits in place and keeps the version number.
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    try:
        ruleset = get_ruleset_for_tenant(ruleset_id, tenant_id)
    except RuleSetError as exc:
        return domain_error_response(exc)

    if request.method == "GET":
        return Response({"ruleset": RuleSetSerializer(ruleset).data})

    if not is_admin(member):
        return _forbidden()

    s = RuleSetUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data

    try:
        ruleset = update_ruleset(
            ruleset,
            payload=data.get("payload"),
            name=data.get("name"),
            actor=request.user,
            tenant_id=tenant_id,
        )
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response({"ruleset": RuleSetSerializer(ruleset).data})


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def ruleset_activate(request, ruleset_id):
    """POST /v1/rulesets/<id>/activate  (owner/admin)"""
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err
    if not is_admin(member):
        return _forbidden()

    try:
        ruleset = get_ruleset_for_tenant(ruleset_id, tenant_id)
        ruleset = activate_ruleset(ruleset, actor=request.user, tenant_id=tenant_id)
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response({"ruleset": RuleSetSerializer(ruleset).data})


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def ruleset_clone(request, ruleset_id):
    """
    POST /v1/rulesets/<id>/clone  (owner/admin)
    Body: { "name": "..." }  optional

    Copies a tenant or global row into a new inactive tenant version.
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err
    if not is_admin(member):
        return _forbidden()

    s = RuleSetCloneSerializer(data=request.data)
    s.is_valid(raise_exception=True)

    try:
        source = get_ruleset_for_tenant(ruleset_id, tenant_id)
        ruleset = clone_ruleset(source, tenant_id=tenant_id, name=s.validated_data.get("name") or "", actor=request.user)
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response({"ruleset": RuleSetSerializer(ruleset).data}, status=201)
