import logging

from django.http import HttpResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from intranet.audit.models import AuditLog
from intranet.audit.utils import audit_request
from intranet.common.errors import domain_error_response, error_response
from intranet.iam.access import require_tenant_and_membership
from intranet.rulesets.exceptions import RuleSetError
from intranet.rulesets.keys import SimulatorKey
from intranet.rulesets.providers import DatabasePayloadProvider, resolve_ruleset
from intranet.rulesets.services import get_ruleset_for_tenant
from intranet.simulators.choices import ANNEX_AUTO
from intranet.simulators.engines import compare_simples_das
from intranet.simulators.report import render_report
from intranet.simulators.serializers import SimplesDasCompareSerializer
from intranet.simulators.services import parse_inputs, run_simulation
from intranet.tenants.models import Tenant

logger = logging.getLogger(__name__)


def _run_and_audit(request, tenant_id, simulator_key):
    run = run_simulation(simulator_key, request.data, DatabasePayloadProvider(tenant_id))
    logger.info("simulation run tenant=%s key=%s defaults=%s", tenant_id, run.simulator_key.value, run.uses_defaults)
    audit_request(
        request,
        action=AuditLog.ACTION_SIMULATION_RUN,
        entity_type="Simulation",
        data={
            "simulator_key": run.simulator_key.value,
            "rulesets": [r.describe() for r in run.rulesets],
            "total": run.total,
        },
    )
    return run


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def simulator_run(request, simulator_key: str):
    """
    POST /v1/simulators/<key>/run
    Headers: Authorization: Bearer <jwt>, X-Tenant-Id: <uuid>
    Body: simulator inputs, e.g. { "faturamento": "30.000,00", "regime": "SIMPLES", ... }

    Uses the tenant's active RuleSet, else the global one, else the defaults.
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    try:
        run = _run_and_audit(request, tenant_id, simulator_key)
    except RuleSetError as exc:
        return domain_error_response(exc)

    return Response(run.to_dict())


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def simulator_report(request, simulator_key: str):
    """POST /v1/simulators/<key>/report - same body as /run, returns printable HTML."""
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    try:
        run = _run_and_audit(request, tenant_id, simulator_key)
    except RuleSetError as exc:
        return domain_error_response(exc)

    tenant = Tenant.objects.filter(id=tenant_id).only("name").first()
    html = render_report(run, tenant_name=tenant.name if tenant else "")
    return HttpResponse(html, content_type="text/html; charset=utf-8")


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def simples_das_compare(request):
    """
    POST /v1/simulators/simples-das/compare
    Body: { "old_ruleset_id": <uuid>, "new_ruleset_id": <uuid>,
            "inputs": { "rbt12": ..., "rpa": ..., "annex": "AUTO", "folha": ... } }

    result is null when either side has nothing to compute.
    """
    tenant_id, member, err = require_tenant_and_membership(request)
    if err:
        return err

    s = SimplesDasCompareSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data

    inputs = parse_inputs(SimulatorKey.SIMPLES_DAS, data["inputs"])

    try:
        old = get_ruleset_for_tenant(data["old_ruleset_id"], tenant_id)
        new = get_ruleset_for_tenant(data["new_ruleset_id"], tenant_id)
        if old.simulator_key != SimulatorKey.SIMPLES_DAS or new.simulator_key != SimulatorKey.SIMPLES_DAS:
            return error_response("INVALID_PAYLOAD", "Both rulesets must be SIMPLES_DAS rulesets", 400)

        old_resolved, new_resolved = resolve_ruleset(old), resolve_ruleset(new)
        fator_r_payload = None
        if inputs.annex == ANNEX_AUTO:
            fator_r_payload = DatabasePayloadProvider(tenant_id).resolve(SimulatorKey.FATOR_R).payload
    except RuleSetError as exc:
        return domain_error_response(exc)

    comparison = compare_simples_das(old_resolved.payload, new_resolved.payload, inputs, fator_r_payload)
    return Response({
        "old_ruleset": old_resolved.describe(),
        "new_ruleset": new_resolved.describe(),
        "result": comparison.to_dict() if comparison else None,
    })
