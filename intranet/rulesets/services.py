"""
RuleSet store: lookups, versioned writes and activation.

Writes validate the payload against the simulator schema first, and emit
one audit row after the database work succeeds.
"""
import logging
from copy import deepcopy

from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from intranet.audit.models import AuditLog
from intranet.audit.utils import audit
from intranet.rulesets.exceptions import GlobalRuleSetReadOnly, RuleSetNotFound, VersionConflict
from intranet.rulesets.keys import coerce_key
from intranet.rulesets.models import RuleSet
from intranet.rulesets.payloads import validate_payload

logger = logging.getLogger(__name__)

ENTITY_TYPE = "RuleSet"


def _siblings(tenant_id, simulator_key):
    qs = RuleSet.objects.filter(simulator_key=simulator_key)
    if tenant_id is None:
        return qs.filter(tenant__isnull=True)
    return qs.filter(tenant_id=tenant_id)


def _audit(ruleset, action, actor, tenant_id, data):
    audit(
        tenant_id=ruleset.tenant_id or tenant_id,
        action=action,
        entity_type=ENTITY_TYPE,
        entity_id=ruleset.id,
        actor_user_id=getattr(actor, "id", None),
        actor_email=getattr(actor, "email", "") or "",
        data=data,
    )


def visible_rulesets(tenant_id):
    """Rows of the tenant plus the global rows."""
    return RuleSet.objects.filter(Q(tenant_id=tenant_id) | Q(tenant__isnull=True))


def list_rulesets(tenant_id, simulator_key=None):
    qs = visible_rulesets(tenant_id)
    if simulator_key:
        qs = qs.filter(simulator_key=coerce_key(simulator_key))
    return qs.order_by("simulator_key", "-version", "-created_at")


def get_ruleset_for_tenant(ruleset_id, tenant_id) -> RuleSet:
    ruleset = visible_rulesets(tenant_id).filter(id=ruleset_id).first()
    if ruleset is None:
        raise RuleSetNotFound()
    return ruleset


def get_active_ruleset(tenant_id, simulator_key):
    """
    The tenant's active row, else the active global row, else None.
    Callers fall back to the default payload on None.
    """
    key = coerce_key(simulator_key)
    if tenant_id:
        ruleset = _siblings(tenant_id, key).filter(is_active=True).first()
        if ruleset is not None:
            return ruleset
    return _siblings(None, key).filter(is_active=True).order_by("-version").first()


def ensure_manageable(ruleset: RuleSet, actor) -> None:
    if ruleset.is_global and not getattr(actor, "is_staff", False):
        raise GlobalRuleSetReadOnly()


def create_ruleset(*, tenant_id, simulator_key, payload, name="", actor=None) -> RuleSet:
    """
    Inserts the next version for (tenant, simulator_key), inactive.

    The sibling rows are locked while the next version is computed; a
    concurrent insert that still collides surfaces as VersionConflict.
    """
    key = coerce_key(simulator_key)
    payload = validate_payload(key, payload)

    try:
        with transaction.atomic():
            # FOR UPDATE cannot be combined with an aggregate on postgres
            versions = list(_siblings(tenant_id, key).select_for_update().values_list("version", flat=True))
            version = max(versions, default=0) + 1
            ruleset = RuleSet.objects.create(
                tenant_id=tenant_id,
                simulator_key=key.value,
                version=version,
                name=(name or "").strip()[:120] or f"Versão {version}",
                payload=payload,
                is_active=False,
                created_by=getattr(actor, "id", None),
            )
    except IntegrityError:
        logger.warning("ruleset version conflict tenant=%s key=%s", tenant_id, key.value)
        raise VersionConflict() from None

    logger.info("ruleset created id=%s tenant=%s key=%s version=%s", ruleset.id, tenant_id, key.value, version)
    _audit(ruleset, AuditLog.ACTION_RULESET_CREATED, actor, tenant_id, {"simulator_key": key.value, "version": version})
    return ruleset


def update_ruleset(ruleset: RuleSet, *, payload=None, name=None, actor=None, tenant_id=None) -> RuleSet:
    """
    Overwrites name and/or payload in place. The version number is kept,
    so the audit row carries the payload being replaced.
    """
    ensure_manageable(ruleset, actor)

    previous_payload = ruleset.payload
    fields = ["updated_at"]
    if payload is not None:
        ruleset.payload = validate_payload(ruleset.simulator_key, payload)
        fields.append("payload")
    if name is not None and name.strip():
        ruleset.name = name.strip()[:120]
        fields.append("name")
    ruleset.save(update_fields=fields)

    data = {
        "simulator_key": ruleset.simulator_key,
        "version": ruleset.version,
        "was_active": ruleset.is_active,
    }
    if payload is not None:
        data["previous_payload"] = previous_payload
    if ruleset.is_active:
        logger.info("active ruleset edited in place id=%s key=%s", ruleset.id, ruleset.simulator_key)
    _audit(ruleset, AuditLog.ACTION_RULESET_UPDATED, actor, tenant_id, data)
    return ruleset


def clone_ruleset(ruleset: RuleSet, *, tenant_id, name="", actor=None) -> RuleSet:
    """New inactive version in the tenant, starting from ruleset's payload."""
    return create_ruleset(
        tenant_id=tenant_id,
        simulator_key=ruleset.simulator_key,
        payload=deepcopy(ruleset.payload),
        name=name or f"{ruleset.name} (Clone)",
        actor=actor,
    )


def activate_ruleset(ruleset: RuleSet, *, actor=None, tenant_id=None) -> RuleSet:
    """
    Makes ruleset the only active row of its (tenant, simulator_key).
    Deactivation and activation commit together.
    """
    ensure_manageable(ruleset, actor)

    now = timezone.now()
    with transaction.atomic():
        siblings = _siblings(ruleset.tenant_id, ruleset.simulator_key)
        list(siblings.select_for_update().values_list("id", flat=True))
        deactivated = siblings.filter(is_active=True).exclude(id=ruleset.id).update(is_active=False, updated_at=now)
        RuleSet.objects.filter(id=ruleset.id).update(is_active=True, updated_at=now)

    ruleset.refresh_from_db()
    logger.info(
        "ruleset activated id=%s key=%s version=%s deactivated=%s",
        ruleset.id, ruleset.simulator_key, ruleset.version, deactivated,
    )
    _audit(
        ruleset,
        AuditLog.ACTION_RULESET_ACTIVATED,
        actor,
        tenant_id,
        {"simulator_key": ruleset.simulator_key, "version": ruleset.version},
    )
    return ruleset
