import pytest
from django.db import IntegrityError, transaction

from intranet.audit.models import AuditLog
from intranet.rulesets.defaults import get_default_payload
from intranet.rulesets.exceptions import GlobalRuleSetReadOnly, PayloadValidationError, RuleSetNotFound
from intranet.rulesets.keys import SimulatorKey
from intranet.rulesets.models import RuleSet
from intranet.rulesets.services import (
    activate_ruleset,
    clone_ruleset,
    create_ruleset,
    get_active_ruleset,
    get_ruleset_for_tenant,
    list_rulesets,
    update_ruleset,
)

KEY = SimulatorKey.RESCISAO


def _create(tenant, actor=None, **overrides):
    payload = get_default_payload(KEY)
    payload.update(overrides)
    return create_ruleset(tenant_id=tenant.id if tenant else None, simulator_key=KEY, payload=payload, actor=actor)


def _global(key=KEY, version=1, is_active=True, **payload_overrides):
    payload = get_default_payload(key)
    payload.update(payload_overrides)
    return RuleSet.objects.create(
        tenant=None, simulator_key=key, version=version, name="Global", payload=payload, is_active=is_active
    )


@pytest.mark.django_db
def test_create_numbers_versions_per_tenant_and_key(tenant, other_tenant, user):
    first = _create(tenant, actor=user)
    second = _create(tenant, actor=user)
    elsewhere = _create(other_tenant)
    ferias = create_ruleset(
        tenant_id=tenant.id, simulator_key="FERIAS", payload=get_default_payload(SimulatorKey.FERIAS)
    )

    assert (first.version, second.version) == (1, 2)
    assert elsewhere.version == 1
    assert ferias.version == 1
    assert not first.is_active and not second.is_active
    assert second.name == "Versão 2"
    assert first.created_by == user.id


@pytest.mark.django_db
def test_create_records_audit(tenant, user):
    ruleset = _create(tenant, actor=user)

    row = AuditLog.objects.get(action=AuditLog.ACTION_RULESET_CREATED)
    assert row.tenant_id == tenant.id
    assert row.entity_type == "RuleSet"
    assert row.entity_id == str(ruleset.id)
    assert row.actor_email == user.email
    assert row.data_json == {"simulator_key": "RESCISAO", "version": 1}


@pytest.mark.django_db
def test_create_rejects_invalid_payload_without_writing(tenant):
    with pytest.raises(PayloadValidationError):
        create_ruleset(tenant_id=tenant.id, simulator_key=KEY, payload={"multaFgts": "0.4"})

    assert not RuleSet.objects.exists()
    assert not AuditLog.objects.exists()


@pytest.mark.django_db
def test_activation_leaves_exactly_one_active_row(tenant, user):
    rows = [_create(tenant) for _ in range(3)]

    activate_ruleset(rows[0], actor=user)
    activate_ruleset(rows[2], actor=user)

    active = RuleSet.objects.filter(tenant=tenant, simulator_key=KEY, is_active=True)
    assert list(active.values_list("id", flat=True)) == [rows[2].id]

    audit_rows = AuditLog.objects.filter(action=AuditLog.ACTION_RULESET_ACTIVATED).order_by("created_at", "id")
    assert [r.data_json["version"] for r in audit_rows] == [1, 3]


@pytest.mark.django_db
def test_activation_does_not_touch_other_tenants_or_keys(tenant, other_tenant, user):
    mine = _create(tenant)
    theirs = _create(other_tenant)
    activate_ruleset(theirs)
    ferias = create_ruleset(tenant_id=tenant.id, simulator_key="FERIAS", payload=get_default_payload("FERIAS"))
    activate_ruleset(ferias)

    activate_ruleset(mine, actor=user)

    theirs.refresh_from_db()
    ferias.refresh_from_db()
    assert theirs.is_active
    assert ferias.is_active


@pytest.mark.django_db
def test_active_lookup_prefers_tenant_over_global(tenant):
    global_row = _global()

    assert get_active_ruleset(tenant.id, KEY) == global_row

    mine = _create(tenant)
    assert get_active_ruleset(tenant.id, KEY) == global_row

    activate_ruleset(mine)
    assert get_active_ruleset(tenant.id, KEY) == mine


@pytest.mark.django_db
def test_active_lookup_without_rows_is_none(tenant):
    assert get_active_ruleset(tenant.id, KEY) is None


@pytest.mark.django_db
def test_update_keeps_version_and_audits_previous_payload(tenant, user):
    ruleset = _create(tenant)
    activate_ruleset(ruleset)
    previous = dict(ruleset.payload)
    new_payload = get_default_payload(KEY)
    new_payload["multaFgts"] = 0.5

    updated = update_ruleset(ruleset, payload=new_payload, name="Multa 50%", actor=user)

    updated.refresh_from_db()
    assert updated.version == 1
    assert updated.payload["multaFgts"] == 0.5
    assert updated.name == "Multa 50%"
    row = AuditLog.objects.get(action=AuditLog.ACTION_RULESET_UPDATED)
    assert row.data_json["was_active"] is True
    assert row.data_json["previous_payload"] == previous


@pytest.mark.django_db
def test_update_revalidates_payload(tenant):
    ruleset = _create(tenant)

    with pytest.raises(PayloadValidationError):
        update_ruleset(ruleset, payload={"multaFgts": 0.4})

    ruleset.refresh_from_db()
    assert ruleset.payload == get_default_payload(KEY)


@pytest.mark.django_db
def test_global_rows_are_read_only_for_non_staff(tenant, user):
    global_row = _global(is_active=False)

    with pytest.raises(GlobalRuleSetReadOnly):
        activate_ruleset(global_row, actor=user, tenant_id=tenant.id)
    with pytest.raises(GlobalRuleSetReadOnly):
        update_ruleset(global_row, name="x", actor=user)


@pytest.mark.django_db
def test_staff_can_activate_global_rows(staff_user):
    old = _global(version=1, is_active=True)
    new = _global(version=2, is_active=False, multaFgts=0.3)

    activate_ruleset(new, actor=staff_user)

    old.refresh_from_db()
    new.refresh_from_db()
    assert not old.is_active
    assert new.is_active


@pytest.mark.django_db
def test_clone_copies_global_into_tenant(tenant, user):
    global_row = _global(multaFgts=0.35)
    _create(tenant)

    clone = clone_ruleset(global_row, tenant_id=tenant.id, actor=user)

    assert clone.tenant_id == tenant.id
    assert clone.version == 2
    assert clone.name == "Global (Clone)"
    assert clone.payload["multaFgts"] == 0.35
    assert not clone.is_active


@pytest.mark.django_db
def test_listing_and_lookup_are_tenant_scoped(tenant, other_tenant):
    global_row = _global()
    mine = _create(tenant)
    theirs = _create(other_tenant)

    listed = list(list_rulesets(tenant.id, "rescisao"))

    assert mine in listed and global_row in listed
    assert theirs not in listed
    assert get_ruleset_for_tenant(global_row.id, tenant.id) == global_row
    with pytest.raises(RuleSetNotFound):
        get_ruleset_for_tenant(theirs.id, tenant.id)


@pytest.mark.django_db
def test_database_allows_one_active_global_row_per_key():
    _global(version=1, is_active=True)

    with pytest.raises(IntegrityError), transaction.atomic():
        _global(version=2, is_active=True)

    _global(version=2, is_active=False)
    _global(key=SimulatorKey.FERIAS, version=1, is_active=True)
    assert RuleSet.objects.filter(tenant__isnull=True, is_active=True).count() == 2


@pytest.mark.django_db
def test_database_rejects_duplicate_global_version():
    _global(version=1, is_active=False)

    with pytest.raises(IntegrityError), transaction.atomic():
        _global(version=1, is_active=False)
