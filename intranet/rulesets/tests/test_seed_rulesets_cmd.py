import pytest
from django.core.management import call_command

from intranet.rulesets.keys import SimulatorKey
from intranet.rulesets.models import RuleSet
from intranet.rulesets.services import get_active_ruleset


@pytest.mark.django_db
def test_seed_creates_active_global_rows_once(tenant):
    call_command("seed_rulesets")
    call_command("seed_rulesets")

    rows = RuleSet.objects.filter(tenant__isnull=True)
    assert rows.count() == len(SimulatorKey)
    assert all(r.is_active and r.version == 1 for r in rows)
    assert get_active_ruleset(tenant.id, "FERIAS").name == "Férias (Padrão)"


@pytest.mark.django_db
def test_seed_without_activation():
    call_command("seed_rulesets", "--no-activate")

    assert not RuleSet.objects.filter(is_active=True).exists()
