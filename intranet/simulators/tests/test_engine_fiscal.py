import pytest

from intranet.rulesets.defaults import get_default_payload
from intranet.rulesets.keys import SimulatorKey
from intranet.rulesets.payloads import FatorRPayload, SimplesDasPayload, parse_payload
from intranet.simulators.engines import (
    FatorRInput,
    SimplesDasInput,
    calculate_fator_r,
    calculate_simples_das,
    compare_simples_das,
)
from intranet.simulators.engines.fiscal import select_band

FATOR_R = FatorRPayload(threshold=0.28, annex_if_ge="III", annex_if_lt="V")


@pytest.fixture
def tables():
    return parse_payload(SimulatorKey.SIMPLES_DAS, get_default_payload(SimulatorKey.SIMPLES_DAS))


def test_fator_r_at_threshold_uses_higher_annex():
    result = calculate_fator_r(FatorRInput(rbt12=100000, folha=28000), FATOR_R)

    assert result.fator_r == 0.28
    assert result.annex == "III"
    assert result.threshold == 0.28


def test_fator_r_below_threshold():
    assert calculate_fator_r(FatorRInput(rbt12=100000, folha=27999), FATOR_R).annex == "V"


def test_fator_r_without_revenue_is_zero():
    result = calculate_fator_r(FatorRInput(rbt12=0, folha=5000), FATOR_R)

    assert result.fator_r == 0
    assert result.annex == "V"


def test_band_boundary_belongs_to_lower_band(tables):
    bands = tables.bands_for("I")

    assert select_band(bands, 180000) is bands[0]
    assert select_band(bands, 180000.01) is bands[1]


def test_revenue_past_the_table_uses_last_band(tables):
    bands = tables.bands_for("I")

    assert select_band(bands, 5_000_000) is bands[-1]


def test_revenue_between_bands_uses_lower_band(tables):
    bands = tables.bands_for("I")

    assert select_band(bands, 180000.005) is bands[0]

    result = calculate_simples_das(SimplesDasInput(rbt12=180000.005, rpa=10000, annex="I"), tables)
    assert result.band is bands[0]
    assert result.das == pytest.approx(400)


def test_das_first_band(tables):
    result = calculate_simples_das(SimplesDasInput(rbt12=180000, rpa=10000, annex="I"), tables)

    assert result.annex == "I"
    assert result.aliquota_efetiva == pytest.approx(0.04)
    assert result.das == pytest.approx(400)
    assert result.fator_r is None


def test_das_effective_rate_uses_deduction(tables):
    result = calculate_simples_das(SimplesDasInput(rbt12=240000, rpa=20000, annex="III"), tables)

    assert result.band.aliquota_nominal == 0.112
    assert result.aliquota_efetiva == pytest.approx(0.073)
    assert result.das == pytest.approx(1460)


@pytest.mark.parametrize("rbt12,rpa", [(0, 10000), (240000, 0), (-1, 100)])
def test_das_without_revenue_has_no_result(tables, rbt12, rpa):
    assert calculate_simples_das(SimplesDasInput(rbt12=rbt12, rpa=rpa, annex="III"), tables) is None


def test_auto_annex_resolves_through_fator_r(tables):
    high_payroll = calculate_simples_das(SimplesDasInput(rbt12=240000, rpa=20000, folha=72000), tables, FATOR_R)
    no_payroll = calculate_simples_das(SimplesDasInput(rbt12=240000, rpa=20000), tables, FATOR_R)

    assert high_payroll.annex == "III"
    assert high_payroll.fator_r == pytest.approx(0.3)
    assert no_payroll.annex == "V"
    assert no_payroll.aliquota_efetiva == pytest.approx(0.16125)
    assert no_payroll.das == pytest.approx(3225)


def test_annex_without_bands_has_no_result():
    assert calculate_simples_das(SimplesDasInput(rbt12=1000, rpa=100, annex="I"), SimplesDasPayload()) is None


def test_compare_reports_delta(tables):
    raw = get_default_payload(SimulatorKey.SIMPLES_DAS)
    raw["tables"]["I"][0]["aliquota_nominal"] = 0.05
    new = parse_payload(SimulatorKey.SIMPLES_DAS, raw)

    comparison = compare_simples_das(tables, new, SimplesDasInput(rbt12=100000, rpa=10000, annex="I"))

    assert comparison.old.das == pytest.approx(400)
    assert comparison.new.das == pytest.approx(500)
    assert comparison.delta == pytest.approx(100)
    assert comparison.to_dict()["delta"] == pytest.approx(100)


def test_compare_without_result_is_none(tables):
    assert compare_simples_das(tables, tables, SimplesDasInput(rbt12=0, rpa=10000, annex="I")) is None
