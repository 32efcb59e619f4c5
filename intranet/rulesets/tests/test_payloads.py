import json

import pytest

from intranet.rulesets.defaults import get_default_payload, get_default_ruleset_name
from intranet.rulesets.exceptions import PayloadValidationError, UnknownSimulatorError
from intranet.rulesets.keys import SimulatorKey, coerce_key
from intranet.rulesets.payloads import (
    FatorRPayload,
    HonorariosPayload,
    SimplesDasPayload,
    parse_payload,
    validate_payload,
)


@pytest.mark.parametrize("key", list(SimulatorKey))
def test_every_default_payload_is_valid(key):
    payload = get_default_payload(key)

    assert validate_payload(key, payload) == payload
    assert get_default_ruleset_name(key)


def test_default_payload_is_a_copy():
    payload = get_default_payload(SimulatorKey.HONORARIOS)
    payload["baseMin"] = 1

    assert get_default_payload(SimulatorKey.HONORARIOS)["baseMin"] == 450


def test_parse_payload_returns_the_matching_variant():
    honorarios = parse_payload("honorarios", get_default_payload(SimulatorKey.HONORARIOS))
    fator_r = parse_payload("fator-r", get_default_payload(SimulatorKey.FATOR_R))
    simples = parse_payload(SimulatorKey.SIMPLES_DAS, get_default_payload(SimulatorKey.SIMPLES_DAS))

    assert isinstance(honorarios, HonorariosPayload)
    assert honorarios.regime_percentual["LUCRO_REAL"] == 0.021
    assert fator_r == FatorRPayload()
    assert isinstance(simples, SimplesDasPayload)
    assert sorted(simples.tables) == ["I", "II", "III", "IV", "V"]
    assert len(simples.bands_for("III")) == 6


def test_raw_json_text_is_accepted():
    text = json.dumps(get_default_payload(SimulatorKey.RESCISAO))

    assert validate_payload(SimulatorKey.RESCISAO, text)["multaFgts"] == 0.4


def test_malformed_json_is_rejected():
    with pytest.raises(PayloadValidationError) as exc:
        validate_payload(SimulatorKey.RESCISAO, '{"multaFgts": 0.4,')

    assert exc.value.code == "INVALID_PAYLOAD"
    assert "payload" in exc.value.details


def test_missing_field_is_rejected():
    payload = get_default_payload(SimulatorKey.RESCISAO)
    del payload["multaAcordo"]

    with pytest.raises(PayloadValidationError) as exc:
        validate_payload(SimulatorKey.RESCISAO, payload)

    assert "multaAcordo" in exc.value.details


@pytest.mark.parametrize("value", ["0.4", True, None, -0.1, 1.5])
def test_numbers_are_not_coerced(value):
    payload = get_default_payload(SimulatorKey.RESCISAO)
    payload["multaFgts"] = value

    with pytest.raises(PayloadValidationError) as exc:
        validate_payload(SimulatorKey.RESCISAO, payload)

    assert "multaFgts" in exc.value.details


def test_boolean_flag_must_be_boolean():
    payload = get_default_payload(SimulatorKey.FERIAS)
    payload["tercoConstitucional"] = "true"

    with pytest.raises(PayloadValidationError):
        validate_payload(SimulatorKey.FERIAS, payload)


def test_regime_map_must_cover_every_regime():
    payload = get_default_payload(SimulatorKey.HONORARIOS)
    del payload["regimePercentual"]["LUCRO_REAL"]

    with pytest.raises(PayloadValidationError) as exc:
        validate_payload(SimulatorKey.HONORARIOS, payload)

    assert "LUCRO_REAL" in exc.value.details["regimePercentual"]


def test_fator_r_annex_must_be_known():
    payload = get_default_payload(SimulatorKey.FATOR_R)
    payload["annex_if_ge"] = "VI"

    with pytest.raises(PayloadValidationError):
        validate_payload(SimulatorKey.FATOR_R, payload)


def test_simples_tables_need_every_annex():
    payload = get_default_payload(SimulatorKey.SIMPLES_DAS)
    del payload["tables"]["IV"]

    with pytest.raises(PayloadValidationError) as exc:
        validate_payload(SimulatorKey.SIMPLES_DAS, payload)

    assert "IV" in exc.value.details["tables"]


def test_simples_band_min_cannot_exceed_max():
    payload = get_default_payload(SimulatorKey.SIMPLES_DAS)
    payload["tables"]["I"][0]["min"] = 200000

    with pytest.raises(PayloadValidationError):
        validate_payload(SimulatorKey.SIMPLES_DAS, payload)


def test_simples_annex_cannot_be_empty():
    payload = get_default_payload(SimulatorKey.SIMPLES_DAS)
    payload["tables"]["II"] = []

    with pytest.raises(PayloadValidationError):
        validate_payload(SimulatorKey.SIMPLES_DAS, payload)


def test_payload_must_be_an_object():
    with pytest.raises(PayloadValidationError):
        validate_payload(SimulatorKey.FATOR_R, [1, 2, 3])


def test_unknown_simulator_key():
    with pytest.raises(UnknownSimulatorError):
        coerce_key("IRPF")
    with pytest.raises(UnknownSimulatorError):
        validate_payload("IRPF", {})
