"""
Typed payload variants, one per simulator key.

Stored payloads are plain JSON; parse_payload() validates one against its
simulator's schema and returns the matching dataclass, which is the only
thing the calculation engines accept.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union

from intranet.rulesets.exceptions import PayloadValidationError
from intranet.rulesets.keys import SimulatorKey, coerce_key
from intranet.rulesets.schemas import SCHEMAS


@dataclass(frozen=True)
class HonorariosPayload:
    base_min: float
    regime_percentual: dict[str, float]
    fator_segmento: dict[str, float]
    adic_funcionario: float
    desconto_sistema_financeiro: float
    desconto_ponto_eletronico: float

    @classmethod
    def from_dict(cls, data: dict) -> HonorariosPayload:
        return cls(
            base_min=float(data["baseMin"]),
            regime_percentual={k: float(v) for k, v in data["regimePercentual"].items()},
            fator_segmento={k: float(v) for k, v in data["fatorSegmento"].items()},
            adic_funcionario=float(data["adicFuncionario"]),
            desconto_sistema_financeiro=float(data["descontoSistemaFinanceiro"]),
            desconto_ponto_eletronico=float(data["descontoPontoEletronico"]),
        )


@dataclass(frozen=True)
class RescisaoPayload:
    multa_fgts: float
    multa_acordo: float
    dias_aviso_previo_base: float
    dias_aviso_previo_por_ano: float

    @classmethod
    def from_dict(cls, data: dict) -> RescisaoPayload:
        return cls(
            multa_fgts=float(data["multaFgts"]),
            multa_acordo=float(data["multaAcordo"]),
            dias_aviso_previo_base=float(data["diasAvisoPrevioBase"]),
            dias_aviso_previo_por_ano=float(data["diasAvisoPrevioPorAno"]),
        )


@dataclass(frozen=True)
class FeriasPayload:
    terco_constitucional: bool = True
    limite_dias_abono: float = 10

    @classmethod
    def from_dict(cls, data: dict) -> FeriasPayload:
        return cls(
            terco_constitucional=bool(data["tercoConstitucional"]),
            limite_dias_abono=float(data["limiteDiasAbono"]),
        )


@dataclass(frozen=True)
class FatorRPayload:
    threshold: float = 0.28
    annex_if_ge: str = "III"
    annex_if_lt: str = "V"

    @classmethod
    def from_dict(cls, data: dict) -> FatorRPayload:
        return cls(
            threshold=float(data["threshold"]),
            annex_if_ge=str(data["annex_if_ge"]),
            annex_if_lt=str(data["annex_if_lt"]),
        )


@dataclass(frozen=True)
class SimplesBand:
    min: float
    max: float
    aliquota_nominal: float
    deducao: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict:
        return {
            "min": self.min,
            "max": self.max,
            "aliquota_nominal": self.aliquota_nominal,
            "deducao": self.deducao,
        }


@dataclass(frozen=True)
class SimplesDasPayload:
    tables: dict[str, tuple[SimplesBand, ...]] = field(default_factory=dict)

    def bands_for(self, annex: str) -> tuple[SimplesBand, ...]:
        return self.tables.get(annex, ())

    @classmethod
    def from_dict(cls, data: dict) -> SimplesDasPayload:
        return cls(
            tables={
                annex: tuple(
                    SimplesBand(
                        min=float(b["min"]),
                        max=float(b["max"]),
                        aliquota_nominal=float(b["aliquota_nominal"]),
                        deducao=float(b["deducao"]),
                    )
                    for b in rows
                )
                for annex, rows in data["tables"].items()
            }
        )


Payload = Union[HonorariosPayload, RescisaoPayload, FeriasPayload, FatorRPayload, SimplesDasPayload]

PAYLOAD_TYPES = {
    SimulatorKey.HONORARIOS: HonorariosPayload,
    SimulatorKey.RESCISAO: RescisaoPayload,
    SimulatorKey.FERIAS: FeriasPayload,
    SimulatorKey.FATOR_R: FatorRPayload,
    SimulatorKey.SIMPLES_DAS: SimplesDasPayload,
}


def load_json_payload(payload):
    """Accepts an already-decoded object or the raw JSON text from the editor."""
    if isinstance(payload, (bytes, str)):
        try:
            return json.loads(payload)
        except ValueError:
            raise PayloadValidationError("Payload is not valid JSON", details={"payload": ["Invalid JSON."]}) from None
    return payload


def validate_payload(simulator_key, payload) -> dict:
    """
    Returns the decoded payload unchanged when it matches the simulator's
    schema; raises PayloadValidationError with the field errors otherwise.
    """
    key = coerce_key(simulator_key)
    payload = load_json_payload(payload)

    schema = SCHEMAS[key](data=payload)
    if not schema.is_valid():
        errors = json.loads(json.dumps(schema.errors))
        raise PayloadValidationError(f"Payload does not match the {key.value} schema", details=errors)
    return payload


def parse_payload(simulator_key, payload) -> Payload:
    key = coerce_key(simulator_key)
    return PAYLOAD_TYPES[key].from_dict(validate_payload(key, payload))
