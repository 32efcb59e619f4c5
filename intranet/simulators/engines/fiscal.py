"""
Simples Nacional helpers: the Fator R annex classification and the
monthly DAS estimate from the annex revenue bands.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from intranet.rulesets.payloads import FatorRPayload, SimplesBand, SimplesDasPayload
from intranet.simulators.choices import ANNEX_AUTO
from intranet.simulators.engines.types import FatorRInput, SimplesDasInput


@dataclass(frozen=True)
class FatorRResult:
    fator_r: float
    annex: str
    threshold: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SimplesDasResult:
    annex: str
    band: SimplesBand
    aliquota_efetiva: float
    das: float
    # set when the annex was resolved through Fator R
    fator_r: float | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SimplesDasComparison:
    old: SimplesDasResult
    new: SimplesDasResult

    @property
    def delta(self) -> float:
        return self.new.das - self.old.das

    def to_dict(self) -> dict:
        return {"old": self.old.to_dict(), "new": self.new.to_dict(), "delta": self.delta}


def calculate_fator_r(inputs: FatorRInput, payload: FatorRPayload) -> FatorRResult:
    fator_r = inputs.folha / inputs.rbt12 if inputs.rbt12 else 0.0
    annex = payload.annex_if_ge if fator_r >= payload.threshold else payload.annex_if_lt
    return FatorRResult(fator_r=fator_r, annex=annex, threshold=payload.threshold)


def select_band(bands, rbt12: float) -> SimplesBand | None:
    """
    First band whose [min, max] holds rbt12. Between two bands (the
    cent-wide gaps of the official tables) the lower one applies; past
    the table, the last one.
    """
    for band in bands:
        if band.contains(rbt12):
            return band
    if not bands or rbt12 <= 0:
        return None
    below = [band for band in bands if band.min <= rbt12]
    if below:
        return max(below, key=lambda band: band.min)
    return bands[-1]


def calculate_simples_das(
    inputs: SimplesDasInput,
    payload: SimplesDasPayload,
    fator_r_payload: FatorRPayload | None = None,
) -> SimplesDasResult | None:
    """
    Returns None when there is nothing to compute (no revenue in the
    period or in the trailing twelve months, or an annex with no bands).
    """
    if inputs.rbt12 <= 0 or inputs.rpa <= 0:
        return None

    annex = inputs.annex
    fator_r = None
    if annex == ANNEX_AUTO:
        resolved = calculate_fator_r(
            FatorRInput(rbt12=inputs.rbt12, folha=inputs.folha),
            fator_r_payload or FatorRPayload(),
        )
        annex, fator_r = resolved.annex, resolved.fator_r

    band = select_band(payload.bands_for(annex), inputs.rbt12)
    if band is None:
        return None

    aliquota_efetiva = (inputs.rbt12 * band.aliquota_nominal - band.deducao) / inputs.rbt12
    return SimplesDasResult(
        annex=annex,
        band=band,
        aliquota_efetiva=aliquota_efetiva,
        das=inputs.rpa * aliquota_efetiva,
        fator_r=fator_r,
    )


def compare_simples_das(
    old_payload: SimplesDasPayload,
    new_payload: SimplesDasPayload,
    inputs: SimplesDasInput,
    fator_r_payload: FatorRPayload | None = None,
) -> SimplesDasComparison | None:
    old = calculate_simples_das(inputs, old_payload, fator_r_payload)
    new = calculate_simples_das(inputs, new_payload, fator_r_payload)
    if old is None or new is None:
        return None
    return SimplesDasComparison(old=old, new=new)
