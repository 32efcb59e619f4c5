"""
Hardcoded fallback payloads, one per simulator.

Used when a tenant has no active RuleSet for a simulator, as the seed
content of the "new RuleSet" editor, and by the seed_rulesets command.
"""
from copy import deepcopy

from intranet.rulesets.keys import SimulatorKey, coerce_key


def _band(min_, max_, aliquota_nominal, deducao):
    return {"min": min_, "max": max_, "aliquota_nominal": aliquota_nominal, "deducao": deducao}


# Simples Nacional revenue ranges (RBT12), shared by every annex
_FAIXAS = (
    (0, 180000),
    (180000.01, 360000),
    (360000.01, 720000),
    (720000.01, 1800000),
    (1800000.01, 3600000),
    (3600000.01, 4800000),
)

# (aliquota nominal, parcela a deduzir) per range
_ANEXOS = {
    "I": ((0.04, 0), (0.073, 5940), (0.095, 13860), (0.107, 22500), (0.143, 87300), (0.19, 378000)),
    "II": ((0.045, 0), (0.078, 5940), (0.1, 13860), (0.112, 22500), (0.147, 85500), (0.3, 720000)),
    "III": ((0.06, 0), (0.112, 9360), (0.135, 17640), (0.16, 35640), (0.21, 125640), (0.33, 648000)),
    "IV": ((0.045, 0), (0.09, 8100), (0.102, 12420), (0.14, 39780), (0.22, 183780), (0.33, 828000)),
    "V": ((0.155, 0), (0.18, 4500), (0.195, 9900), (0.205, 17100), (0.23, 62100), (0.305, 540000)),
}

DEFAULT_PAYLOADS = {
    SimulatorKey.HONORARIOS: {
        "baseMin": 450,
        "regimePercentual": {
            "SIMPLES": 0.012,
            "LUCRO_PRESUMIDO": 0.016,
            "LUCRO_REAL": 0.021,
        },
        "fatorSegmento": {
            "COMERCIO": 1.0,
            "PRESTADOR": 1.1,
            "INDUSTRIA": 1.2,
        },
        "adicFuncionario": 40,
        "descontoSistemaFinanceiro": 0.05,
        "descontoPontoEletronico": 0.05,
    },
    SimulatorKey.RESCISAO: {
        "multaFgts": 0.4,
        "multaAcordo": 0.2,
        "diasAvisoPrevioBase": 30,
        "diasAvisoPrevioPorAno": 3,
    },
    SimulatorKey.FERIAS: {
        "tercoConstitucional": True,
        "limiteDiasAbono": 10,
    },
    SimulatorKey.FATOR_R: {
        "threshold": 0.28,
        "annex_if_ge": "III",
        "annex_if_lt": "V",
    },
    SimulatorKey.SIMPLES_DAS: {
        "tables": {
            annex: [
                _band(faixa[0], faixa[1], aliquota, deducao)
                for faixa, (aliquota, deducao) in zip(_FAIXAS, rates)
            ]
            for annex, rates in _ANEXOS.items()
        },
    },
}

DEFAULT_NAMES = {
    SimulatorKey.HONORARIOS: "Honorários (Padrão)",
    SimulatorKey.RESCISAO: "Rescisão (Padrão)",
    SimulatorKey.FERIAS: "Férias (Padrão)",
    SimulatorKey.FATOR_R: "Fator R (Padrão)",
    SimulatorKey.SIMPLES_DAS: "Simples Nacional (Padrão)",
}


def get_default_payload(simulator_key) -> dict:
    """Returns a fresh copy; callers may mutate it."""
    return deepcopy(DEFAULT_PAYLOADS[coerce_key(simulator_key)])


def get_default_ruleset_name(simulator_key) -> str:
    return DEFAULT_NAMES[coerce_key(simulator_key)]
