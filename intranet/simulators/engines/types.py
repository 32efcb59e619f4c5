from __future__ import annotations

from dataclasses import asdict, dataclass, field

from intranet.simulators.choices import ANNEX_AUTO, Regime, Segmento, TipoRescisao

SIGN_PLUS = "+"
SIGN_MINUS = "-"


@dataclass(frozen=True)
class BreakdownItem:
    """One signed line of a calculation, with a readable formula."""

    label: str
    base: float
    formula_text: str
    amount: float
    sign: str = SIGN_PLUS

    @property
    def signed_amount(self) -> float:
        return -self.amount if self.sign == SIGN_MINUS else self.amount


@dataclass(frozen=True)
class SimulationResult:
    total: float
    breakdown: tuple[BreakdownItem, ...] = field(default_factory=tuple)
    total_anual: float | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class HonorariosInput:
    faturamento: float
    regime: str = Regime.SIMPLES
    segmento: str = Segmento.COMERCIO
    num_funcionarios: int = 0
    sistema_financeiro: bool = False
    ponto_eletronico: bool = False


@dataclass(frozen=True)
class RescisaoInput:
    salario: float
    incluir_ferias: bool = False
    incluir_decimo_terceiro: bool = False
    faltas_mes: int = 0
    anos_servico: int = 0
    tipo_rescisao: str = TipoRescisao.SEM_JUSTA_CAUSA


@dataclass(frozen=True)
class FeriasInput:
    salario: float
    dias_ferias: int = 30
    abono_pecuniario: bool = False
    # informational only, not part of the formula
    dependentes: int = 0
    adicionais_percent: float = 0


@dataclass(frozen=True)
class FatorRInput:
    rbt12: float
    folha: float


@dataclass(frozen=True)
class SimplesDasInput:
    rbt12: float
    rpa: float
    annex: str = ANNEX_AUTO
    # only used to resolve the annex when annex == AUTO
    folha: float = 0
