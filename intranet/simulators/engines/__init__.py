from intranet.simulators.engines.ferias import calculate_ferias
from intranet.simulators.engines.fiscal import (
    FatorRResult,
    SimplesDasComparison,
    SimplesDasResult,
    calculate_fator_r,
    calculate_simples_das,
    compare_simples_das,
)
from intranet.simulators.engines.honorarios import calculate_honorarios
from intranet.simulators.engines.rescisao import calculate_rescisao
from intranet.simulators.engines.types import (
    BreakdownItem,
    FatorRInput,
    FeriasInput,
    HonorariosInput,
    RescisaoInput,
    SimplesDasInput,
    SimulationResult,
)

__all__ = [
    "BreakdownItem",
    "FatorRInput",
    "FatorRResult",
    "FeriasInput",
    "HonorariosInput",
    "RescisaoInput",
    "SimplesDasComparison",
    "SimplesDasInput",
    "SimplesDasResult",
    "SimulationResult",
    "calculate_fator_r",
    "calculate_ferias",
    "calculate_honorarios",
    "calculate_rescisao",
    "calculate_simples_das",
    "compare_simples_das",
]
