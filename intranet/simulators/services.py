"""
Runs a simulator end to end: parse inputs, resolve payloads through a
PayloadProvider, call the engine.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Callable

from django.utils import timezone

from intranet.rulesets.keys import SimulatorKey, coerce_key
from intranet.rulesets.providers import PayloadProvider, ResolvedPayload
from intranet.simulators.choices import ANNEX_AUTO
from intranet.simulators.engines import (
    calculate_fator_r,
    calculate_ferias,
    calculate_honorarios,
    calculate_rescisao,
    calculate_simples_das,
)
from intranet.simulators.engines.fiscal import FatorRResult, SimplesDasResult
from intranet.simulators.engines.types import SimulationResult
from intranet.simulators.serializers import (
    FatorRInputSerializer,
    FeriasInputSerializer,
    HonorariosInputSerializer,
    RescisaoInputSerializer,
    SimplesDasInputSerializer,
)


def _single(key, engine):
    def run(inputs, provider: PayloadProvider):
        resolved = provider.resolve(key)
        return engine(inputs, resolved.payload), (resolved,)

    return run


def _run_simples_das(inputs, provider: PayloadProvider):
    das = provider.resolve(SimulatorKey.SIMPLES_DAS)
    if inputs.annex != ANNEX_AUTO:
        return calculate_simples_das(inputs, das.payload), (das,)
    fator_r = provider.resolve(SimulatorKey.FATOR_R)
    return calculate_simples_das(inputs, das.payload, fator_r.payload), (das, fator_r)


@dataclass(frozen=True)
class Simulator:
    key: SimulatorKey
    input_serializer: type
    run: Callable[[Any, PayloadProvider], tuple]


SIMULATORS = {
    SimulatorKey.HONORARIOS: Simulator(
        SimulatorKey.HONORARIOS, HonorariosInputSerializer, _single(SimulatorKey.HONORARIOS, calculate_honorarios)
    ),
    SimulatorKey.RESCISAO: Simulator(
        SimulatorKey.RESCISAO, RescisaoInputSerializer, _single(SimulatorKey.RESCISAO, calculate_rescisao)
    ),
    SimulatorKey.FERIAS: Simulator(
        SimulatorKey.FERIAS, FeriasInputSerializer, _single(SimulatorKey.FERIAS, calculate_ferias)
    ),
    SimulatorKey.FATOR_R: Simulator(
        SimulatorKey.FATOR_R, FatorRInputSerializer, _single(SimulatorKey.FATOR_R, calculate_fator_r)
    ),
    SimulatorKey.SIMPLES_DAS: Simulator(SimulatorKey.SIMPLES_DAS, SimplesDasInputSerializer, _run_simples_das),
}


@dataclass(frozen=True)
class SimulationRun:
    simulator_key: SimulatorKey
    inputs: Any
    # None when the engine has nothing to compute (DAS without revenue)
    result: Any
    rulesets: tuple[ResolvedPayload, ...] = ()
    created_at: datetime = field(default_factory=timezone.now)

    @property
    def total(self):
        if isinstance(self.result, SimulationResult):
            return self.result.total
        if isinstance(self.result, SimplesDasResult):
            return self.result.das
        if isinstance(self.result, FatorRResult):
            return self.result.fator_r
        return None

    @property
    def uses_defaults(self) -> bool:
        return any(r.is_fallback for r in self.rulesets)

    def to_dict(self) -> dict:
        return {
            "simulator_key": self.simulator_key.value,
            "inputs": asdict(self.inputs),
            "result": self.result.to_dict() if self.result is not None else None,
            "rulesets": [r.describe() for r in self.rulesets],
            "uses_defaults": self.uses_defaults,
            "created_at": self.created_at.isoformat(),
        }


def parse_inputs(simulator_key, data):
    """Raises rest_framework ValidationError on bad input."""
    simulator = SIMULATORS[coerce_key(simulator_key)]
    s = simulator.input_serializer(data=data)
    s.is_valid(raise_exception=True)
    return s.to_input()


def run_simulation(simulator_key, data, provider: PayloadProvider) -> SimulationRun:
    key = coerce_key(simulator_key)
    inputs = parse_inputs(key, data)
    result, used = SIMULATORS[key].run(inputs, provider)
    return SimulationRun(simulator_key=key, inputs=inputs, result=result, rulesets=tuple(used))
