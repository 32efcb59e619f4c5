from intranet.rulesets.payloads import HonorariosPayload
from intranet.simulators.choices import Segmento
from intranet.simulators.engines.types import SIGN_MINUS, BreakdownItem, HonorariosInput, SimulationResult
from intranet.simulators.formatting import format_currency, format_percent

SEGMENTO_LABELS = dict(Segmento.choices)


def calculate_honorarios(inputs: HonorariosInput, payload: HonorariosPayload) -> SimulationResult:
    """
    Monthly accounting fee: a revenue-based value floored at baseMin,
    adjusted by segment, plus a per-employee addend, minus the optional
    discounts (each a fraction of the pre-discount subtotal).
    """
    rate = payload.regime_percentual.get(inputs.regime, 0.0)
    fator = payload.fator_segmento.get(inputs.segmento, 1.0)

    valor_base = max(payload.base_min, inputs.faturamento * rate)
    ajuste_segmento = valor_base * (fator - 1)
    valor_funcionarios = inputs.num_funcionarios * payload.adic_funcionario
    subtotal = valor_base + ajuste_segmento + valor_funcionarios

    breakdown = [
        BreakdownItem(
            label="Valor Base",
            base=inputs.faturamento,
            formula_text=f"MAX({format_currency(payload.base_min)}, {format_percent(rate)} × Faturamento)",
            amount=valor_base,
        ),
        BreakdownItem(
            label=f"Ajuste {SEGMENTO_LABELS.get(inputs.segmento, inputs.segmento)}",
            base=valor_base,
            formula_text=f"Valor Base × {format_percent(fator - 1)}",
            amount=ajuste_segmento,
        ),
        BreakdownItem(
            label="Adicional Funcionários",
            base=inputs.num_funcionarios,
            formula_text=f"{inputs.num_funcionarios} × {format_currency(payload.adic_funcionario)}",
            amount=valor_funcionarios,
        ),
    ]

    discounts = (
        (inputs.sistema_financeiro, "Desconto Sistema Financeiro", payload.desconto_sistema_financeiro),
        (inputs.ponto_eletronico, "Desconto Ponto Eletrônico", payload.desconto_ponto_eletronico),
    )
    total_descontos = 0.0
    for enabled, label, discount_rate in discounts:
        if not enabled:
            continue
        valor = subtotal * discount_rate
        total_descontos += valor
        breakdown.append(
            BreakdownItem(
                label=label,
                base=subtotal,
                formula_text=f"{format_percent(discount_rate)} × {format_currency(subtotal)}",
                amount=valor,
                sign=SIGN_MINUS,
            )
        )

    total = subtotal - total_descontos
    return SimulationResult(total=total, breakdown=tuple(breakdown), total_anual=total * 12)
