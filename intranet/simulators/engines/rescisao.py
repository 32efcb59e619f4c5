from intranet.rulesets.payloads import RescisaoPayload
from intranet.simulators.choices import TipoRescisao
from intranet.simulators.engines.types import SIGN_MINUS, BreakdownItem, RescisaoInput, SimulationResult
from intranet.simulators.formatting import format_currency, format_number, format_percent


def calculate_rescisao(inputs: RescisaoInput, payload: RescisaoPayload) -> SimulationResult:
    salario = inputs.salario
    diaria_text = f"({format_currency(salario)} ÷ 30)"

    breakdown = [
        BreakdownItem(
            label="Salário Base",
            base=salario,
            formula_text=format_currency(salario),
            amount=salario,
        )
    ]

    if inputs.faltas_mes > 0:
        breakdown.append(
            BreakdownItem(
                label="Desconto de Faltas",
                base=inputs.faltas_mes,
                formula_text=f"{inputs.faltas_mes} dias × {diaria_text}",
                amount=inputs.faltas_mes * (salario / 30),
                sign=SIGN_MINUS,
            )
        )

    if inputs.incluir_ferias:
        breakdown.append(
            BreakdownItem(label="Férias", base=salario, formula_text=format_currency(salario), amount=salario)
        )
        breakdown.append(
            BreakdownItem(
                label="1/3 Constitucional",
                base=salario,
                formula_text=f"{format_currency(salario)} ÷ 3",
                amount=salario / 3,
            )
        )

    if inputs.incluir_decimo_terceiro:
        breakdown.append(
            BreakdownItem(label="13º Salário", base=salario, formula_text=format_currency(salario), amount=salario)
        )

    # no 90-day cap: notice accrual is whatever the payload says
    dias_aviso = payload.dias_aviso_previo_base + inputs.anos_servico * payload.dias_aviso_previo_por_ano
    if dias_aviso > 0:
        breakdown.append(
            BreakdownItem(
                label="Aviso Prévio Indenizado",
                base=dias_aviso,
                formula_text=f"{format_number(dias_aviso)} dias × {diaria_text}",
                amount=dias_aviso * (salario / 30),
            )
        )

    if inputs.tipo_rescisao == TipoRescisao.ACORDO:
        multa_rate, multa_label = payload.multa_acordo, "Multa FGTS (Acordo)"
    else:
        multa_rate, multa_label = payload.multa_fgts, "Multa FGTS"
    multa = salario * multa_rate
    if multa:
        breakdown.append(
            BreakdownItem(
                label=multa_label,
                base=salario,
                formula_text=f"{format_percent(multa_rate, digits=0)} × {format_currency(salario)}",
                amount=multa,
            )
        )

    total = sum(item.signed_amount for item in breakdown)
    return SimulationResult(total=total, breakdown=tuple(breakdown))
